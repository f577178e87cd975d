from __future__ import annotations


class ToastError(Exception):
    pass


class NoHostContainer(ToastError):
    pass


class ToastThreadError(ToastError, RuntimeError):
    pass


class ToastConfigError(ToastError, ValueError):
    pass
