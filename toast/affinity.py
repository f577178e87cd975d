from __future__ import annotations

from PySide6.QtCore import QThread
from PySide6.QtWidgets import QApplication

from .errors import ToastThreadError


def is_gui_thread() -> bool:
    app = QApplication.instance()
    if app is None:
        return False
    return QThread.currentThread() == app.thread()


def ensure_gui_thread() -> None:
    """Toasts touch the widget tree, so they only run on the QApplication thread."""
    if QApplication.instance() is None:
        raise ToastThreadError("Nenhuma QApplication ativa para exibir o toast.")
    if not is_gui_thread():
        raise ToastThreadError("Toasts só podem ser manipulados na thread da interface.")
