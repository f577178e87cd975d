from __future__ import annotations

from .models import ToastDuration
from .presenter import ToastPresenter, default_presenter
from .view import ToastView


class ToastNotifier:
    """``notify(title, body)`` sink that shows the message as a text toast."""

    def __init__(self, presenter: ToastPresenter | None = None, duration: ToastDuration = ToastDuration.SHORT):
        self.presenter = presenter
        self.duration = duration

    def notify(self, title: str, body: str) -> ToastView | None:
        text = "\n".join(part for part in (title, body) if part)
        presenter = self.presenter or default_presenter()
        return presenter.show_text(text, duration=self.duration)
