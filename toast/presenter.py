from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from PySide6.QtWidgets import QApplication, QMainWindow, QWidget

from .affinity import ensure_gui_thread
from .errors import NoHostContainer
from .models import (
    DEFAULT_DURATION_POLICY,
    DEFAULT_STYLE,
    ToastDuration,
    ToastDurationPolicy,
    ToastImagePosition,
    ToastRequest,
    ToastStyle,
)
from .view import ToastView

LOGGER = logging.getLogger(__name__)

HostProvider = Callable[[], Optional[QWidget]]


def active_host() -> Optional[QWidget]:
    """Frontmost window of the running application, or its central widget for main windows."""
    if QApplication.instance() is None:
        return None
    window = QApplication.activeWindow()
    if window is None:
        return None
    if isinstance(window, QMainWindow):
        central = window.centralWidget()
        if central is not None:
            return central
    return window


class ToastPresenter:
    def __init__(
        self,
        style: ToastStyle = DEFAULT_STYLE,
        duration_policy: ToastDurationPolicy = DEFAULT_DURATION_POLICY,
        host_provider: HostProvider | None = None,
    ):
        self.style = style
        self.duration_policy = duration_policy
        self.host_provider = host_provider or active_host

    def show_text(self, text: str, duration: ToastDuration = ToastDuration.SHORT) -> ToastView | None:
        return self.present(ToastRequest(text=text, duration=duration))

    def show_image_text(
        self,
        text: str,
        image: Any,
        image_position: ToastImagePosition = ToastImagePosition.LEFT,
        duration: ToastDuration = ToastDuration.SHORT,
    ) -> ToastView | None:
        return self.present(
            ToastRequest(text=text, image=image, image_position=image_position, duration=duration)
        )

    def present(self, request: ToastRequest) -> ToastView | None:
        """Show ``request`` on the current host; ``None`` when there is no application or host.

        Raises ``ToastThreadError`` when called off the GUI thread.
        """
        try:
            host = self._resolve_host()
        except NoHostContainer:
            LOGGER.info("Nenhuma janela ativa para exibir o toast: %r", request.text)
            return None

        toast = ToastView(request, host, style=self.style, duration_policy=self.duration_policy)
        toast.fade_in()
        LOGGER.debug(
            "Toast exibido (duração=%s, imagem=%s)",
            ToastDuration(request.duration).value,
            ToastImagePosition(request.image_position).value if request.has_image else "-",
        )
        return toast

    def _resolve_host(self) -> QWidget:
        if QApplication.instance() is None:
            raise NoHostContainer("Nenhuma QApplication ativa.")
        ensure_gui_thread()
        host = self.host_provider()
        if host is None:
            raise NoHostContainer("Nenhum container ativo disponível.")
        return host


_default_presenter: ToastPresenter | None = None


def default_presenter() -> ToastPresenter:
    global _default_presenter
    if _default_presenter is None:
        _default_presenter = ToastPresenter()
    return _default_presenter


def show_text(text: str, duration: ToastDuration = ToastDuration.SHORT) -> ToastView | None:
    return default_presenter().show_text(text, duration=duration)


def show_image_text(
    text: str,
    image: Any,
    image_position: ToastImagePosition = ToastImagePosition.LEFT,
    duration: ToastDuration = ToastDuration.SHORT,
) -> ToastView | None:
    return default_presenter().show_image_text(
        text, image, image_position=image_position, duration=duration
    )
