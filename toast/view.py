from __future__ import annotations

import logging
import os
from typing import Any, Optional

from PySide6.QtCore import QEvent, QObject, QRect, QSize, Qt, QTimer, Signal
from PySide6.QtGui import QAccessible, QAccessibleEvent, QIcon, QImage, QPixmap
from PySide6.QtWidgets import (
    QBoxLayout,
    QFrame,
    QGraphicsOpacityEffect,
    QHBoxLayout,
    QLabel,
    QVBoxLayout,
    QWidget,
)

from .affinity import ensure_gui_thread
from .animation import Transition, fade
from .models import (
    DEFAULT_DURATION_POLICY,
    DEFAULT_STYLE,
    ToastDuration,
    ToastDurationPolicy,
    ToastImagePosition,
    ToastRequest,
    ToastState,
    ToastStyle,
)
from .theme import label_stylesheet, panel_stylesheet

LOGGER = logging.getLogger(__name__)


def construction_frame(host_rect: QRect, style: ToastStyle = DEFAULT_STYLE) -> QRect:
    """Coarse box used before the layout runs: host rect inset by the margin at its origin."""
    m = style.host_margin
    return QRect(
        host_rect.x() + m,
        host_rect.y() + m,
        max(0, host_rect.width() - m),
        max(0, host_rect.height() - m),
    )


def anchored_geometry(host_rect: QRect, height: int, style: ToastStyle = DEFAULT_STYLE) -> QRect:
    """Leading/trailing edges on the host margins, bottom edge ``bottom_offset`` above the bottom margin."""
    m = style.host_margin
    width = max(0, host_rect.width() - 2 * m)
    bottom = host_rect.y() + host_rect.height() - m - style.bottom_offset
    return QRect(host_rect.x() + m, bottom - height, width, height)


def to_pixmap(image: Any, size: QSize) -> QPixmap:
    if isinstance(image, QPixmap):
        return image
    if isinstance(image, QImage):
        return QPixmap.fromImage(image)
    if isinstance(image, QIcon):
        return image.pixmap(size)
    if isinstance(image, (str, os.PathLike)):
        return QPixmap(os.fspath(image))
    raise TypeError(f"Imagem de toast não suportada: {type(image).__name__}")


def fitted_pixmap(image: Any, style: ToastStyle = DEFAULT_STYLE) -> QPixmap:
    size = QSize(*style.max_image_size)
    pixmap = to_pixmap(image, size)
    if pixmap.isNull():
        return pixmap
    return pixmap.scaled(
        size,
        Qt.AspectRatioMode.KeepAspectRatio,
        Qt.TransformationMode.SmoothTransformation,
    )


class ToastView(QWidget):
    """Overlay attached to a host widget that fades in, waits and removes itself."""

    removed = Signal()

    def __init__(
        self,
        request: ToastRequest,
        host: QWidget,
        style: ToastStyle = DEFAULT_STYLE,
        duration_policy: ToastDurationPolicy = DEFAULT_DURATION_POLICY,
    ):
        # image conversion must fail before the host is touched
        pixmap = fitted_pixmap(request.image, style) if request.has_image else None

        super().__init__(host)
        self._request = request
        self._host = host
        self._style = style
        self._duration_policy = duration_policy
        self._state = ToastState.CREATED
        self._fade_in: Optional[Transition] = None
        self._fade_out: Optional[Transition] = None
        self.hide_timer: Optional[QTimer] = None

        self.setObjectName("ToastView")
        self.setAccessibleName(request.text)
        self.setGeometry(construction_frame(host.rect(), style))

        self.background = QFrame(self)
        self.background.setObjectName("ToastBackground")
        self.background.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.background.setStyleSheet(panel_stylesheet(style))

        self.text_label = QLabel(request.text, self.background)
        self.text_label.setObjectName("ToastText")
        self.text_label.setWordWrap(True)
        self.text_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.text_label.setStyleSheet(label_stylesheet(style))
        line_height = self.text_label.fontMetrics().lineSpacing()
        self.text_label.setMaximumHeight(line_height * style.max_lines)

        self.image_label: Optional[QLabel] = None
        if pixmap is not None:
            self.image_label = self._build_image_label(pixmap)

        outer = QVBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, 0)
        outer.setSpacing(0)
        outer.addWidget(self.background)
        self._build_content_layout()

        self._opacity = QGraphicsOpacityEffect(self)
        self._opacity.setOpacity(1.0)
        self.setGraphicsEffect(self._opacity)

        host.installEventFilter(self)
        self.anchor()

    @property
    def request(self) -> ToastRequest:
        return self._request

    @property
    def host(self) -> QWidget:
        return self._host

    @property
    def style_config(self) -> ToastStyle:
        return self._style

    @property
    def state(self) -> ToastState:
        return self._state

    @property
    def dismissed(self) -> bool:
        return self._state in (ToastState.DISMISSING, ToastState.REMOVED)

    @property
    def current_transition(self) -> Optional[Transition]:
        return self._fade_out or self._fade_in

    def opacity(self) -> float:
        return self._opacity.opacity()

    def _build_image_label(self, pixmap: QPixmap) -> QLabel:
        size = QSize(*self._style.max_image_size)
        label = QLabel(self.background)
        label.setObjectName("ToastImage")
        label.setFixedSize(size)
        label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        label.setStyleSheet("background: transparent;")
        label.setPixmap(pixmap)
        return label

    def _build_content_layout(self) -> None:
        position = ToastImagePosition(self._request.image_position)
        horizontal = self.image_label is not None and position in (
            ToastImagePosition.LEFT,
            ToastImagePosition.RIGHT,
        )
        layout: QBoxLayout = QHBoxLayout(self.background) if horizontal else QVBoxLayout(self.background)
        pad = self._style.padding
        layout.setContentsMargins(pad, pad, pad, pad)
        layout.setSpacing(self._style.spacing)

        image = self.image_label
        if image is None:
            layout.addWidget(self.text_label)
        elif position is ToastImagePosition.TOP:
            layout.addWidget(image, 0, Qt.AlignmentFlag.AlignHCenter)
            layout.addWidget(self.text_label)
        elif position is ToastImagePosition.BOTTOM:
            layout.addWidget(self.text_label)
            layout.addWidget(image, 0, Qt.AlignmentFlag.AlignHCenter)
        elif position is ToastImagePosition.LEFT:
            layout.addWidget(image, 0, Qt.AlignmentFlag.AlignVCenter)
            layout.addWidget(self.text_label, 1)
        else:
            layout.addWidget(self.text_label, 1)
            layout.addWidget(image, 0, Qt.AlignmentFlag.AlignVCenter)

    def anchor(self) -> None:
        host_rect = self._host.contentsRect()
        width = anchored_geometry(host_rect, 0, self._style).width()
        self.layout().activate()
        height = self.heightForWidth(width)
        if height < 0:
            height = self.sizeHint().height()
        self.setGeometry(anchored_geometry(host_rect, height, self._style))
        self.layout().activate()

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        # host teardown can deliver events after this toast's attributes are cleared
        host = getattr(self, "_host", None)
        if host is not None and watched is host and event.type() == QEvent.Type.Resize:
            self.anchor()
        return False

    def fade_in(self) -> Transition:
        self._opacity.setOpacity(0.0)
        self.show()
        self.raise_()
        self._fade_in = fade(self._opacity, 1.0, self._style.fade_seconds, parent=self)
        self._fade_in.then(self._on_fade_in_finished)
        return self._fade_in

    def _on_fade_in_finished(self, completed: bool) -> None:
        if not completed:
            LOGGER.debug("Fade-in do toast interrompido; temporizador não armado.")
            return
        self._state = ToastState.VISIBLE
        self.start_timer(self._request.duration)

    def start_timer(self, duration: ToastDuration) -> None:
        if self.hide_timer is not None:
            LOGGER.debug("Temporizador do toast já armado; ignorando.")
            return
        self.hide_timer = QTimer(self)
        self.hide_timer.setSingleShot(True)
        self.hide_timer.setInterval(self._duration_policy.milliseconds(duration))
        self.hide_timer.timeout.connect(self._on_hide_timer)
        self.hide_timer.start()

    def _on_hide_timer(self) -> None:
        self.hide_self()

    def hide_self(self) -> Optional[Transition]:
        ensure_gui_thread()
        if self._state is ToastState.REMOVED:
            return self._fade_out

        if self.hide_timer is not None and self.hide_timer.isActive():
            self.hide_timer.stop()

        if self._state is ToastState.DISMISSING:
            return self._fade_out

        if self._fade_in is not None:
            self._fade_in.interrupt()

        self._state = ToastState.DISMISSING
        self.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents, True)
        self.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.clearFocus()
        self.setAccessibleName("")
        QAccessible.updateAccessibility(QAccessibleEvent(self, QAccessible.Event.ObjectHide))

        self._fade_out = fade(self._opacity, 0.0, self._style.fade_seconds, parent=self)
        self._fade_out.then(self._on_fade_out_finished)
        return self._fade_out

    def _on_fade_out_finished(self, completed: bool) -> None:
        if not completed:
            LOGGER.debug("Fade-out do toast interrompido; toast mantido no host.")
            return
        self._detach()

    def _detach(self) -> None:
        if self._state is ToastState.REMOVED:
            return
        self._host.removeEventFilter(self)
        self.hide()
        self.setParent(None)
        self._state = ToastState.REMOVED
        LOGGER.debug("Toast removido do host.")
        self.removed.emit()
        self.deleteLater()
