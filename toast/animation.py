from __future__ import annotations

import logging
from typing import Callable, Optional

from PySide6.QtCore import QEasingCurve, QObject, QPropertyAnimation, Signal
from PySide6.QtWidgets import QGraphicsOpacityEffect

LOGGER = logging.getLogger(__name__)


class Transition(QObject):
    """Cross-dissolve of an opacity effect with a one-shot completion signal.

    ``finished`` carries ``True`` when the end value was reached and ``False``
    when ``interrupt()`` stopped it early. A transition whose target is destroyed
    mid-way ends without emitting.
    """

    finished = Signal(bool)

    def __init__(
        self,
        effect: QGraphicsOpacityEffect,
        end_value: float,
        duration_ms: int,
        parent: QObject | None = None,
    ):
        super().__init__(parent)
        self._result: Optional[bool] = None
        self.end_value = float(end_value)

        self._animation = QPropertyAnimation(effect, b"opacity", self)
        self._animation.setDuration(max(0, int(duration_ms)))
        self._animation.setStartValue(effect.opacity())
        self._animation.setEndValue(self.end_value)
        self._animation.setEasingCurve(QEasingCurve.Type.InOutQuad)
        self._animation.finished.connect(self._on_animation_finished)

    @property
    def done(self) -> bool:
        return self._result is not None

    @property
    def completed(self) -> Optional[bool]:
        return self._result

    def duration_ms(self) -> int:
        return self._animation.duration()

    def start(self) -> "Transition":
        self._animation.start()
        return self

    def interrupt(self) -> None:
        if self._result is None:
            self._animation.stop()
            self._complete(False)

    def then(self, callback: Callable[[bool], None]) -> "Transition":
        if self._result is not None:
            callback(self._result)
        else:
            self.finished.connect(callback)
        return self

    def _on_animation_finished(self) -> None:
        self._complete(True)

    def _complete(self, completed: bool) -> None:
        if self._result is not None:
            return
        self._result = completed
        LOGGER.debug("Transição de opacidade para %.2f encerrada (completa=%s)", self.end_value, self._result)
        self.finished.emit(self._result)


def fade(
    effect: QGraphicsOpacityEffect,
    end_value: float,
    duration_seconds: float,
    parent: QObject | None = None,
) -> Transition:
    transition = Transition(effect, end_value, int(round(duration_seconds * 1000)), parent=parent)
    return transition.start()
