import pytest

pytest.importorskip("PySide6.QtWidgets", reason="PySide6 indisponível no ambiente de teste", exc_type=ImportError)

from PySide6.QtTest import QTest
from PySide6.QtWidgets import QGraphicsOpacityEffect, QWidget

from toast.animation import Transition, fade


def _wait_until(predicate, timeout_ms=2000):
    waited = 0
    while not predicate() and waited < timeout_ms:
        QTest.qWait(10)
        waited += 10
    return predicate()


def _effect(widget, opacity):
    effect = QGraphicsOpacityEffect(widget)
    effect.setOpacity(opacity)
    widget.setGraphicsEffect(effect)
    return effect


def test_fade_completes_and_reports_success(qapp):
    widget = QWidget()
    effect = _effect(widget, 0.0)
    results = []

    transition = fade(effect, 1.0, 0.02, parent=widget)
    transition.then(results.append)

    assert _wait_until(lambda: transition.done)
    assert results == [True]
    assert transition.completed is True
    assert effect.opacity() == pytest.approx(1.0)


def test_interrupt_reports_failure_once(qapp):
    widget = QWidget()
    effect = _effect(widget, 1.0)
    results = []

    transition = fade(effect, 0.0, 10.0, parent=widget)
    transition.finished.connect(results.append)
    transition.interrupt()
    transition.interrupt()

    assert results == [False]
    assert transition.completed is False
    assert effect.opacity() > 0.0


def test_then_after_completion_calls_back_immediately(qapp):
    widget = QWidget()
    effect = _effect(widget, 1.0)
    transition = fade(effect, 0.0, 10.0, parent=widget)
    transition.interrupt()

    late = []
    transition.then(late.append)

    assert late == [False]


def test_transition_reports_requested_duration(qapp):
    widget = QWidget()
    effect = _effect(widget, 0.0)
    transition = Transition(effect, 1.0, 400, parent=widget)

    assert transition.duration_ms() == 400
    assert transition.done is False


def test_destroyed_target_ends_without_emitting(qapp):
    widget = QWidget()
    effect = _effect(widget, 0.0)
    results = []

    transition = fade(effect, 1.0, 10.0, parent=widget)
    transition.finished.connect(results.append)
    widget.setGraphicsEffect(None)
    QTest.qWait(20)

    assert results == []
    assert transition.done is False
