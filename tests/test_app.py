import pytest

pytest.importorskip("PySide6.QtWidgets", reason="PySide6 indisponível no ambiente de teste", exc_type=ImportError)

from PySide6.QtTest import QTest

from app import ToastDemoWindow
from toast.models import ToastDuration, ToastImagePosition
from toast.view import ToastView


def _window():
    win = ToastDemoWindow()
    win.resize(480, 360)
    win.show()
    QTest.qWait(10)
    return win


def test_show_text_toast_uses_central_widget_and_selected_duration(qapp):
    win = _window()
    win.text_edit.setText("Pronto")
    win.duration_combo.setCurrentIndex(1)

    toast = win.show_text_toast()

    assert toast.parentWidget() is win.centralWidget()
    assert toast.request.text == "Pronto"
    assert toast.request.duration is ToastDuration.LONG
    assert toast.image_label is None


def test_show_image_toast_uses_selected_position(qapp):
    win = _window()
    index = win.position_combo.findData(ToastImagePosition.TOP.value)
    win.position_combo.setCurrentIndex(index)

    toast = win.show_image_toast()

    assert toast.request.image_position is ToastImagePosition.TOP
    assert toast.image_label is not None
    assert not toast.image_label.pixmap().isNull()


def test_buttons_trigger_toasts(qapp):
    win = _window()

    win.btn_text.click()
    win.btn_image.click()

    assert len(win.centralWidget().findChildren(ToastView)) == 2
