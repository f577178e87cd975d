from __future__ import annotations

import logging
import sys
from typing import Optional

from PySide6.QtWidgets import (
    QApplication, QMainWindow, QWidget,
    QVBoxLayout, QHBoxLayout, QFormLayout,
    QLineEdit, QComboBox, QPushButton, QStyle,
)

from toast.models import DEFAULT_STYLE, ToastDuration, ToastImagePosition, ToastStyle
from toast.presenter import ToastPresenter
from toast.settings import load_style, resolve_prefs_root
from toast.view import ToastView

LOGGER = logging.getLogger(__name__)

DURATION_OPTIONS = [("Curta (3s)", ToastDuration.SHORT), ("Longa (6s)", ToastDuration.LONG)]
POSITION_OPTIONS = [
    ("Esquerda", ToastImagePosition.LEFT),
    ("Direita", ToastImagePosition.RIGHT),
    ("Acima", ToastImagePosition.TOP),
    ("Abaixo", ToastImagePosition.BOTTOM),
]


class ToastDemoWindow(QMainWindow):
    def __init__(self, style: ToastStyle = DEFAULT_STYLE, presenter: Optional[ToastPresenter] = None):
        super().__init__()
        self.setWindowTitle("Toast")

        central = QWidget()
        self.setCentralWidget(central)
        self.presenter = presenter or ToastPresenter(style=style, host_provider=self.centralWidget)

        self.text_edit = QLineEdit("Olá!")
        self.duration_combo = QComboBox()
        for label, value in DURATION_OPTIONS:
            self.duration_combo.addItem(label, value.value)
        self.position_combo = QComboBox()
        for label, value in POSITION_OPTIONS:
            self.position_combo.addItem(label, value.value)

        form = QFormLayout()
        form.addRow("Mensagem", self.text_edit)
        form.addRow("Duração", self.duration_combo)
        form.addRow("Posição da imagem", self.position_combo)

        self.btn_text = QPushButton("Mostrar texto")
        self.btn_image = QPushButton("Mostrar com imagem")
        self.btn_text.clicked.connect(self.show_text_toast)
        self.btn_image.clicked.connect(self.show_image_toast)

        buttons = QHBoxLayout()
        buttons.addWidget(self.btn_text)
        buttons.addWidget(self.btn_image)
        buttons.addStretch(1)

        root = QVBoxLayout(central)
        root.addLayout(form)
        root.addLayout(buttons)
        root.addStretch(1)

    def _duration(self) -> ToastDuration:
        return ToastDuration(self.duration_combo.currentData())

    def show_text_toast(self) -> Optional[ToastView]:
        return self.presenter.show_text(self.text_edit.text(), duration=self._duration())

    def show_image_toast(self) -> Optional[ToastView]:
        icon = self.style().standardIcon(QStyle.StandardPixmap.SP_MessageBoxInformation)
        return self.presenter.show_image_text(
            self.text_edit.text(),
            icon,
            image_position=ToastImagePosition(self.position_combo.currentData()),
            duration=self._duration(),
        )


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = QApplication(sys.argv)
    prefs_root = resolve_prefs_root()
    style = load_style(prefs_root) if prefs_root else DEFAULT_STYLE
    LOGGER.info("Preferências de toast em %s", prefs_root)
    win = ToastDemoWindow(style)
    win.resize(480, 360)
    win.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
