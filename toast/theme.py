from __future__ import annotations

from typing import Tuple

from .models import DEFAULT_STYLE, ToastStyle


def rgba_css(color: Tuple[int, int, int, float]) -> str:
    r, g, b, a = color
    alpha = max(0, min(255, int(round(float(a) * 255))))
    return f"rgba({int(r)}, {int(g)}, {int(b)}, {alpha})"


def panel_stylesheet(style: ToastStyle = DEFAULT_STYLE) -> str:
    return (
        "QFrame#ToastBackground {\n"
        f"    background-color: {rgba_css(style.background_color)};\n"
        f"    border-radius: {style.corner_radius}px;\n"
        "}\n"
    )


def label_stylesheet(style: ToastStyle = DEFAULT_STYLE) -> str:
    return f"color: {style.text_color}; background: transparent;"
