from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from enum import Enum
from typing import Any, Dict, Tuple

from .errors import ToastConfigError


class ToastDuration(str, Enum):
    SHORT = "SHORT"
    LONG = "LONG"


class ToastImagePosition(str, Enum):
    TOP = "TOP"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    BOTTOM = "BOTTOM"


class ToastState(str, Enum):
    CREATED = "CREATED"
    VISIBLE = "VISIBLE"
    DISMISSING = "DISMISSING"
    REMOVED = "REMOVED"


@dataclass(frozen=True)
class ToastDurationPolicy:
    short_seconds: float = 3.0
    long_seconds: float = 6.0

    def seconds(self, duration: ToastDuration) -> float:
        if ToastDuration(duration) is ToastDuration.LONG:
            return self.long_seconds
        return self.short_seconds

    def milliseconds(self, duration: ToastDuration) -> int:
        return int(round(self.seconds(duration) * 1000))


DEFAULT_DURATION_POLICY = ToastDurationPolicy()


@dataclass(frozen=True)
class ToastRequest:
    text: str
    image: Any = None
    image_position: ToastImagePosition = ToastImagePosition.LEFT
    duration: ToastDuration = ToastDuration.SHORT

    @property
    def has_image(self) -> bool:
        return self.image is not None


RGBA = Tuple[int, int, int, float]


@dataclass(frozen=True)
class ToastStyle:
    background_color: RGBA = (51, 51, 51, 0.8)
    text_color: str = "#ffffff"
    corner_radius: int = 4
    fade_seconds: float = 0.4
    max_image_size: Tuple[int, int] = (32, 32)
    padding: int = 10
    spacing: int = 8
    host_margin: int = 8
    bottom_offset: int = 12
    max_lines: int = 4

    @property
    def fade_milliseconds(self) -> int:
        return int(round(self.fade_seconds * 1000))

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["background_color"] = list(self.background_color)
        data["max_image_size"] = list(self.max_image_size)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any] | None) -> "ToastStyle":
        if not data:
            return cls()
        if not isinstance(data, dict):
            raise ToastConfigError(f"Configuração de estilo inválida: {data!r}")

        known = {f.name for f in fields(cls)}
        values: Dict[str, Any] = {}
        for key, raw in data.items():
            if key not in known:
                continue
            values[key] = _coerce(key, raw)
        return cls(**values)


_INT_FIELDS = {"corner_radius", "padding", "spacing", "host_margin", "bottom_offset", "max_lines"}


def _coerce(key: str, raw: Any) -> Any:
    try:
        if key == "background_color":
            r, g, b, a = raw
            return (int(r), int(g), int(b), float(a))
        if key == "max_image_size":
            w, h = raw
            return (int(w), int(h))
        if key == "text_color":
            if not isinstance(raw, str) or not raw:
                raise ValueError(raw)
            return raw
        if key == "fade_seconds":
            value = float(raw)
            if value < 0:
                raise ValueError(raw)
            return value
        if key in _INT_FIELDS:
            value = int(raw)
            if value < 0:
                raise ValueError(raw)
            return value
    except (TypeError, ValueError) as exc:
        raise ToastConfigError(f"Valor inválido para '{key}': {raw!r}") from exc
    return raw


DEFAULT_STYLE = ToastStyle()
