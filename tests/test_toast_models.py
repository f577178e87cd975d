import dataclasses

import pytest

from toast.errors import ToastConfigError
from toast.models import (
    DEFAULT_DURATION_POLICY,
    DEFAULT_STYLE,
    ToastDuration,
    ToastDurationPolicy,
    ToastImagePosition,
    ToastRequest,
    ToastStyle,
)


def test_duration_policy_maps_short_and_long():
    assert DEFAULT_DURATION_POLICY.seconds(ToastDuration.SHORT) == 3.0
    assert DEFAULT_DURATION_POLICY.seconds(ToastDuration.LONG) == 6.0
    assert DEFAULT_DURATION_POLICY.milliseconds(ToastDuration.SHORT) == 3000
    assert DEFAULT_DURATION_POLICY.milliseconds(ToastDuration.LONG) == 6000


def test_duration_policy_accepts_enum_values_as_text():
    assert DEFAULT_DURATION_POLICY.seconds("LONG") == 6.0


def test_duration_policy_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_DURATION_POLICY.short_seconds = 1.0  # type: ignore[misc]


def test_request_defaults():
    req = ToastRequest(text="")
    assert req.duration is ToastDuration.SHORT
    assert req.image_position is ToastImagePosition.LEFT
    assert req.has_image is False


def test_default_style_constants():
    assert DEFAULT_STYLE.background_color == (51, 51, 51, 0.8)
    assert DEFAULT_STYLE.text_color == "#ffffff"
    assert DEFAULT_STYLE.corner_radius == 4
    assert DEFAULT_STYLE.fade_seconds == 0.4
    assert DEFAULT_STYLE.fade_milliseconds == 400
    assert DEFAULT_STYLE.max_image_size == (32, 32)
    assert DEFAULT_STYLE.max_lines == 4


def test_style_from_dict_ignores_unknown_keys_and_coerces():
    style = ToastStyle.from_dict({"corner_radius": "6", "max_image_size": [24, 16], "foo": 1})
    assert style.corner_radius == 6
    assert style.max_image_size == (24, 16)
    assert style.padding == DEFAULT_STYLE.padding


def test_style_from_dict_restores_saved_style():
    custom = ToastStyle(background_color=(0, 0, 0, 0.5), fade_seconds=0.1)
    assert ToastStyle.from_dict(custom.to_dict()) == custom


def test_style_from_empty_dict_is_default():
    assert ToastStyle.from_dict({}) == DEFAULT_STYLE
    assert ToastStyle.from_dict(None) == DEFAULT_STYLE


@pytest.mark.parametrize(
    "data",
    [
        {"background_color": [1, 2]},
        {"fade_seconds": -1},
        {"padding": "abc"},
        {"text_color": ""},
        ["not", "a", "dict"],
    ],
)
def test_style_from_dict_rejects_malformed_values(data):
    with pytest.raises(ToastConfigError):
        ToastStyle.from_dict(data)


def test_custom_policy_for_fast_tests():
    policy = ToastDurationPolicy(short_seconds=0.05, long_seconds=0.1)
    assert policy.milliseconds(ToastDuration.SHORT) == 50
    assert policy.milliseconds(ToastDuration.LONG) == 100
