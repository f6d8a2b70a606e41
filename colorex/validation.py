"""
Precondition checks shared by every public operation.

Normalized channels must lie in ``[0.0, 1.0]``; byte channels must be
integers in ``[0, 255]``. A failed check raises immediately and is never
caught inside the library.
"""
from __future__ import annotations
from typing import Optional
import math

from .types.format_type import FormatType, BYTE_MAX, format_valid_types
from .types.color_types import Channel


class OutOfRangeError(ValueError):
    """Raised when an argument lies outside its permitted interval."""

    def __init__(self, name: str, value, lower: float, upper: Optional[float]) -> None:
        self.name = name
        self.value = value
        self.lower = lower
        self.upper = upper
        if upper is None:
            expected = f"to be finite and at least {lower}"
        else:
            expected = f"to be in the range [{lower}; {upper}]"
        super().__init__(f'"{name}" value was expected {expected}, but {value} was given')


class NegativeValueError(OutOfRangeError):
    """Lower-bound-only variant of :class:`OutOfRangeError`."""

    def __init__(self, name: str, value) -> None:
        super().__init__(name, value, 0.0, None)


def _check_number(value, name: str, valid_types: tuple) -> None:
    if isinstance(value, bool) or not isinstance(value, valid_types):
        raise TypeError(f'"{name}" expects a number of type {valid_types}, got {type(value).__name__}')


def assert_in_unit_range(value: Channel, name: str) -> None:
    _check_number(value, name, format_valid_types[FormatType.FLOAT])
    # NaN fails both comparisons, so test for containment
    if not 0.0 <= value <= 1.0:
        raise OutOfRangeError(name, value, 0.0, 1.0)


def assert_non_negative(value: Channel, name: str) -> None:
    _check_number(value, name, format_valid_types[FormatType.FLOAT])
    if not math.isfinite(value) or value < 0:
        raise NegativeValueError(name, value)


def assert_byte(value: Channel, name: str) -> None:
    _check_number(value, name, format_valid_types[FormatType.INT])
    if not 0 <= value <= BYTE_MAX:
        raise OutOfRangeError(name, value, 0, BYTE_MAX)


def assert_channel(value: Channel, name: str, format_type: FormatType) -> None:
    """Validate ``value`` against the range of ``format_type``."""
    if FormatType(format_type) == FormatType.INT:
        assert_byte(value, name)
    else:
        assert_in_unit_range(value, name)


def assert_rgb_valid(
    red: Channel,
    green: Channel,
    blue: Channel,
    format_type: FormatType = FormatType.FLOAT,
) -> None:
    assert_channel(red, "red", format_type)
    assert_channel(green, "green", format_type)
    assert_channel(blue, "blue", format_type)


def assert_hsb_valid(hue: Channel, saturation: Channel, brightness: Channel) -> None:
    assert_in_unit_range(hue, "hue")
    assert_in_unit_range(saturation, "saturation")
    assert_in_unit_range(brightness, "brightness")
