"""Scalar conversions between byte and normalized channel values."""
import math

from ..types.format_type import FormatType, BYTE_MAX
from ..types.color_types import Channel


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def unit_to_byte(value: Channel) -> int:
    """Map a fraction in ``[0, 1]`` to ``[0, 255]``, rounding half up."""
    return round_half_up(float(value) * BYTE_MAX)


def byte_to_unit(value: Channel) -> float:
    return int(value) / BYTE_MAX


def normalize(value: Channel, format_type: FormatType) -> float:
    """Return ``value`` as a fraction, whatever its representation."""
    if FormatType(format_type) == FormatType.INT:
        return byte_to_unit(value)
    return float(value)


def scale(value: float, format_type: FormatType) -> Channel:
    """Inverse of :func:`normalize`."""
    if FormatType(format_type) == FormatType.INT:
        return unit_to_byte(value)
    return float(value)
