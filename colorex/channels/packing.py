"""
Packed 32-bit ARGB codec.

Layout, most significant byte first::

    [alpha:8][red:8][green:8][blue:8]
"""
import numpy as np

from ..types.format_type import FormatType, UINT32_MAX
from ..types.color_types import ARGB, Channel
from ..validation import OutOfRangeError, assert_channel
from ..conversions.numbers import byte_to_unit, unit_to_byte


def from_uint(value: int, format_type: FormatType = FormatType.INT) -> ARGB:
    """
    Split a packed color into its alpha, red, green and blue channels.

    Args:
        value: Unsigned 32-bit integer
        format_type: Representation of the returned channels

    Returns:
        ARGB quadruple
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"Packed color must be an integer, got {type(value).__name__}")
    if not 0 <= value <= UINT32_MAX:
        raise OutOfRangeError("value", value, 0, UINT32_MAX)

    value = int(value)
    channels = (value >> 24 & 0xFF, value >> 16 & 0xFF, value >> 8 & 0xFF, value & 0xFF)
    if FormatType(format_type) == FormatType.FLOAT:
        return ARGB(*(byte_to_unit(c) for c in channels))
    return ARGB(*channels)


def to_uint(
    alpha: Channel,
    red: Channel,
    green: Channel,
    blue: Channel,
    format_type: FormatType = FormatType.INT,
) -> int:
    """Combine four channels into a packed 32-bit color."""
    format_type = FormatType(format_type)
    assert_channel(alpha, "alpha", format_type)
    assert_channel(red, "red", format_type)
    assert_channel(green, "green", format_type)
    assert_channel(blue, "blue", format_type)

    if format_type == FormatType.FLOAT:
        alpha, red, green, blue = (unit_to_byte(c) for c in (alpha, red, green, blue))

    return int(alpha) << 24 | int(red) << 16 | int(green) << 8 | int(blue)
