from typing import Tuple
from boundednumbers import clamp

from ..types.format_type import FormatType, channel_maxima
from ..types.color_types import RGB, Channel
from ..validation import assert_rgb_valid, assert_in_unit_range, assert_non_negative
from ..conversions.numbers import round_half_up

# Legacy gray weights, not BT.709; kept for compatibility of desaturated output
GRAY_RED = 0.3
GRAY_GREEN = 0.59
GRAY_BLUE = 0.11


def _finish(values: Tuple[float, float, float], format_type: FormatType) -> RGB:
    if format_type == FormatType.INT:
        return RGB(*(round_half_up(v) for v in values))
    return RGB(*(float(v) for v in values))


def multiply(
    red: Channel,
    green: Channel,
    blue: Channel,
    factor: float,
    format_type: FormatType = FormatType.FLOAT,
) -> RGB:
    """
    Scale every channel by ``factor``.

    Results above the channel maximum are clamped to it; a negative factor is
    rejected rather than clamped.

    Args:
        red, green, blue: Channel values in the representation of ``format_type``
        factor: Non-negative scale factor
        format_type: Channel representation of both input and output

    Returns:
        Scaled RGB triple

    Raises:
        OutOfRangeError: if a channel is out of range
        NegativeValueError: if ``factor`` is negative
    """
    format_type = FormatType(format_type)
    assert_rgb_valid(red, green, blue, format_type)
    assert_non_negative(factor, "factor")

    maximum = channel_maxima[format_type]
    scaled = tuple(float(clamp(c * factor, 0, maximum)) for c in (red, green, blue))
    return _finish(scaled, format_type)


def desaturate(
    red: Channel,
    green: Channel,
    blue: Channel,
    factor: float,
    format_type: FormatType = FormatType.FLOAT,
) -> RGB:
    """
    Move a color towards the gray of equal weighted lightness.

    ``factor=0`` leaves the color untouched, ``factor=1`` yields the gray.
    """
    format_type = FormatType(format_type)
    assert_rgb_valid(red, green, blue, format_type)
    assert_in_unit_range(factor, "factor")

    if red == green == blue:
        return _finish((red, green, blue), format_type)

    red, green, blue = float(red), float(green), float(blue)
    gray = red * GRAY_RED + green * GRAY_GREEN + blue * GRAY_BLUE
    return _finish(tuple(c + (gray - c) * factor for c in (red, green, blue)), format_type)


def interpolate(
    from_rgb: Tuple[Channel, Channel, Channel],
    to_rgb: Tuple[Channel, Channel, Channel],
    factor: float,
    format_type: FormatType = FormatType.FLOAT,
) -> RGB:
    """
    Blend two colors channel by channel: ``from * (1 - factor) + to * factor``.

    The end points are returned exactly, without floating point drift.
    """
    format_type = FormatType(format_type)
    assert_rgb_valid(*from_rgb, format_type=format_type)
    assert_rgb_valid(*to_rgb, format_type=format_type)
    assert_in_unit_range(factor, "factor")

    if factor == 0:
        return _finish(tuple(from_rgb), format_type)
    if factor == 1:
        return _finish(tuple(to_rgb), format_type)

    return _finish(
        tuple(float(a) + (float(b) - float(a)) * factor for a, b in zip(from_rgb, to_rgb)),
        format_type,
    )
