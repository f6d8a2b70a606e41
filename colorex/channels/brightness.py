from ..types.format_type import FormatType, channel_maxima, channel_midpoints, format_classes
from ..types.color_types import RGB, Channel
from ..validation import assert_rgb_valid
from ..conversions.numbers import round_half_up

# ITU-R BT.709 luma coefficients
LUMA_RED = 0.2126
LUMA_GREEN = 0.7152
LUMA_BLUE = 0.0722


def luma(red: Channel, green: Channel, blue: Channel) -> float:
    return red * LUMA_RED + green * LUMA_GREEN + blue * LUMA_BLUE


def is_bright(
    red: Channel,
    green: Channel,
    blue: Channel,
    format_type: FormatType = FormatType.FLOAT,
) -> bool:
    """
    Test whether a color looks bright to a human observer.

    The BT.709 luma of the color is compared against the middle of the
    channel range (0.5 for fractions, 127.5 for bytes). A luma sitting
    exactly on the midpoint is not bright.

    Args:
        red, green, blue: Channel values in the representation of ``format_type``
        format_type: ``FormatType.FLOAT`` for [0, 1] or ``FormatType.INT`` for [0, 255]

    Returns:
        True if the color is bright

    Raises:
        OutOfRangeError: if any channel is outside its range
    """
    format_type = FormatType(format_type)
    assert_rgb_valid(red, green, blue, format_type)
    return luma(red, green, blue) > channel_midpoints[format_type]


def contrast_color(
    red: Channel,
    green: Channel,
    blue: Channel,
    format_type: FormatType = FormatType.FLOAT,
) -> RGB:
    """Return black for a bright color and white otherwise, e.g. for text on a background."""
    format_type = FormatType(format_type)
    if is_bright(red, green, blue, format_type):
        level = format_classes[format_type](0)
    else:
        level = channel_maxima[format_type]
    return RGB(level, level, level)


def average(
    red: Channel,
    green: Channel,
    blue: Channel,
    format_type: FormatType = FormatType.FLOAT,
) -> Channel:
    """Unweighted mean of the three channels, in the input representation."""
    format_type = FormatType(format_type)
    assert_rgb_valid(red, green, blue, format_type)
    mean = sum(float(c) for c in (red, green, blue)) / 3
    if format_type == FormatType.INT:
        return round_half_up(mean)
    return float(mean)
