from ..types.format_type import FormatType
from ..types.color_types import HSB, Channel
from ..validation import assert_rgb_valid
from .numbers import normalize


def rgb_to_hsb(
    red: Channel,
    green: Channel,
    blue: Channel,
    input_type: FormatType = FormatType.FLOAT,
) -> HSB:
    """
    Convert RGB channels to hue, saturation and brightness, all in ``[0, 1]``.

    Hue is reported as 0 for achromatic colors.

    Args:
        red, green, blue: Channel values in the representation of ``input_type``
        input_type: ``FormatType.FLOAT`` or ``FormatType.INT``

    Returns:
        HSB triple
    """
    input_type = FormatType(input_type)
    assert_rgb_valid(red, green, blue, input_type)
    r, g, b = (normalize(c, input_type) for c in (red, green, blue))

    brightness = max(r, g, b)
    delta = brightness - min(r, g, b)
    saturation = 0.0 if brightness == 0 else delta / brightness

    hue = 0.0
    if saturation != 0:
        if r == brightness:
            hue = (g - b) / delta
        elif g == brightness:
            hue = 2 + (b - r) / delta
        else:
            hue = 4 + (r - g) / delta

        hue *= 1 / 6
        # red is max and blue exceeds green
        if hue < 0:
            hue += 1

    return HSB(hue, saturation, brightness)
