import warnings
from boundednumbers import clamp

from ..types.format_type import FormatType
from ..types.color_types import RGB, Channel, UniformSource
from ..validation import assert_hsb_valid, assert_in_unit_range
from .numbers import scale


def hsb_to_rgb(
    hue: Channel,
    saturation: Channel,
    brightness: Channel,
    output_type: FormatType = FormatType.FLOAT,
) -> RGB:
    """
    Convert hue, saturation and brightness in ``[0, 1]`` to RGB.

    The hue circle is cut into six sectors; hue 1.0 lands in the same sector
    as hue 0.0.

    Args:
        hue: Hue fraction of a full turn
        saturation: Saturation
        brightness: Brightness (value)
        output_type: Representation of the returned channels

    Returns:
        RGB triple

    Raises:
        OutOfRangeError: if any input is outside ``[0, 1]``
    """
    assert_hsb_valid(hue, saturation, brightness)
    hue, saturation, brightness = float(hue), float(saturation), float(brightness)

    sector_position = hue * 6
    sector = int(sector_position)
    fraction = sector_position - sector

    p = brightness * (1 - saturation)
    q = brightness * (1 - fraction * saturation)
    t = brightness * (1 - (1 - fraction) * saturation)

    if sector == 1:
        rgb = (q, brightness, p)
    elif sector == 2:
        rgb = (p, brightness, t)
    elif sector == 3:
        rgb = (p, q, brightness)
    elif sector == 4:
        rgb = (t, p, brightness)
    elif sector == 5:
        rgb = (brightness, p, q)
    else:
        rgb = (brightness, t, p)

    return RGB(*(scale(c, output_type) for c in rgb))


def random_hue_to_rgb(
    source: UniformSource,
    saturation: Channel,
    brightness: Channel,
    output_type: FormatType = FormatType.FLOAT,
) -> RGB:
    """Draw one uniform hue from ``source`` and convert it with the given saturation and brightness."""
    return hsb_to_rgb(source.random(), saturation, brightness, output_type)


def parametric_hue_to_rgb(
    min_hue: Channel,
    max_hue: Channel,
    t: Channel,
    saturation: Channel,
    brightness: Channel,
    output_type: FormatType = FormatType.FLOAT,
) -> RGB:
    """
    Map ``t`` in ``[0, 1]`` linearly onto ``[min_hue, max_hue]`` and convert.

    Useful for coloring a score along a hue gradient. ``min_hue`` may be
    larger than ``max_hue`` to run the gradient backwards.
    """
    assert_in_unit_range(min_hue, "min_hue")
    assert_in_unit_range(max_hue, "max_hue")
    assert_in_unit_range(t, "t")
    hue = float(clamp(min_hue + t * (max_hue - min_hue), 0.0, 1.0))
    return hsb_to_rgb(hue, saturation, brightness, output_type)


def interpolate_hue_to_rgb(
    min_hue: Channel,
    max_hue: Channel,
    t: Channel,
    saturation: Channel,
    brightness: Channel,
    output_type: FormatType = FormatType.FLOAT,
) -> RGB:
    """
    Deprecated: Use parametric_hue_to_rgb instead.
    """
    warnings.warn(
        "interpolate_hue_to_rgb is deprecated. Use parametric_hue_to_rgb instead.",
        DeprecationWarning,
        stacklevel=2
    )
    return parametric_hue_to_rgb(min_hue, max_hue, t, saturation, brightness, output_type)
