"""
Colorex HSB Conversions
=======================

Scalar conversions between RGB and HSB (also known as HSV). Hue, saturation
and brightness are all fractions in ``[0, 1]``; hue is a fraction of a full
turn, so 0.0 and 1.0 denote the same color.

Conversion Functions
-------------------

HSB → RGB:
    hsb_to_rgb(h, s, b, output_type=FormatType.FLOAT)
        Six-sector conversion
    random_hue_to_rgb(source, s, b, output_type=FormatType.FLOAT)
        Draws a hue from a uniform source, then converts
    parametric_hue_to_rgb(min_hue, max_hue, t, s, b, output_type=FormatType.FLOAT)
        Maps t in [0, 1] onto a hue range, then converts

RGB → HSB:
    rgb_to_hsb(r, g, b, input_type=FormatType.FLOAT)
        Hexagonal hue derivation

Adjustments (normalized RGB in and out):
    change_saturation, change_brightness, change_saturation_and_brightness,
    multiply_saturation_and_brightness

Examples
--------
>>> from colorex.conversions import hsb_to_rgb, rgb_to_hsb, FormatType
>>> hsb_to_rgb(0.0, 1.0, 1.0)
RGB(red=1.0, green=0.0, blue=0.0)
>>> hsb_to_rgb(0.5, 1.0, 1.0, output_type=FormatType.INT)
RGB(red=0, green=255, blue=255)
>>> rgb_to_hsb(0, 0, 255, input_type=FormatType.INT).hue
0.6666666666666666
"""

# HSB → RGB conversions
from .to_rgb import (
    hsb_to_rgb,
    random_hue_to_rgb,
    parametric_hue_to_rgb,
    interpolate_hue_to_rgb,
)

# RGB → HSB conversions
from .to_hsb import rgb_to_hsb

# Adjustments through HSB
from .adjust import (
    change_saturation,
    change_brightness,
    change_saturation_and_brightness,
    multiply_saturation_and_brightness,
)

from .numbers import unit_to_byte, byte_to_unit

# Types and enums
from ..types.format_type import FormatType

__all__ = [
    # HSB → RGB
    'hsb_to_rgb',
    'random_hue_to_rgb',
    'parametric_hue_to_rgb',
    'interpolate_hue_to_rgb',

    # RGB → HSB
    'rgb_to_hsb',

    # Adjustments
    'change_saturation',
    'change_brightness',
    'change_saturation_and_brightness',
    'multiply_saturation_and_brightness',

    # Channel scaling
    'unit_to_byte',
    'byte_to_unit',

    # Types
    'FormatType',
]
