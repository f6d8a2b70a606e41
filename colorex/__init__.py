"""
Colorex - RGB and HSB Color Math
================================

A small library for converting between RGB and HSB (HSV) colors and for the
everyday channel arithmetic built on top of them.

Key Features
------------
- RGB ↔ HSB conversion with hue, saturation and brightness in [0, 1]
- Packed 32-bit ARGB integers (``0xAARRGGBB``)
- Perceptual brightness test for picking readable text colors
- Channel scaling, averaging, desaturation and interpolation
- Random and parametric hue generation
- Normalized (0.0-1.0) or byte (0-255) channels via ``FormatType``
- Strict argument validation with ``OutOfRangeError``

Quick Start
-----------
>>> from colorex import hsb_to_rgb, rgb_to_hsb, to_uint, is_bright, FormatType
>>>
>>> hsb_to_rgb(0.0, 1.0, 1.0)
RGB(red=1.0, green=0.0, blue=0.0)
>>> hex(to_uint(0xAA, 0xBB, 0xCC, 0xDD))
'0xaabbccdd'
>>> is_bright(0xFF, 0xAA, 0xEE, FormatType.INT)
True

Modules
-------
- channels: brightness, scaling, blending and the packed integer codec
- conversions: RGB ↔ HSB conversions and HSB-based adjustments
- colors: the immutable ``Color`` value type
- validation: range checks and their errors
"""

from .types.format_type import FormatType
from .types.color_types import RGB, ARGB, HSB, UniformSource

from .validation import (
    OutOfRangeError,
    NegativeValueError,
    assert_in_unit_range,
    assert_non_negative,
    assert_byte,
    assert_rgb_valid,
    assert_hsb_valid,
)

from .channels import (
    is_bright,
    contrast_color,
    average,
    luma,
    multiply,
    desaturate,
    interpolate,
    from_uint,
    to_uint,
)

from .conversions import (
    hsb_to_rgb,
    rgb_to_hsb,
    random_hue_to_rgb,
    parametric_hue_to_rgb,
    interpolate_hue_to_rgb,
    change_saturation,
    change_brightness,
    change_saturation_and_brightness,
    multiply_saturation_and_brightness,
    unit_to_byte,
    byte_to_unit,
)

from .colors import Color

__version__ = "1.0.0"

__all__ = [
    # Types
    "FormatType",
    "RGB", "ARGB", "HSB",
    "UniformSource",

    # Validation
    "OutOfRangeError", "NegativeValueError",
    "assert_in_unit_range", "assert_non_negative", "assert_byte",
    "assert_rgb_valid", "assert_hsb_valid",

    # Channel math
    "is_bright", "contrast_color", "average", "luma",
    "multiply", "desaturate", "interpolate",
    "from_uint", "to_uint",

    # Conversions
    "hsb_to_rgb", "rgb_to_hsb",
    "random_hue_to_rgb", "parametric_hue_to_rgb", "interpolate_hue_to_rgb",
    "change_saturation", "change_brightness",
    "change_saturation_and_brightness", "multiply_saturation_and_brightness",
    "unit_to_byte", "byte_to_unit",

    # Color value type
    "Color",

    # Version
    "__version__",
]
