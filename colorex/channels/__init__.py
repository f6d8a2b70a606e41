"""
Channel math on RGB triples.

Every function accepts either normalized channels in ``[0.0, 1.0]``
(``FormatType.FLOAT``, the default) or bytes in ``[0, 255]``
(``FormatType.INT``). Byte results are rounded half up.
"""
from .brightness import is_bright, contrast_color, average, luma
from .transforms import multiply, desaturate, interpolate
from .packing import from_uint, to_uint

__all__ = [
    "is_bright",
    "contrast_color",
    "average",
    "luma",
    "multiply",
    "desaturate",
    "interpolate",
    "from_uint",
    "to_uint",
]
