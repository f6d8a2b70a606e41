"""
Colorex Color Value Type
========================

An immutable ARGB color built on top of the channel math and HSB
conversions, for code that prefers one object over loose channel values.

Usage
-----
>>> from colorex.colors import Color
>>> accent = Color.from_uint(0xFF3366CC)
>>> accent.red, accent.green, accent.blue
(51, 102, 204)
>>> accent.to_black_if_bright()
Color(0xFFFFFFFF)
>>> accent.with_alpha(0x80).to_uint() == 0x803366CC
True

Notes
-----
- Channels are stored as bytes; fractional constructors round half up
- Instances cannot be modified after construction
- Equal channel values compare and hash equal
"""

from .color import Color

__all__ = ['Color']
