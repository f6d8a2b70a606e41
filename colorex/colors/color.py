from __future__ import annotations
from typing import ClassVar, Tuple, Self

from ..types.format_type import FormatType, BYTE_MAX
from ..types.color_types import ARGB, RGB, HSB, Channel, UniformSource
from ..validation import assert_byte, assert_in_unit_range
from ..conversions import (
    hsb_to_rgb,
    rgb_to_hsb,
    random_hue_to_rgb,
    parametric_hue_to_rgb,
    change_saturation,
    change_brightness,
    change_saturation_and_brightness,
    multiply_saturation_and_brightness,
)
from ..conversions.numbers import unit_to_byte, byte_to_unit, round_half_up
from ..channels import (
    is_bright,
    multiply,
    average,
    desaturate,
    interpolate,
    from_uint,
    to_uint,
)


class Color:
    """
    Immutable ARGB color stored as four bytes.

    Fractional constructors and accessors convert with round-half-up.
    Every operation returns a new instance.
    """
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    channel_names: ClassVar[Tuple[str, str, str, str]] = ("alpha", "red", "green", "blue")

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, alpha: int, red: int, green: int, blue: int) -> None:
        value = (alpha, red, green, blue)
        for name, channel in zip(self.channel_names, value):
            assert_byte(channel, name)

        self._value = ARGB(*(int(c) for c in value))

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_argb(cls, alpha: Channel, red: Channel, green: Channel, blue: Channel) -> Self:
        """Build from fractions in ``[0, 1]``."""
        assert_in_unit_range(alpha, "alpha")
        for name, channel in zip(cls.channel_names[1:], (red, green, blue)):
            assert_in_unit_range(channel, name)
        return cls(*(unit_to_byte(c) for c in (alpha, red, green, blue)))

    @classmethod
    def from_rgb(cls, red: Channel, green: Channel, blue: Channel) -> Self:
        return cls.from_argb(1.0, red, green, blue)

    @classmethod
    def from_uint(cls, value: int) -> Self:
        return cls(*from_uint(value))

    @classmethod
    def from_hsb(cls, hue: Channel, saturation: Channel, brightness: Channel, alpha: Channel = 1.0) -> Self:
        return cls.from_argb(alpha, *hsb_to_rgb(hue, saturation, brightness))

    @classmethod
    def random_hue(
        cls,
        source: UniformSource,
        saturation: Channel,
        brightness: Channel,
        alpha: Channel = 1.0,
    ) -> Self:
        return cls.from_argb(alpha, *random_hue_to_rgb(source, saturation, brightness))

    @classmethod
    def interpolate_hue(
        cls,
        min_hue: Channel,
        max_hue: Channel,
        t: Channel,
        saturation: Channel,
        brightness: Channel,
        alpha: Channel = 1.0,
    ) -> Self:
        return cls.from_argb(alpha, *parametric_hue_to_rgb(min_hue, max_hue, t, saturation, brightness))

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ARGB:
        return self._value

    @property
    def alpha(self) -> int:
        return self._value.alpha

    @property
    def red(self) -> int:
        return self._value.red

    @property
    def green(self) -> int:
        return self._value.green

    @property
    def blue(self) -> int:
        return self._value.blue

    # ------------------ CONVERSIONS ------------------
    def to_rgb(self) -> RGB:
        """Color channels as fractions, alpha dropped."""
        return RGB(*(byte_to_unit(c) for c in self._value.rgb))

    def to_argb(self) -> ARGB:
        return ARGB(*(byte_to_unit(c) for c in self._value))

    def to_hsb(self) -> HSB:
        return rgb_to_hsb(*self._value.rgb, input_type=FormatType.INT)

    def to_uint(self) -> int:
        return to_uint(*self._value)

    def __int__(self) -> int:
        return self.to_uint()

    # ------------------ DERIVED COLORS ------------------
    def is_bright(self) -> bool:
        return is_bright(*self._value.rgb, format_type=FormatType.INT)

    def to_black_if_bright(self) -> Color:
        """Opaque black on a bright color, opaque white otherwise."""
        level = 0 if self.is_bright() else BYTE_MAX
        return self.__class__(BYTE_MAX, level, level, level)

    def with_alpha(self, alpha: int) -> Color:
        return self.__class__(alpha, *self._value.rgb)

    def multiply(self, factor: float) -> Color:
        return self.__class__(self.alpha, *multiply(*self._value.rgb, factor, FormatType.INT))

    def average(self) -> int:
        return average(*self._value.rgb, format_type=FormatType.INT)

    def desaturate(self, factor: float) -> Color:
        return self.__class__(self.alpha, *desaturate(*self._value.rgb, factor, FormatType.INT))

    def interpolate(self, other: Color, factor: float) -> Color:
        """Blend towards ``other``; alpha is blended with the color channels."""
        rgb = interpolate(self._value.rgb, other.value.rgb, factor, FormatType.INT)
        alpha = round_half_up(self.alpha + (other.alpha - self.alpha) * factor)
        return self.__class__(alpha, *rgb)

    def change_saturation(self, saturation: Channel, alpha: Channel = 1.0) -> Color:
        return self.from_argb(alpha, *change_saturation(*self.to_rgb(), saturation))

    def change_brightness(self, brightness: Channel, alpha: Channel = 1.0) -> Color:
        return self.from_argb(alpha, *change_brightness(*self.to_rgb(), brightness))

    def change_saturation_and_brightness(
        self,
        saturation: Channel,
        brightness: Channel,
        alpha: Channel = 1.0,
    ) -> Color:
        return self.from_argb(
            alpha, *change_saturation_and_brightness(*self.to_rgb(), saturation, brightness)
        )

    def multiply_saturation_and_brightness(
        self,
        saturation_factor: Channel,
        brightness_factor: Channel,
        alpha: Channel = 1.0,
    ) -> Color:
        return self.from_argb(
            alpha,
            *multiply_saturation_and_brightness(*self.to_rgb(), saturation_factor, brightness_factor),
        )

    # ------------------ VALUE SEMANTICS ------------------
    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(0x{self.to_uint():08X})"
