"""Edit a color through its HSB form while keeping its hue."""
from boundednumbers import clamp

from ..types.color_types import RGB, Channel
from ..validation import assert_in_unit_range
from .to_hsb import rgb_to_hsb
from .to_rgb import hsb_to_rgb


def change_saturation(red: Channel, green: Channel, blue: Channel, saturation: Channel) -> RGB:
    hue, _, brightness = rgb_to_hsb(red, green, blue)
    return hsb_to_rgb(hue, saturation, brightness)


def change_brightness(red: Channel, green: Channel, blue: Channel, brightness: Channel) -> RGB:
    hue, saturation, _ = rgb_to_hsb(red, green, blue)
    return hsb_to_rgb(hue, saturation, brightness)


def change_saturation_and_brightness(
    red: Channel,
    green: Channel,
    blue: Channel,
    saturation: Channel,
    brightness: Channel,
) -> RGB:
    hue, _, _ = rgb_to_hsb(red, green, blue)
    return hsb_to_rgb(hue, saturation, brightness)


def multiply_saturation_and_brightness(
    red: Channel,
    green: Channel,
    blue: Channel,
    saturation_factor: Channel,
    brightness_factor: Channel,
) -> RGB:
    """
    Scale saturation and brightness by factors in ``[0, 1]``.

    Products are capped at 1.
    """
    assert_in_unit_range(saturation_factor, "saturation_factor")
    assert_in_unit_range(brightness_factor, "brightness_factor")

    hue, saturation, brightness = rgb_to_hsb(red, green, blue)
    return hsb_to_rgb(
        hue,
        float(clamp(saturation * saturation_factor, 0.0, 1.0)),
        float(clamp(brightness * brightness_factor, 0.0, 1.0)),
    )
