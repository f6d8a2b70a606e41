import numpy as np

from colorex.conversions.numbers import unit_to_byte, byte_to_unit, round_half_up, normalize, scale
from colorex.types.format_type import FormatType


def test_round_half_up():
    assert round_half_up(0.5) == 1
    assert round_half_up(1.5) == 2
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2


def test_unit_to_byte():
    assert unit_to_byte(0.0) == 0
    assert unit_to_byte(1.0) == 255
    assert unit_to_byte(0.5) == 128
    assert unit_to_byte(np.float32(0.2)) == 51


def test_byte_to_unit():
    assert byte_to_unit(0) == 0.0
    assert byte_to_unit(255) == 1.0
    assert byte_to_unit(np.uint8(51)) == 51 / 255


def test_byte_grid_round_trip():
    for byte in range(256):
        assert unit_to_byte(byte_to_unit(byte)) == byte


def test_normalize_and_scale():
    assert normalize(255, FormatType.INT) == 1.0
    assert normalize(0.25, FormatType.FLOAT) == 0.25
    assert scale(1.0, FormatType.INT) == 255
    assert scale(0.25, "float") == 0.25
