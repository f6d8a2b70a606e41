import numpy as np
import pytest

from colorex.channels import is_bright, contrast_color, average, luma
from colorex.types.format_type import FormatType
from colorex.validation import OutOfRangeError


def test_is_bright_bytes():
    assert is_bright(0xFF, 0xAA, 0xEE, FormatType.INT)
    assert not is_bright(0x00, 0x22, 0x33, FormatType.INT)


def test_is_bright_unit():
    assert is_bright(1, 0.8, 0.7)
    assert not is_bright(0.1, 0.2, 0.5)


def test_is_bright_extremes():
    assert not is_bright(0, 0, 0)
    assert is_bright(1, 1, 1)
    assert not is_bright(0, 0, 0, FormatType.INT)
    assert is_bright(255, 255, 255, FormatType.INT)


def test_green_weighs_most():
    assert is_bright(0.0, 0.8, 0.0)
    assert not is_bright(0.8, 0.0, 0.0)
    assert not is_bright(0.0, 0.0, 1.0)


def test_luma_on_midpoint_is_not_bright():
    assert luma(0.5, 0.5, 0.5) == 0.5
    assert not is_bright(0.5, 0.5, 0.5)


def test_luma_weights():
    assert luma(1, 0, 0) == pytest.approx(0.2126)
    assert luma(0, 1, 0) == pytest.approx(0.7152)
    assert luma(0, 0, 1) == pytest.approx(0.0722)
    assert luma(1, 1, 1) == pytest.approx(1.0)


def test_is_bright_validates_unit_input():
    with pytest.raises(OutOfRangeError):
        is_bright(0xFF, 0xAA, 0xEE)
    with pytest.raises(OutOfRangeError):
        is_bright(-0.1, 0.5, 0.5)


def test_contrast_color():
    assert contrast_color(1.0, 1.0, 1.0) == (0.0, 0.0, 0.0)
    assert contrast_color(0.0, 0.0, 0.0) == (1.0, 1.0, 1.0)
    assert contrast_color(0xFF, 0xAA, 0xEE, FormatType.INT) == (0, 0, 0)
    assert contrast_color(0x00, 0x22, 0x33, FormatType.INT) == (255, 255, 255)


def test_average_unit():
    assert average(0.2, 0.4, 0.6) == pytest.approx(0.4)
    assert average(1.0, 1.0, 1.0) == 1.0
    assert isinstance(average(0, 0, 0), float)


def test_average_is_unweighted():
    assert average(1.0, 0.0, 0.0) == pytest.approx(average(0.0, 0.0, 1.0))


def test_average_bytes_rounds_half_up():
    assert average(10, 20, 31, FormatType.INT) == 20
    assert average(10, 20, 32, FormatType.INT) == 21
    assert average(np.uint8(255), np.uint8(255), np.uint8(255), FormatType.INT) == 255
    assert isinstance(average(1, 1, 2, FormatType.INT), int)
