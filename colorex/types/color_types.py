from __future__ import annotations
from typing import NamedTuple, Protocol, Union, runtime_checkable
import numpy as np

Scalar = int | float
Channel = Union[int, float, np.integer, np.floating]


class RGB(NamedTuple):
    red: Scalar
    green: Scalar
    blue: Scalar


class ARGB(NamedTuple):
    alpha: Scalar
    red: Scalar
    green: Scalar
    blue: Scalar

    @property
    def rgb(self) -> RGB:
        """Drop the alpha channel."""
        return RGB(self.red, self.green, self.blue)


class HSB(NamedTuple):
    hue: float
    saturation: float
    brightness: float


@runtime_checkable
class UniformSource(Protocol):
    """
    Anything that yields uniformly distributed fractions in ``[0, 1)``.

    ``random.Random`` and ``numpy.random.Generator`` both qualify.
    """

    def random(self) -> float: ...
