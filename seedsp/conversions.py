"""Sample format conversions and hardware pin descriptions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

FBIPMAX = 0.999985
FBIPMIN = -FBIPMAX
S162F_SCALE = 3.0517578125e-05
F2S16_SCALE = 32767.0
F2S24_SCALE = 8388608.0
S242F_SCALE = 1.192092896e-07
S24SIGN = 0x800000
S322F_SCALE = 4.6566129e-10
F2S32_SCALE = 2147483647.0

__all__ = [
    "GpioPort",
    "GpioPin",
    "cube",
    "s162f",
    "f2s16",
    "s242f",
    "f2s24",
    "s322f",
    "f2s32",
]


class GpioPort(IntEnum):
    """GPIO ports of the microcontroller; X marks unsupported hardware."""

    A = 0
    B = 1
    C = 2
    D = 3
    E = 4
    F = 5
    G = 6
    H = 7
    I = 8  # noqa: E741
    J = 9
    K = 10
    X = 11


@dataclass(frozen=True)
class GpioPin:
    """A hardware pin given by its port and pin number (0-15)."""

    port: GpioPort
    pin: int


def _clamp_bipolar(x: float) -> float:
    return min(max(x, FBIPMIN), FBIPMAX)


def cube(x: float) -> float:
    """Return x cubed."""
    return (x * x) * x


def s162f(x: int) -> float:
    """Convert a signed 16-bit sample to a float."""
    return float(x) * S162F_SCALE


def f2s16(x: float) -> int:
    """Convert a float sample to signed 16-bit, clamping to the bipolar range."""
    return int(_clamp_bipolar(x) * F2S16_SCALE)


def s242f(x: int) -> float:
    """Convert a signed 24-bit sample (held in the low 24 bits) to a float."""
    x = (x ^ S24SIGN) - S24SIGN
    return float(x) * S242F_SCALE


def f2s24(x: float) -> int:
    """Convert a float sample to signed 24-bit, clamping to the bipolar range."""
    return int(_clamp_bipolar(x) * F2S24_SCALE)


def s322f(x: int) -> float:
    """Convert a signed 32-bit sample to a float."""
    return float(x) * S322F_SCALE


def f2s32(x: float) -> int:
    """Convert a float sample to signed 32-bit, clamping to the bipolar range."""
    return int(_clamp_bipolar(x) * F2S32_SCALE)