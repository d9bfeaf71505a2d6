"""Crossfade between two signals with selectable curves."""

from __future__ import annotations

import math
from enum import IntEnum

__all__ = ["CrossfadeCurve", "CrossFade"]

_LOG_MIN = math.log(0.000001)
_LOG_MAX = math.log(1.0)


class CrossfadeCurve(IntEnum):
    """Shape of the crossfade."""

    LIN = 0
    CPOW = 1
    LOG = 2
    EXP = 3


class CrossFade:
    """Mixes two inputs according to a position from 0 (first) to 1 (second)."""

    def __init__(self, curve: int = CrossfadeCurve.LIN) -> None:
        self.pos = 0.5
        self._curve = (
            CrossfadeCurve(curve)
            if curve in CrossfadeCurve._value2member_map_
            else CrossfadeCurve.LIN
        )

    @property
    def curve(self) -> CrossfadeCurve:
        """Curve applied to the fade."""
        return self._curve

    @curve.setter
    def curve(self, value: int) -> None:
        self._curve = CrossfadeCurve(value)

    def process(self, in1: float, in2: float) -> float:
        """Return the mix of in1 and in2 at the current position."""
        pos = self.pos
        if self._curve is CrossfadeCurve.CPOW:
            scalar_1 = math.sin(pos * math.pi / 2)
            scalar_2 = math.sin((1.0 - pos) * math.pi / 2)
            return in1 * scalar_2 + in2 * scalar_1
        if self._curve is CrossfadeCurve.LOG:
            scalar = math.exp(pos * (_LOG_MAX - _LOG_MIN) + _LOG_MIN)
        elif self._curve is CrossfadeCurve.EXP:
            scalar = pos * pos
        else:
            scalar = pos
        return in1 * (1.0 - scalar) + in2 * scalar