"""Linear ramp between two values."""

from __future__ import annotations

import math

__all__ = ["Line"]


def _divide(numerator: float, denominator: float) -> float:
    if denominator:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator)


class Line:
    """Ramps from a start value to an end value over a duration."""

    def __init__(self, sample_rate: float) -> None:
        self._sample_rate = sample_rate
        self._duration = 0.5
        self._end = 0.0
        self._start = 1.0
        self._val = 1.0
        self._inc = 0.0
        self._finished = False

    def start(self, start: float, end: float, duration: float) -> None:
        """Begin a ramp from start to end lasting duration seconds."""
        self._start = start
        self._end = end
        self._duration = duration
        self._inc = _divide(end - start, self._sample_rate * duration)
        self._val = start
        self._finished = False

    def process(self) -> float:
        """Return the next sample of the ramp."""
        out = self._val
        if (self._end > self._start and out >= self._end) or (
            self._end < self._start and out <= self._end
        ):
            self._finished = True
            self._val = self._end
            out = self._end
        else:
            self._val += self._inc
        return out

    @property
    def finished(self) -> bool:
        """True once the ramp has reached its end value."""
        return self._finished