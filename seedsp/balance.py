"""Level matching of one signal to another."""

from __future__ import annotations

import math

__all__ = ["Balance"]


class Balance:
    """Scales a signal so its RMS level follows a comparator signal."""

    def __init__(self, sample_rate: float) -> None:
        self._sample_rate = sample_rate
        self._ihp = 10.0
        b = 2.0 - math.cos(self._ihp * (math.tau / sample_rate))
        self._c2 = b - math.sqrt(b * b - 1.0)
        self._c1 = 1.0 - self._c2
        self._prvq = 0.0
        self._prvr = 0.0
        self._prva = 0.0

    def process(self, sig: float, comp: float) -> float:
        """Return sig scaled towards the level of comp."""
        q = self._c1 * sig * sig + self._c2 * self._prvq
        r = self._c1 * comp * comp + self._c2 * self._prvr
        self._prvq = q
        self._prvr = r

        a = math.sqrt(r / q) if q != 0.0 else math.sqrt(r)
        out = sig * self._prva if a != self._prva else sig * a
        self._prva = a
        return out