"""Bit depth reduction combined with downsampling."""

from __future__ import annotations

import math

from .fold import Fold

__all__ = ["Bitcrush"]


class Bitcrush:
    """Quantises to ``bit_depth`` bits and holds samples at ``crush_rate`` Hz."""

    def __init__(self, sample_rate: float) -> None:
        self.bit_depth = 8
        self.crush_rate = 10000.0
        self._sample_rate = sample_rate
        self._fold = Fold()

    def process(self, sample: float) -> float:
        """Return the crushed sample."""
        bits = 2.0**self.bit_depth
        out = sample * 65536.0 + 32768
        out *= bits / 65536.0
        out = math.floor(out)
        out *= 65536.0 / bits
        out -= 32768

        self._fold.increment = self._sample_rate / self.crush_rate
        return self._fold.process(out) / 65536.0