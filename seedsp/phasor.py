"""Normalised ramp oscillator moving from 0 to 1."""

from __future__ import annotations

import math

__all__ = ["Phasor"]


class Phasor:
    """Generates a 0-1 ramp at a given frequency."""

    def __init__(
        self, sample_rate: float, freq: float = 1.0, initial_phase: float = 0.0
    ) -> None:
        self._sample_rate = sample_rate
        self._phase = initial_phase
        self._freq = 0.0
        self._inc = 0.0
        self.freq = freq

    @property
    def freq(self) -> float:
        """Frequency in Hz."""
        return self._freq

    @freq.setter
    def freq(self, value: float) -> None:
        self._freq = value
        self._inc = (math.tau * value) / self._sample_rate

    def process(self) -> float:
        """Return the current value and advance the phase."""
        out = self._phase / math.tau
        self._phase += self._inc
        if self._phase > math.tau:
            self._phase -= math.tau
        if self._phase < 0.0:
            self._phase = 0.0
        return out