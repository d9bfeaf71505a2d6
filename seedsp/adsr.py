"""Attack/decay/sustain/release envelope built on a one-pole filter."""

from __future__ import annotations

import math
from enum import IntEnum

__all__ = ["AdsrSegment", "Adsr"]


class AdsrSegment(IntEnum):
    """Stages the envelope can be in."""

    IDLE = 0
    ATTACK = 1
    DECAY = 2
    SUSTAIN = 3
    RELEASE = 4


class Adsr:
    """Gate-driven ADSR envelope."""

    def __init__(self, sample_rate: float) -> None:
        self._seg_time = [0.0] * len(AdsrSegment)
        self._seg_time[AdsrSegment.ATTACK] = 0.1
        self._seg_time[AdsrSegment.DECAY] = 0.1
        self._seg_time[AdsrSegment.RELEASE] = 0.1
        self._sus = 0.7
        self._a = 0.0
        self._b = 0.0
        self._x = 0.0
        self._y = 0.0
        self._sample_rate = int(sample_rate)
        self._mode = AdsrSegment.IDLE

    def _tau_to_pole(self, tau: float) -> float:
        denominator = tau * self._sample_rate
        if denominator == 0:
            return 0.0
        return math.exp(-1.0 / denominator)

    def _set_pole(self, tau: float) -> None:
        pole = self._tau_to_pole(tau)
        self._a = pole
        self._b = 1.0 - pole

    def _filter(self) -> float:
        self._y = self._b * self._x + self._a * self._y
        return self._y

    def process(self, gate: bool) -> float:
        """Advance one sample with the given gate and return the envelope value."""
        if gate and self._mode is not AdsrSegment.DECAY:
            self._mode = AdsrSegment.ATTACK
            self._set_pole(self._seg_time[AdsrSegment.ATTACK] * 0.6)
        elif not gate and self._mode is not AdsrSegment.IDLE:
            self._mode = AdsrSegment.RELEASE
            self._set_pole(self._seg_time[AdsrSegment.RELEASE])

        self._x = 1.0 if gate else 0.0
        out = 0.0

        if self._mode is AdsrSegment.ATTACK:
            out = self._filter()
            if out > 0.99:
                self._mode = AdsrSegment.DECAY
                self._set_pole(self._seg_time[AdsrSegment.DECAY])
        elif self._mode in (AdsrSegment.DECAY, AdsrSegment.RELEASE):
            self._x *= self._sus
            out = self._filter()
            if out <= 0.01:
                self._mode = AdsrSegment.IDLE
        return out

    def set_time(self, segment: int, time: float) -> None:
        """Set the time in seconds of a segment."""
        self._seg_time[segment] = time

    def set_sustain_level(self, level: float) -> None:
        """Set the level held while the gate stays high."""
        self._sus = level

    @property
    def current_segment(self) -> AdsrSegment:
        """Segment the envelope is currently in."""
        return self._mode

    @property
    def is_running(self) -> bool:
        """True while the envelope is in any segment other than idle."""
        return self._mode is not AdsrSegment.IDLE