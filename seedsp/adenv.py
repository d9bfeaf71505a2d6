"""Triggerable attack/decay envelope."""

from __future__ import annotations

import math
from enum import IntEnum

__all__ = ["AdEnvSegment", "AdEnv"]


class AdEnvSegment(IntEnum):
    """Stages the envelope can be in."""

    IDLE = 0
    ATTACK = 1
    DECAY = 2


def _expf_fast(x: float) -> float:
    x = 1.0 + x / 1024.0
    for _ in range(10):
        x *= x
    return x


def _divide(numerator: float, denominator: float) -> float:
    if denominator:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator)


class AdEnv:
    """Attack/decay envelope with adjustable range and curve."""

    def __init__(self, sample_rate: float) -> None:
        self._sample_rate = sample_rate
        self._segment = AdEnvSegment.IDLE
        self._prev_segment = AdEnvSegment.IDLE
        self._curve_scalar = 0.0
        self._phase = 0
        self._min = 0.0
        self._max = 1.0
        self._output = 0.0001
        self._segment_time = [0.05] * len(AdEnvSegment)
        self._c_inc = 0.0
        self._curve_x = 0.0
        self._retrig_val = 0.0
        self._trigger = False

    def process(self) -> float:
        """Advance one sample and return the envelope value."""
        if self._trigger:
            self._trigger = False
            self._segment = AdEnvSegment.ATTACK
            self._phase = 0
            self._curve_x = 0.0
            self._retrig_val = self._output

        time_samps = int(self._segment_time[self._segment] * self._sample_rate)

        if self._segment is AdEnvSegment.ATTACK:
            beg, end = self._retrig_val, 1.0
        elif self._segment is AdEnvSegment.DECAY:
            beg, end = 1.0, 0.0
        else:
            beg, end = 0.0, 0.0

        if self._prev_segment != self._segment:
            self._curve_x = 0.0
            self._phase = 0

        if self._curve_scalar == 0.0:
            self._c_inc = _divide(end - beg, time_samps)
        else:
            self._c_inc = _divide(end - beg, 1.0 - _expf_fast(self._curve_scalar))

        val = self._output
        inc = self._c_inc
        out = val
        if self._curve_scalar == 0.0:
            val += inc
        else:
            self._curve_x += _divide(self._curve_scalar, time_samps)
            val = beg + inc * (1.0 - _expf_fast(self._curve_x))
            if math.isnan(val):
                val = 0.0

        self._phase += 1
        self._prev_segment = self._segment
        if self._segment is not AdEnvSegment.IDLE:
            if (out >= 1.0 and self._segment is AdEnvSegment.ATTACK) or (
                out <= 0.0 and self._segment is AdEnvSegment.DECAY
            ):
                if self._segment is AdEnvSegment.ATTACK:
                    self._segment = AdEnvSegment.DECAY
                else:
                    self._segment = AdEnvSegment.IDLE
        if self._segment is AdEnvSegment.IDLE:
            val = out = 0.0
        self._output = val

        return out * (self._max - self._min) + self._min

    def trigger(self) -> None:
        """Start or retrigger the envelope on the next sample."""
        self._trigger = True

    def set_time(self, segment: int, time: float) -> None:
        """Set the length in seconds of a segment."""
        self._segment_time[segment] = time

    def set_curve(self, scalar: float) -> None:
        """Set the curve amount; 0 is linear, positive values give a log curve."""
        self._curve_scalar = scalar

    def set_min(self, minimum: float) -> None:
        """Set the lowest output value."""
        self._min = minimum

    def set_max(self, maximum: float) -> None:
        """Set the highest output value."""
        self._max = maximum

    @property
    def value(self) -> float:
        """Current output without advancing."""
        return self._output * (self._max - self._min) + self._min

    @property
    def current_segment(self) -> AdEnvSegment:
        """Segment the envelope is currently in."""
        return self._segment

    @property
    def is_running(self) -> bool:
        """True while the envelope is in any segment other than idle."""
        return self._segment is not AdEnvSegment.IDLE