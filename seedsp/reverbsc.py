"""Stereo feedback-delay-network reverb."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

__all__ = ["ReverbSc"]

_DEFAULT_SRATE = 48000.0
_DELAYPOS_SHIFT = 28
_DELAYPOS_SCALE = 0x10000000
_DELAYPOS_MASK = 0x0FFFFFFF
_MAX_SIZE = 98936
_FLOAT_BYTES = 4
_OUTPUT_GAIN = 0.35
_JP_SCALE = 0.25

# delay time (s), random variation of delay time (s),
# random variation frequency (1/s), random seed (0 - 32767)
_REVERB_PARAMS = (
    (2473.0 / _DEFAULT_SRATE, 0.0010, 3.100, 1966.0),
    (2767.0 / _DEFAULT_SRATE, 0.0011, 3.500, 29491.0),
    (3217.0 / _DEFAULT_SRATE, 0.0017, 1.110, 22937.0),
    (3557.0 / _DEFAULT_SRATE, 0.0006, 3.973, 9830.0),
    (3907.0 / _DEFAULT_SRATE, 0.0010, 2.341, 20643.0),
    (4127.0 / _DEFAULT_SRATE, 0.0011, 1.897, 22937.0),
    (2143.0 / _DEFAULT_SRATE, 0.0017, 0.891, 29491.0),
    (1933.0 / _DEFAULT_SRATE, 0.0006, 3.221, 14417.0),
)


def _max_samples(sample_rate: float, pitch_mod: float, n: int) -> int:
    max_del = _REVERB_PARAMS[n][0] + _REVERB_PARAMS[n][1] * pitch_mod * 1.125
    return int(max_del * sample_rate + 16.5)


@dataclass
class _DelayLine:
    buffer_size: int
    write_pos: int = 0
    read_pos: int = 0
    read_pos_frac: int = 0
    read_pos_frac_inc: int = 0
    seed_val: int = 0
    rand_line_cnt: int = 0
    filter_state: float = 0.0
    buf: list[float] = field(default_factory=list)


class ReverbSc:
    """Eight modulated delay lines with a damped feedback network.

    ``feedback`` sets the reverb time (0 to 1, infinite at 1) and
    ``lp_freq`` the cutoff of the damping filter in Hz.
    """

    def __init__(self, sample_rate: float) -> None:
        self._sample_rate = sample_rate
        self.feedback = 0.97
        self.lp_freq = 10000.0
        self._pitch_mod = 1.0
        self._damp_fact = 1.0
        self._prv_lpfreq = 0.0
        self._lines: list[_DelayLine] = []

        n_bytes = 0
        for n in range(len(_REVERB_PARAMS)):
            if n_bytes > _MAX_SIZE:
                raise ValueError(
                    f"delay lines exceed the maximum size at {sample_rate} Hz"
                )
            self._lines.append(self._init_delay_line(n))
            n_bytes += _max_samples(sample_rate, 1.0, n) * _FLOAT_BYTES

    def _init_delay_line(self, n: int) -> _DelayLine:
        params = _REVERB_PARAMS[n]
        line = _DelayLine(buffer_size=_max_samples(self._sample_rate, 1.0, n))
        line.seed_val = int(params[3] + 0.5)
        read_pos = line.seed_val * params[1] / 32768
        read_pos = params[0] + read_pos * self._pitch_mod
        read_pos = line.buffer_size - read_pos * self._sample_rate
        line.read_pos = int(read_pos)
        line.read_pos_frac = int((read_pos - line.read_pos) * _DELAYPOS_SCALE + 0.5)
        self._next_random_lineseg(line, n)
        line.filter_state = 0.0
        line.buf = [0.0] * line.buffer_size
        return line

    def _next_random_lineseg(self, line: _DelayLine, n: int) -> None:
        params = _REVERB_PARAMS[n]
        if line.seed_val < 0:
            line.seed_val += 0x10000
        line.seed_val = (line.seed_val * 15625 + 1) & 0xFFFF
        if line.seed_val >= 0x8000:
            line.seed_val -= 0x10000

        line.rand_line_cnt = int(self._sample_rate / params[2] + 0.5)
        prv_del = line.write_pos - (
            line.read_pos + line.read_pos_frac / _DELAYPOS_SCALE
        )
        while prv_del < 0.0:
            prv_del += line.buffer_size
        prv_del /= self._sample_rate
        nxt_del = line.seed_val * params[1] / 32768.0
        nxt_del = params[0] + nxt_del * self._pitch_mod
        phs_inc = (prv_del - nxt_del) / line.rand_line_cnt
        phs_inc = phs_inc * self._sample_rate + 1.0
        line.read_pos_frac_inc = int(phs_inc * _DELAYPOS_SCALE + 0.5)

    def process(self, in1: float, in2: float) -> tuple[float, float]:
        """Feed one stereo sample through the reverb and return (left, right)."""
        if self.lp_freq != self._prv_lpfreq:
            self._prv_lpfreq = self.lp_freq
            damp = 2.0 - math.cos(self._prv_lpfreq * math.tau / self._sample_rate)
            self._damp_fact = damp - math.sqrt(damp * damp - 1.0)
        damp_fact = self._damp_fact

        junction = sum(line.filter_state for line in self._lines) * _JP_SCALE
        in_r = junction + in2
        in_l = junction + in1
        out_l = 0.0
        out_r = 0.0

        for n, line in enumerate(self._lines):
            size = line.buffer_size
            odd = n & 1

            line.buf[line.write_pos] = (in_r if odd else in_l) - line.filter_state
            line.write_pos += 1
            if line.write_pos >= size:
                line.write_pos -= size

            if line.read_pos_frac >= _DELAYPOS_SCALE:
                line.read_pos += line.read_pos_frac >> _DELAYPOS_SHIFT
                line.read_pos_frac &= _DELAYPOS_MASK
            if line.read_pos >= size:
                line.read_pos -= size
            read_pos = line.read_pos
            frac = line.read_pos_frac / _DELAYPOS_SCALE

            a2 = (frac * frac - 1.0) / 6.0
            a1 = (frac + 1.0) * 0.5
            am1 = a1 - 1.0
            a0 = 3.0 * a2
            a1 -= a0
            am1 -= a2
            a0 -= frac

            buf = line.buf
            vm1 = buf[(read_pos - 1) % size]
            v0 = buf[read_pos % size]
            v1 = buf[(read_pos + 1) % size]
            v2 = buf[(read_pos + 2) % size]
            v0 = (am1 * vm1 + a0 * v0 + a1 * v1 + a2 * v2) * frac + v0

            line.read_pos_frac += line.read_pos_frac_inc

            v0 *= self.feedback
            v0 = (line.filter_state - v0) * damp_fact + v0
            line.filter_state = v0

            if odd:
                out_r += v0
            else:
                out_l += v0

            line.rand_line_cnt -= 1
            if line.rand_line_cnt <= 0:
                self._next_random_lineseg(line, n)

        return out_l * _OUTPUT_GAIN, out_r * _OUTPUT_GAIN