"""Envelope-following auto-wah."""

from __future__ import annotations

import math

__all__ = ["Autowah"]


class Autowah:
    """Resonant filter swept by the input level.

    ``wah`` sets the effect amount, ``dry_wet`` the mix (0 to 100) and
    ``level`` the wah output level.
    """

    def __init__(self, sample_rate: float) -> None:
        self._sampling_freq = sample_rate
        self._const1 = 1413.72 / sample_rate
        self._const2 = math.exp(0.0 - (100.0 / sample_rate))
        self._const4 = math.exp(0.0 - (10.0 / sample_rate))

        self.dry_wet = 100.0
        self.level = 0.1
        self.wah = 0.0

        self._rec0 = [0.0, 0.0, 0.0]
        self._rec1 = [0.0, 0.0]
        self._rec2 = [0.0, 0.0]
        self._rec3 = [0.0, 0.0]
        self._rec4 = [0.0, 0.0]
        self._rec5 = [0.0, 0.0]

    def process(self, sample: float) -> float:
        """Return the next processed sample."""
        slow2 = 0.01 * (self.dry_wet * self.level)
        slow3 = (1.0 - 0.01 * self.dry_wet) + (1.0 - self.wah)
        rec0, rec1, rec2 = self._rec0, self._rec1, self._rec2
        rec3, rec4, rec5 = self._rec3, self._rec4, self._rec5
        c1 = self._const1

        temp1 = abs(sample)
        rec3[0] = max(temp1, self._const4 * rec3[1] + (1.0 - self._const4) * temp1)
        rec2[0] = self._const2 * rec2[1] + (1.0 - self._const2) * rec3[0]
        temp2 = min(1.0, rec2[0])
        temp3 = 2.0 ** (2.3 * temp2)
        temp4 = 1.0 - (c1 * temp3 / 2.0 ** (1.0 + 2.0 * (1.0 - temp2)))
        rec1[0] = 0.999 * rec1[1] + 0.001 * (
            0.0 - 2.0 * (temp4 * math.cos(c1 * 2 * temp3))
        )
        rec4[0] = 0.999 * rec4[1] + 0.001 * temp4 * temp4
        rec5[0] = 0.999 * rec5[1] + 0.0001 * 4.0**temp2
        rec0[0] = 0.0 - (
            (rec1[0] * rec0[1] + rec4[0] * rec0[2]) - slow2 * (rec5[0] * sample)
        )

        out = self.wah * (rec0[0] - rec0[1]) + slow3 * sample
        rec3[1] = rec3[0]
        rec2[1] = rec2[0]
        rec1[1] = rec1[0]
        rec4[1] = rec4[0]
        rec5[1] = rec5[0]
        rec0[2] = rec0[1]
        rec0[1] = rec0[0]
        return out