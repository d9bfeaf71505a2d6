"""Simple peak limiter."""

from __future__ import annotations

from collections.abc import Iterable

from .shaping import soft_limit

__all__ = ["Limiter"]


class Limiter:
    """Tracks the peak level and scales blocks down with a soft limit."""

    def __init__(self) -> None:
        self._peak = 0.5

    def process_block(self, samples: Iterable[float], pre_gain: float) -> list[float]:
        """Return the limited block after applying pre_gain."""
        out = []
        for sample in samples:
            pre = sample * pre_gain
            error = abs(pre) - self._peak
            self._peak += (0.05 if error > 0 else 0.00002) * error
            gain = 1.0 if self._peak <= 1.0 else 1.0 / self._peak
            out.append(soft_limit(pre * gain * 0.7))
        return out