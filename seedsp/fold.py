"""Sample-and-hold foldover distortion."""

from __future__ import annotations

__all__ = ["Fold"]


class Fold:
    """Holds input samples for ``increment`` samples at a time."""

    def __init__(self) -> None:
        self.increment = 1000.0
        self._sample_index = 0
        self._index = 0.0
        self._value = 0.0

    def process(self, sample: float) -> float:
        """Return the held or newly captured sample."""
        if self._index < self._sample_index:
            self._index += self.increment
            self._value = sample
        self._sample_index += 1
        return self._value