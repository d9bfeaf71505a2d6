"""Downsampling and bit reduction effect."""

from __future__ import annotations

__all__ = ["Decimator"]

_MAX_BITS_TO_CRUSH = 16


class Decimator:
    """Holds samples to lower the sample rate and zeroes low bits to crush them.

    ``downsample_factor`` sets how long each sample is held.
    """

    def __init__(self) -> None:
        self.downsample_factor = 1.0
        self._bitcrush_factor = 0.0
        self._bits_to_crush = 0
        self._downsampled = 0.0
        self._bitcrushed = 0.0
        self._inc = 0
        self._threshold = 0

    def process(self, sample: float) -> float:
        """Return the next downsampled and bitcrushed sample."""
        self._threshold = int(
            (self.downsample_factor * self.downsample_factor) * 96.0
        )
        self._inc += 1
        if self._inc > self._threshold:
            self._inc = 0
            self._downsampled = sample
        temp = int(self._downsampled * 65536.0)
        temp >>= self._bits_to_crush
        temp <<= self._bits_to_crush
        self._bitcrushed = temp / 65536.0
        return self._bitcrushed

    def set_bitcrush_factor(self, factor: float) -> None:
        """Set the amount of bitcrushing as a fraction of 16 bits."""
        bits = int(factor * _MAX_BITS_TO_CRUSH)
        if bits < 0:
            raise ValueError("bitcrush factor must not be negative")
        self._bits_to_crush = bits

    def set_bits_to_crush(self, bits: int) -> None:
        """Set the exact number of low bits to remove, at most 16."""
        if bits < 0:
            raise ValueError("number of bits must not be negative")
        self._bits_to_crush = min(bits, _MAX_BITS_TO_CRUSH)

    @property
    def bitcrush_factor(self) -> float:
        """Stored bitcrush factor."""
        return self._bitcrush_factor