"""Dynamics compressor with sidechain and automatic makeup gain."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

__all__ = ["Compressor"]


class Compressor:
    """Feed-forward compressor whose coefficients update when parameters change."""

    def __init__(self, sample_rate: float) -> None:
        self._sample_rate = int(min(192000, max(1, sample_rate)))
        self._sample_rate_inv = 1.0 / self._sample_rate
        self._sample_rate_inv2 = 2.0 / self._sample_rate

        self._ratio = 0.0
        self._thresh = 0.0
        self._atk = 0.0
        self._rel = 0.0
        self._makeup_gain = 0.0
        self._makeup_auto = False
        self._gain = 1.0
        self._atk_slo = 0.0
        self._atk_slo2 = 0.0
        self._rel_slo = 0.0
        self._ratio_mul = 0.0

        # Order matters: each setter relies on what the previous ones computed.
        self.ratio = 2.0
        self.attack = 0.1
        self.release = 0.1
        self.threshold = -12.0
        self.auto_makeup(True)

        self._gain_rec = 0.1
        self._slope_rec = 0.1

    def _recalculate_ratio(self) -> None:
        self._ratio_mul = (1.0 - self._atk_slo2) * ((1.0 / self._ratio) - 1.0)

    def _recalculate_attack(self) -> None:
        self._atk_slo = math.exp(-(self._sample_rate_inv / self._atk))
        self._atk_slo2 = math.exp(-(self._sample_rate_inv2 / self._atk))
        self._recalculate_ratio()

    def _recalculate_release(self) -> None:
        self._rel_slo = math.exp(-(self._sample_rate_inv / self._rel))

    def _recalculate_makeup(self) -> None:
        if self._makeup_auto:
            self._makeup_gain = abs(self._thresh - self._thresh / self._ratio) * 0.5

    def _detect(self, key: float) -> None:
        in_abs = abs(key)
        cur_slo = self._rel_slo if self._slope_rec > in_abs else self._atk_slo
        self._slope_rec = self._slope_rec * cur_slo + (1.0 - cur_slo) * in_abs
        level = (
            20.0 * math.log10(self._slope_rec) if self._slope_rec > 0.0 else -math.inf
        )
        self._gain_rec = self._atk_slo2 * self._gain_rec + self._ratio_mul * max(
            level - self._thresh, 0.0
        )
        self._gain = 10.0 ** (0.05 * (self._gain_rec + self._makeup_gain))

    def process(self, sample: float, key: float | None = None) -> float:
        """Compress one sample, detecting the level on key if one is given."""
        self._detect(sample if key is None else key)
        return self.apply(sample)

    def apply(self, sample: float) -> float:
        """Apply the most recently computed gain to a sample."""
        return self._gain * sample

    def process_block(
        self, samples: Iterable[float], key: Iterable[float] | None = None
    ) -> list[float]:
        """Compress a block of samples, optionally keyed by a sidechain block."""
        samples = list(samples)
        keys = samples if key is None else key
        out = []
        for sample, k in zip(samples, keys, strict=True):
            self._detect(k)
            out.append(self.apply(sample))
        return out

    def process_channels(
        self, channels: Sequence[Sequence[float]], key: Sequence[float]
    ) -> list[list[float]]:
        """Compress several channels together, keyed by one sidechain block."""
        if any(len(channel) != len(key) for channel in channels):
            raise ValueError("every channel must be as long as the key")
        out: list[list[float]] = [[] for _ in channels]
        for i, k in enumerate(key):
            self._detect(k)
            for channel, result in zip(channels, out):
                result.append(self.apply(channel[i]))
        return out

    def auto_makeup(self, enable: bool) -> None:
        """Turn automatic makeup gain on or off; turning it off sets makeup to 0."""
        self._makeup_auto = enable
        self._makeup_gain = 0.0
        self._recalculate_makeup()

    @property
    def ratio(self) -> float:
        """Compression ratio, about 1 to 40."""
        return self._ratio

    @ratio.setter
    def ratio(self, value: float) -> None:
        self._ratio = value
        self._recalculate_ratio()

    @property
    def threshold(self) -> float:
        """Threshold in dB above which compression applies."""
        return self._thresh

    @threshold.setter
    def threshold(self, value: float) -> None:
        self._thresh = value
        self._recalculate_makeup()

    @property
    def attack(self) -> float:
        """Attack time in seconds."""
        return self._atk

    @attack.setter
    def attack(self, value: float) -> None:
        self._atk = value
        self._recalculate_attack()

    @property
    def release(self) -> float:
        """Release time in seconds."""
        return self._rel

    @release.setter
    def release(self, value: float) -> None:
        self._rel = value
        self._recalculate_release()

    @property
    def makeup(self) -> float:
        """Makeup gain in dB."""
        return self._makeup_gain

    @makeup.setter
    def makeup(self, value: float) -> None:
        self._makeup_gain = value

    @property
    def gain(self) -> float:
        """Current gain in dB."""
        return 20.0 * math.log10(self._gain)