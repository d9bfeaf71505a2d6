"""Soft-clipping overdrive with gain compensation."""

from __future__ import annotations

from .shaping import soft_clip

__all__ = ["Overdrive"]


class Overdrive:
    """Distortion whose pre and post gain follow a single drive setting."""

    def __init__(self) -> None:
        self._drive = 0.0
        self._pre_gain = 0.0
        self._post_gain = 0.0
        self.drive = 0.5

    def process(self, sample: float) -> float:
        """Return the overdriven sample."""
        return soft_clip(self._pre_gain * sample) * self._post_gain

    @property
    def drive(self) -> float:
        """Drive amount, 0 to 1."""
        return self._drive

    @drive.setter
    def drive(self, value: float) -> None:
        value = min(max(value, 0.0), 1.0)
        self._drive = value
        drive = 2.0 * value

        drive_2 = drive * drive
        pre_gain_a = drive * 0.5
        pre_gain_b = drive_2 * drive_2 * drive * 24.0
        self._pre_gain = pre_gain_a + (pre_gain_b - pre_gain_a) * drive_2

        drive_squashed = drive * (2.0 - drive)
        self._post_gain = 1.0 / soft_clip(
            0.33 + drive_squashed * (self._pre_gain - 0.33)
        )