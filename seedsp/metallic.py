"""Metallic noise source and VCA shapes for hi-hat style sounds."""

from __future__ import annotations

__all__ = ["SquareNoise", "swing_vca", "linear_vca"]

_RATIOS = (1.0, 1.304, 1.466, 1.787, 1.932, 2.536)
_UINT32_MASK = 0xFFFFFFFF
_PHASE_SCALE = 4294967296.0


class SquareNoise:
    """808-style metallic noise made from six detuned square oscillators."""

    def __init__(self) -> None:
        self._phases = [0] * len(_RATIOS)

    def process(self, f0: float) -> float:
        """Return the next sample for a normalised base frequency f0."""
        noise = 0
        new_phases = []
        for ratio, phase in zip(_RATIOS, self._phases):
            f = min(f0 * ratio, 0.499)
            increment = int(f * _PHASE_SCALE) & _UINT32_MASK
            phase = (phase + increment) & _UINT32_MASK
            noise += phase >> 31
            new_phases.append(phase)
        self._phases = new_phases
        return 0.33 * float(noise) - 1.0


def swing_vca(sample: float, gain: float) -> float:
    """Asymmetric saturating VCA."""
    sample *= 10.0 if sample > 0.0 else 0.1
    sample = sample / (1.0 + abs(sample))
    return (sample + 1.0) * gain


def linear_vca(sample: float, gain: float) -> float:
    """Plain multiplying VCA."""
    return sample * gain