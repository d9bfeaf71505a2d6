import math

import pytest

from seedsp.reverbsc import ReverbSc


def _impulse_response(reverb, length, amplitude=1.0):
    outputs = [reverb.process(amplitude, amplitude)]
    outputs.extend(reverb.process(0.0, 0.0) for _ in range(length - 1))
    return outputs


def test_silence_in_gives_silence_out():
    reverb = ReverbSc(48000)
    outputs = [reverb.process(0.0, 0.0) for _ in range(200)]
    assert all(out == (0.0, 0.0) for out in outputs)


def test_first_output_is_delayed():
    reverb = ReverbSc(48000)
    assert reverb.process(1.0, 1.0) == (0.0, 0.0)


def test_impulse_eventually_produces_output():
    reverb = ReverbSc(48000)
    outputs = _impulse_response(reverb, 3000)
    peak_left = max(abs(left) for left, _ in outputs)
    peak_right = max(abs(right) for _, right in outputs)
    assert peak_left > 0.0
    assert peak_right > 0.0


def test_output_is_deterministic():
    first = _impulse_response(ReverbSc(48000), 2500)
    second = _impulse_response(ReverbSc(48000), 2500)
    assert first == second


def test_output_scales_linearly_with_input():
    unit = _impulse_response(ReverbSc(48000), 2500, 1.0)
    doubled = _impulse_response(ReverbSc(48000), 2500, 2.0)
    for (l1, r1), (l2, r2) in zip(unit, doubled):
        assert math.isclose(l2, 2.0 * l1, rel_tol=1e-9, abs_tol=1e-12)
        assert math.isclose(r2, 2.0 * r1, rel_tol=1e-9, abs_tol=1e-12)


def test_output_stays_finite_and_bounded():
    reverb = ReverbSc(48000)
    reverb.feedback = 0.9
    reverb.lp_freq = 5000.0
    outputs = _impulse_response(reverb, 4000)
    assert all(math.isfinite(v) and abs(v) < 10.0 for out in outputs for v in out)


def test_zero_feedback_response_dies_away():
    reverb = ReverbSc(48000)
    reverb.feedback = 0.0
    outputs = _impulse_response(reverb, 6000)
    assert all(out == (0.0, 0.0) for out in outputs[-500:])


def test_too_high_sample_rate_rejected():
    with pytest.raises(ValueError):
        ReverbSc(96000)