import math
import random

import pytest

from seedsp.autowah import Autowah


def test_silence_stays_silent():
    wah = Autowah(48000)
    wah.wah = 1.0
    assert all(wah.process(0.0) == 0.0 for _ in range(100))


def test_no_wah_passes_input():
    wah = Autowah(48000)
    signal = [0.1, -0.4, 0.7, 0.0, -0.9]
    assert [wah.process(x) for x in signal] == pytest.approx(signal)


def test_dry_mix_passes_input():
    wah = Autowah(48000)
    wah.wah = 1.0
    wah.dry_wet = 0.0
    signal = [0.3, -0.2, 0.5, 0.8]
    assert [wah.process(x) for x in signal] == pytest.approx(signal)


def test_full_wah_changes_signal_and_stays_finite():
    rng = random.Random(3)
    wah = Autowah(48000)
    wah.wah = 1.0
    signal = [rng.uniform(-1, 1) for _ in range(2000)]
    out = [wah.process(x) for x in signal]
    assert all(math.isfinite(x) for x in out)
    assert any(abs(o - s) > 1e-6 for o, s in zip(out, signal))