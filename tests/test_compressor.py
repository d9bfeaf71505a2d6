import pytest

from seedsp.compressor import Compressor


def test_defaults():
    c = Compressor(48000)
    assert c.ratio == 2.0
    assert c.threshold == -12.0
    assert c.attack == pytest.approx(0.1)
    assert c.release == pytest.approx(0.1)


def test_auto_makeup_default_value():
    c = Compressor(48000)
    assert c.makeup == pytest.approx(3.0)


def test_auto_makeup_off_zeroes_makeup():
    c = Compressor(48000)
    c.auto_makeup(False)
    assert c.makeup == 0.0
    c.threshold = -30.0
    assert c.makeup == 0.0


def test_manual_makeup():
    c = Compressor(48000)
    c.auto_makeup(False)
    c.makeup = 6.0
    assert c.makeup == 6.0


def test_process_matches_apply():
    c = Compressor(48000)
    out = c.process(0.5)
    assert out == c.apply(0.5)


def test_sidechain_equivalence():
    a = Compressor(48000)
    b = Compressor(48000)
    out_a = a.process(0.3, 0.9)
    b.process(0.9)
    assert out_a == b.apply(0.3)


def test_process_block_matches_single_samples():
    signal = [0.1, 0.8, -0.9, 0.4, 0.0, 1.0]
    a = Compressor(48000)
    b = Compressor(48000)
    assert a.process_block(signal) == [b.process(x) for x in signal]


def test_process_channels_matches_block():
    key = [0.2, 0.9, -0.7, 0.3]
    left = [0.1, 0.2, 0.3, 0.4]
    right = [-0.5, 0.5, -0.5, 0.5]
    multi = Compressor(48000)
    result = multi.process_channels([left, right], key)
    single = Compressor(48000)
    expected_left = single.process_block(left, key)
    assert result[0] == expected_left
    assert len(result[1]) == len(right)


def test_length_mismatch_raises():
    c = Compressor(48000)
    with pytest.raises(ValueError):
        c.process_block([0.1, 0.2], [0.1])
    with pytest.raises(ValueError):
        c.process_channels([[0.1, 0.2]], [0.1])


def test_loud_signal_reduces_gain():
    c = Compressor(1000)
    c.auto_makeup(False)
    for _ in range(2000):
        c.process(1.0)
    assert c.gain < -1.0


def test_quiet_signal_settles_to_unity():
    c = Compressor(1000)
    c.auto_makeup(False)
    for _ in range(2000):
        c.process(0.01)
    assert c.gain == pytest.approx(0.0, abs=1e-3)


def test_zero_sample_rate_is_clamped():
    clamped = Compressor(0)
    minimum = Compressor(1)
    signal = [0.5, 0.9, -0.3, 0.1]
    assert clamped.process_block(signal) == minimum.process_block(signal)