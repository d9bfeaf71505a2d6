import pytest

from seedsp.limiter import Limiter
from seedsp.shaping import soft_limit


def test_empty_block():
    assert Limiter().process_block([], 1.0) == []


def test_quiet_signal_uses_unity_gain():
    lim = Limiter()
    out = lim.process_block([0.1, -0.2, 0.3], 1.0)
    assert out == pytest.approx([soft_limit(0.07), soft_limit(-0.14), soft_limit(0.21)])


def test_length_preserved():
    assert len(Limiter().process_block([0.0] * 17, 2.0)) == 17


def test_gain_reduction_grows_over_time():
    lim = Limiter()
    out = lim.process_block([5.0] * 200, 1.0)
    assert out[-1] < out[0]


def test_state_carries_between_blocks():
    lim = Limiter()
    lim.process_block([5.0] * 200, 1.0)
    fresh = Limiter()
    assert lim.process_block([5.0], 1.0)[0] < fresh.process_block([5.0], 1.0)[0]