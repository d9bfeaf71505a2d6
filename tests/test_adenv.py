import math

import pytest

from seedsp.adenv import AdEnv, AdEnvSegment


def make_env(curve=0.0):
    env = AdEnv(1000)
    env.set_time(AdEnvSegment.ATTACK, 0.01)
    env.set_time(AdEnvSegment.DECAY, 0.01)
    env.set_curve(curve)
    return env


def test_idle_outputs_minimum():
    env = AdEnv(48000)
    assert env.process() == 0.0
    assert env.is_running is False
    assert env.current_segment is AdEnvSegment.IDLE


def test_idle_respects_min_max():
    env = AdEnv(48000)
    env.set_min(2.0)
    env.set_max(4.0)
    assert env.process() == 2.0


def test_trigger_starts_attack():
    env = make_env()
    env.trigger()
    first = env.process()
    assert first == pytest.approx(0.0001)
    assert env.current_segment is AdEnvSegment.ATTACK
    assert env.is_running is True


def test_full_cycle_linear():
    env = make_env()
    env.trigger()
    values = [env.process() for _ in range(60)]
    peak_index = values.index(max(values))
    assert max(values) >= 0.99
    attack = values[: peak_index + 1]
    assert all(b > a for a, b in zip(attack, attack[1:]))
    assert env.is_running is False
    assert values[-1] == 0.0
    assert env.value == 0.0


def test_decay_segment_reached():
    env = make_env()
    env.trigger()
    segments = set()
    for _ in range(60):
        env.process()
        segments.add(env.current_segment)
    assert AdEnvSegment.DECAY in segments
    assert env.current_segment is AdEnvSegment.IDLE


@pytest.mark.parametrize("curve", [-5.0, 5.0])
def test_curved_cycle_finishes(curve):
    env = make_env(curve)
    env.trigger()
    values = [env.process() for _ in range(200)]
    assert all(math.isfinite(v) for v in values)
    assert max(values) >= 0.99
    assert env.is_running is False


def test_value_tracks_range():
    env = make_env()
    env.set_min(-1.0)
    env.set_max(1.0)
    env.trigger()
    env.process()
    env.process()
    assert -1.0 <= env.value <= 1.0
    assert env.value > -1.0


def test_set_time_bad_segment():
    env = AdEnv(48000)
    with pytest.raises(IndexError):
        env.set_time(7, 0.1)