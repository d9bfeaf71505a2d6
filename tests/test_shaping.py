import pytest

from seedsp.shaping import soft_clip, soft_limit


def test_soft_limit_zero_is_zero():
    assert soft_limit(0.0) == 0.0


def test_soft_limit_reaches_one_at_three():
    assert soft_limit(3.0) == pytest.approx(1.0)
    assert soft_limit(-3.0) == pytest.approx(-1.0)


@pytest.mark.parametrize("x", [0.1, 0.5, 1.0, 2.2, 2.9])
def test_soft_limit_is_odd(x):
    assert soft_limit(-x) == pytest.approx(-soft_limit(x))


@pytest.mark.parametrize("x", [3.01, 5.0, 100.0])
def test_soft_clip_saturates_high(x):
    assert soft_clip(x) == 1.0
    assert soft_clip(-x) == -1.0


@pytest.mark.parametrize("x", [-2.5, -1.0, 0.0, 0.3, 2.0])
def test_soft_clip_matches_soft_limit_inside_range(x):
    assert soft_clip(x) == soft_limit(x)


def test_soft_clip_is_monotonic_and_bounded():
    xs = [i / 10.0 for i in range(-50, 51)]
    ys = [soft_clip(x) for x in xs]
    assert all(b >= a for a, b in zip(ys, ys[1:]))
    assert all(-1.0 <= y <= 1.0 for y in ys)