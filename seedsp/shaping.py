"""Soft saturation curves shared by drum and effect modules."""

from __future__ import annotations

__all__ = ["soft_limit", "soft_clip"]


def soft_limit(x: float) -> float:
    """Rational approximation of tanh that reaches 1 at x = 3."""
    return x * (27.0 + x * x) / (27.0 + 9.0 * x * x)


def soft_clip(x: float) -> float:
    """Soft-limit x, holding it at -1 or 1 beyond +/-3."""
    if x < -3.0:
        return -1.0
    if x > 3.0:
        return 1.0
    return soft_limit(x)