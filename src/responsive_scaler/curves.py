"""Non-linear curve transforms applied after the token scale factor.

Each curve maps ``(value, ratio)`` to a new value. The ratio drives the
shape, not the already-scaled value. Names outside the registry (including
``"custom"``) pass the value through unchanged.
"""

from __future__ import annotations

from typing import Callable

PHI = 1.618033988749895


def linear(value: float, ratio: float) -> float:
    return value


def ease_in(value: float, ratio: float) -> float:
    return value * ratio ** 0.5


def ease_out(value: float, ratio: float) -> float:
    return value * ratio ** 2


def ease_in_out(value: float, ratio: float) -> float:
    if ratio < 0.5:
        return value * 2 * ratio * ratio
    return value * (1 - (-2 * ratio + 2) ** 2 / 2)


def golden_ratio(value: float, ratio: float) -> float:
    return value * ratio ** (1 / PHI)


CURVES: dict[str, Callable[[float, float], float]] = {
    "linear": linear,
    "ease-in": ease_in,
    "ease-out": ease_out,
    "ease-in-out": ease_in_out,
    "golden-ratio": golden_ratio,
}


def apply_curve(name: str | None, value: float, ratio: float) -> float:
    """Transform ``value`` with the named curve, or return it unchanged."""
    if name is None:
        return value
    curve = CURVES.get(name)
    if curve is None:
        return value
    return curve(value, ratio)
