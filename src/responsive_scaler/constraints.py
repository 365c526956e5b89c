"""Token pipeline: scale factor, curve, bounds, step, and precision rounding."""

from __future__ import annotations

import math
from dataclasses import dataclass

from responsive_scaler.config import (
    ConstraintFlags,
    RoundingRule,
    ScaleOptions,
    ScalingToken,
)
from responsive_scaler.curves import apply_curve
from responsive_scaler.tokens import token_factor


@dataclass
class PipelineResult:
    """Final value of the token pipeline plus its binding constraints."""

    value: float
    constraints: ConstraintFlags


def round_half_up(value: float) -> float:
    """Round to the nearest integer, ties toward +infinity."""
    return math.floor(value + 0.5)


def quantize(value: float, step: float) -> float:
    """Snap ``value`` to the nearest multiple of ``step``."""
    return round_half_up(value / step) * step


def round_to_precision(value: float, digits: int, mode: str = "nearest") -> float:
    """Round to ``digits`` decimal places in the direction given by ``mode``.

    ``custom`` and any unrecognized mode round to nearest.
    """
    factor = 10 ** digits
    if mode == "up":
        return math.ceil(value * factor) / factor
    if mode == "down":
        return math.floor(value * factor) / factor
    return round_half_up(value * factor) / factor


def apply_pipeline(
    base_value: float,
    ratio: float,
    token: ScalingToken,
    options: ScaleOptions,
    rounding: RoundingRule | None = None,
) -> PipelineResult:
    """Run the token pipeline on an already ratio-scaled value.

    Order is fixed: scale factor, curve, floor, ceiling, step, precision.
    A floor above the ceiling therefore resolves to the ceiling.
    """
    rounding = rounding or RoundingRule()

    value = base_value * token_factor(token, ratio, options.scale)

    if token.curve and token.curve != "linear":
        value = apply_curve(token.curve, value, ratio)

    floor = options.min if options.min is not None else token.min
    ceiling = options.max if options.max is not None else token.max
    step = options.step if options.step is not None else token.step

    if floor is not None:
        value = max(value, floor)
    if ceiling is not None:
        value = min(value, ceiling)

    stepped = None
    if step is not None:
        value = stepped = quantize(value, step)

    digits = token.precision if token.precision is not None else rounding.precision
    value = round_to_precision(value, digits, rounding.mode)

    # Equality against the bound, not a record of whether clamping happened.
    constraints = ConstraintFlags(
        min_applied=floor is not None and value == floor,
        max_applied=ceiling is not None and value == ceiling,
        step_applied=stepped is not None and value == stepped,
    )
    return PipelineResult(value=value, constraints=constraints)
