"""Token lookup and scale-factor resolution."""

from __future__ import annotations

import logging

from responsive_scaler.config import ScalingStrategy, ScalingToken

logger = logging.getLogger(__name__)


def resolve_token(strategy: ScalingStrategy, name: str) -> ScalingToken | None:
    """Return the scaling rule for ``name``, or None if the strategy has none.

    A missing token is a soft configuration gap: callers fall back to
    ratio-only scaling.
    """
    token = strategy.tokens.get(name)
    if token is None:
        logger.warning(
            "Unknown scaling token '%s', falling back to ratio-only scaling. "
            "Known tokens: %s",
            name, sorted(strategy.tokens.keys()),
        )
    return token


def token_factor(token: ScalingToken, ratio: float, override: float | None = None) -> float:
    """Scale factor for a token at ``ratio``; an explicit override wins."""
    if override is not None:
        return override
    return token.scale.factor(ratio)
