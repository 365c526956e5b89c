"""Ratio origins and the precomputed base-to-breakpoint ratio table."""

from __future__ import annotations

import logging
import math
from typing import Callable, Iterable, Mapping

from responsive_scaler.config import Breakpoint
from responsive_scaler.errors import InvalidBreakpointError, InvalidConfigError

logger = logging.getLogger(__name__)


def width_ratio(base: Breakpoint, target: Breakpoint) -> float:
    return target.width / base.width


def height_ratio(base: Breakpoint, target: Breakpoint) -> float:
    return target.height / base.height


def min_ratio(base: Breakpoint, target: Breakpoint) -> float:
    """Ratio of the shorter sides."""
    return min(target.width, target.height) / min(base.width, base.height)


def max_ratio(base: Breakpoint, target: Breakpoint) -> float:
    """Ratio of the longer sides."""
    return max(target.width, target.height) / max(base.width, base.height)


def diagonal_ratio(base: Breakpoint, target: Breakpoint) -> float:
    base_diagonal = math.sqrt(base.width ** 2 + base.height ** 2)
    target_diagonal = math.sqrt(target.width ** 2 + target.height ** 2)
    return target_diagonal / base_diagonal


def area_ratio(base: Breakpoint, target: Breakpoint) -> float:
    return (target.width * target.height) / (base.width * base.height)


ORIGINS: dict[str, Callable[[Breakpoint, Breakpoint], float]] = {
    "width": width_ratio,
    "height": height_ratio,
    "min": min_ratio,
    "max": max_ratio,
    "diagonal": diagonal_ratio,
    "area": area_ratio,
}


def compute_ratio(base: Breakpoint, target: Breakpoint, origin: str) -> float:
    """Scalar relating ``target`` to ``base`` under the given origin."""
    if origin not in ORIGINS:
        raise InvalidConfigError(
            f"Invalid scaling origin '{origin}'. Valid: {sorted(ORIGINS.keys())}",
            details={"origin": origin},
        )
    return ORIGINS[origin](base, target)


def ratio_key(base: Breakpoint, target: Breakpoint) -> str:
    return f"{base.name}-{target.name}"


class RatioTable:
    """Immutable lookup of base-to-target ratios, one entry per breakpoint.

    Built in full from a configuration; replacing the configuration means
    building a new table, never patching an existing one.
    """

    def __init__(self, base: Breakpoint, origin: str, ratios: Mapping[str, float]) -> None:
        self.base = base
        self.origin = origin
        self._ratios = dict(ratios)

    @classmethod
    def build(
        cls,
        base: Breakpoint,
        breakpoints: Iterable[Breakpoint],
        origin: str,
    ) -> RatioTable:
        """Precompute the ratio of every breakpoint against ``base``.

        The base itself always gets an entry, even when the list only
        carries it under a different name sharing its alias.
        """
        ratios = {
            ratio_key(base, target): compute_ratio(base, target, origin)
            for target in breakpoints
        }
        ratios.setdefault(ratio_key(base, base), compute_ratio(base, base, origin))
        logger.debug(
            "Built ratio table for base '%s' (origin=%s): %s",
            base.name, origin, ratios,
        )
        return cls(base, origin, ratios)

    def get(self, target: Breakpoint) -> float:
        """Precomputed ratio for ``target``.

        A miss means the breakpoint was never part of the configuration,
        which is a caller error rather than a transient condition.
        """
        key = ratio_key(self.base, target)
        ratio = self._ratios.get(key)
        if ratio is None:
            raise InvalidBreakpointError(
                f"No scaling ratio found for {key}",
                details={"key": key},
            )
        return ratio

    def as_dict(self) -> dict[str, float]:
        return dict(self._ratios)

    def __contains__(self, key: object) -> bool:
        return key in self._ratios

    def __len__(self) -> int:
        return len(self._ratios)
