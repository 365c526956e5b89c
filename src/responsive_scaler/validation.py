"""Configuration checks run before a configuration is accepted."""

from __future__ import annotations

import logging
from collections import Counter

from responsive_scaler.config import ResponsiveConfig
from responsive_scaler.errors import InvalidConfigError
from responsive_scaler.ratios import ORIGINS

logger = logging.getLogger(__name__)

MODES = ("linear", "exponential", "logarithmic", "golden-ratio", "custom")

MIN_READABLE_FONT_SIZE = 8
MIN_TAP_TARGET = 44


def structural_issues(config: ResponsiveConfig) -> list[str]:
    """Problems that make the configuration unusable."""
    issues = []

    if not config.breakpoints:
        issues.append("At least one breakpoint is required")

    base = config.base
    if not any(
        bp.name == base.name or (base.alias is not None and bp.alias == base.alias)
        for bp in config.breakpoints
    ):
        issues.append("Base breakpoint must be included in breakpoints")

    counts = Counter(bp.name for bp in config.breakpoints)
    duplicates = sorted(name for name, n in counts.items() if n > 1)
    if duplicates:
        issues.append(f"Breakpoint names must be unique (duplicated: {', '.join(duplicates)})")

    if config.strategy.origin not in ORIGINS:
        issues.append(f"Invalid scaling origin '{config.strategy.origin}'")

    if config.strategy.mode not in MODES:
        issues.append(f"Invalid scaling mode '{config.strategy.mode}'")

    return issues


def accessibility_issues(config: ResponsiveConfig) -> list[str]:
    """Advisory problems: the configuration works but may hurt usability."""
    issues = []
    rules = config.strategy.accessibility
    if rules.min_font_size < MIN_READABLE_FONT_SIZE:
        issues.append(
            f"Minimum font size should be at least {MIN_READABLE_FONT_SIZE}px for accessibility"
        )
    if rules.min_tap_target < MIN_TAP_TARGET:
        issues.append(
            f"Minimum tap target should be at least {MIN_TAP_TARGET}px for accessibility"
        )
    return issues


def validate_config(config: ResponsiveConfig) -> list[str]:
    """All issues with ``config``; an empty list means it is valid."""
    return structural_issues(config) + accessibility_issues(config)


def check_config(config: ResponsiveConfig) -> None:
    """Raise InvalidConfigError on structural issues, warn on advisory ones."""
    issues = structural_issues(config)
    if issues:
        raise InvalidConfigError(
            f"Invalid configuration: {'; '.join(issues)}",
            details=issues,
        )
    for issue in accessibility_issues(config):
        logger.warning(issue)
