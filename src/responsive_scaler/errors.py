"""Custom exception hierarchy for the scaling engine."""

from __future__ import annotations

from typing import Any


class ScalingError(Exception):
    """Base exception for all scaling engine errors."""

    code = "SCALING_FAILED"

    def __init__(self, message: str, details: Any = None) -> None:
        super().__init__(message)
        self.details = details


class InvalidConfigError(ScalingError):
    """Unrecognized origin/mode or a malformed configuration (maps to HTTP 400)."""

    code = "INVALID_CONFIG"


class InvalidBreakpointError(ScalingError):
    """Target breakpoint has no precomputed ratio (maps to HTTP 404)."""

    code = "INVALID_BREAKPOINT"


class ScalingFailedError(ScalingError):
    """Unexpected failure while computing a scaled value (maps to HTTP 500)."""

    code = "SCALING_FAILED"


class CacheError(ScalingError):
    """Cache-layer failure. Never raised by the in-memory cache."""

    code = "CACHE_ERROR"
