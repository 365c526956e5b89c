"""Memoization of scale results keyed by request."""

from __future__ import annotations

from responsive_scaler.config import Breakpoint, ScaledValue, ScaleOptions

DEFAULT_PART = "default"


def format_number(value: float) -> str:
    """Render a number the way it appears in cache keys (``24``, not ``24.0``)."""
    text = repr(float(value))
    if text.endswith(".0"):
        return text[:-2]
    return text


def _part(value: float | None) -> str:
    return DEFAULT_PART if value is None else format_number(value)


def make_cache_key(value: float, breakpoint: Breakpoint, options: ScaleOptions) -> str:
    """Deterministic key for a scale request.

    ``bypass_cache`` and ``unit`` do not affect the computed value and are
    left out of the key.
    """
    parts = [
        format_number(value),
        breakpoint.name,
        options.token or DEFAULT_PART,
        _part(options.scale),
        _part(options.min),
        _part(options.max),
        _part(options.step),
    ]
    return "|".join(parts)


class ResultCache:
    """In-memory key -> ScaledValue table owned by a single engine.

    There is no TTL, LRU, or size cap: entries live until cleared or
    invalidated, so the cache grows with the number of distinct requests.
    """

    def __init__(self) -> None:
        self._entries: dict[str, ScaledValue] = {}

    def get(self, key: str) -> ScaledValue | None:
        return self._entries.get(key)

    def set(self, key: str, result: ScaledValue) -> None:
        self._entries[key] = result

    def clear(self) -> None:
        self._entries.clear()

    def invalidate(self, pattern: str | None = None) -> int:
        """Remove entries whose key contains ``pattern``; no pattern clears all.

        Returns the number of entries removed.
        """
        if not pattern:
            removed = len(self._entries)
            self.clear()
            return removed
        doomed = [key for key in self._entries if pattern in key]
        for key in doomed:
            del self._entries[key]
        return len(doomed)

    def keys(self) -> list[str]:
        return list(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
