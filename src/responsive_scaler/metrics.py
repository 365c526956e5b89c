"""Incrementally updated engine performance metrics."""

from __future__ import annotations

from responsive_scaler.config import PerformanceMetrics

# Rough per-entry size estimate, not a measurement.
MEMORY_PER_ENTRY = 100


class MetricsAggregator:
    """Running operation count, hit rate, and average miss time.

    Averages are updated in place from the previous value and the new
    operation count; no history is kept.
    """

    def __init__(self) -> None:
        self._metrics = PerformanceMetrics()

    def record(self, cache_hit: bool, computation_time: float, cache_size: int) -> None:
        """Fold one scale request into the running metrics."""
        m = self._metrics
        m.total_operations += 1
        n = m.total_operations

        if cache_hit:
            m.cache_hit_rate = (m.cache_hit_rate * (n - 1) + 1) / n
        else:
            m.cache_hit_rate = (m.cache_hit_rate * (n - 1)) / n
            m.average_computation_time = (
                m.average_computation_time * (n - 1) + computation_time
            ) / n

        self.update_memory(cache_size)

    def update_memory(self, cache_size: int) -> None:
        self._metrics.memory_usage = cache_size * MEMORY_PER_ENTRY
        self._metrics.peak_memory_usage = max(
            self._metrics.peak_memory_usage, self._metrics.memory_usage
        )

    def reset_memory(self) -> None:
        """Zero the memory estimate after the cache is emptied. Counters stay."""
        self._metrics.memory_usage = 0

    def snapshot(self) -> PerformanceMetrics:
        return self._metrics.model_copy()
