"""ScalingEngine: converts values between breakpoints with memoization."""

from __future__ import annotations

import logging
import time

from responsive_scaler.cache import ResultCache, make_cache_key
from responsive_scaler.config import (
    Breakpoint,
    ComputationInfo,
    ConstraintFlags,
    PerformanceMetrics,
    ResponsiveConfig,
    ScaledValue,
    ScaleOptions,
)
from responsive_scaler.constraints import apply_pipeline
from responsive_scaler.errors import (
    InvalidBreakpointError,
    ScalingError,
    ScalingFailedError,
)
from responsive_scaler.metrics import MetricsAggregator
from responsive_scaler.ratios import RatioTable
from responsive_scaler.tokens import resolve_token
from responsive_scaler.validation import check_config

logger = logging.getLogger(__name__)


class ScalingEngine:
    """Scale design values from the base breakpoint to any configured one.

    Responsibility: own the ratio table, result cache, and metrics for one
    configuration generation. Not safe for concurrent use without external
    locking; ``update_config`` swaps the ratio table and clears the cache as
    two separate steps.
    """

    def __init__(self, config: ResponsiveConfig) -> None:
        self._config, self._ratios = self._prepare(config)
        self._cache = ResultCache()
        self._metrics = MetricsAggregator()

    @staticmethod
    def _prepare(config: ResponsiveConfig) -> tuple[ResponsiveConfig, RatioTable]:
        check_config(config)
        ratios = RatioTable.build(config.base, config.breakpoints, config.strategy.origin)
        return config, ratios

    @property
    def config(self) -> ResponsiveConfig:
        return self._config

    @property
    def ratios(self) -> dict[str, float]:
        return self._ratios.as_dict()

    def find_breakpoint(self, name: str) -> Breakpoint:
        """Look up a configured breakpoint by name, then by alias."""
        for bp in self._config.breakpoints:
            if bp.name == name:
                return bp
        for bp in self._config.breakpoints:
            if bp.alias == name:
                return bp
        raise InvalidBreakpointError(
            f"Unknown breakpoint '{name}'. "
            f"Available: {[bp.name for bp in self._config.breakpoints]}",
            details={"breakpoint": name},
        )

    def scale_value(
        self,
        value: float,
        target_breakpoint: Breakpoint,
        options: ScaleOptions | None = None,
    ) -> ScaledValue:
        """Scale ``value`` from the base breakpoint to ``target_breakpoint``.

        1. Return the memoized result if present (unless bypassing the cache)
        2. Look up the precomputed ratio
        3. Multiply by the ratio
        4. Run the token pipeline if a known token is requested
        5. Memoize the result and update metrics
        """
        if options is None:
            options = ScaleOptions()
        bypass = options.bypass_cache or not self._config.strategy.performance.memoization
        key = make_cache_key(value, target_breakpoint, options)

        if not bypass:
            cached = self._cache.get(key)
            if cached is not None:
                self._metrics.record(True, 0.0, len(self._cache))
                return cached.model_copy(
                    deep=True,
                    update={
                        "performance": ComputationInfo(
                            computation_time=cached.performance.computation_time,
                            cache_hit=True,
                        )
                    }
                )

        start_time = time.perf_counter()
        try:
            result = self._compute(value, target_breakpoint, options)
        except ScalingError:
            raise
        except Exception as exc:
            raise ScalingFailedError(f"Scaling failed: {exc}") from exc
        result.performance.computation_time = (time.perf_counter() - start_time) * 1000

        if not bypass:
            # stored entry never aliases the object handed back to the caller
            self._cache.set(key, result.model_copy(deep=True))
        self._metrics.record(False, result.performance.computation_time, len(self._cache))

        if self._config.development.log_scaling_calculations:
            logger.debug(
                "Scaled %s -> %s at '%s' (ratio=%s, token=%s, constraints=%s)",
                value, result.scaled, target_breakpoint.name, result.ratio,
                options.token, result.constraints.model_dump(),
            )

        return result

    def _compute(
        self,
        value: float,
        target_breakpoint: Breakpoint,
        options: ScaleOptions,
    ) -> ScaledValue:
        ratio = self._ratios.get(target_breakpoint)
        scaled = value * ratio
        constraints = ConstraintFlags()

        token = resolve_token(self._config.strategy, options.token) if options.token else None
        if token is not None:
            outcome = apply_pipeline(
                scaled, ratio, token, options, self._config.strategy.rounding
            )
            scaled = outcome.value
            constraints = outcome.constraints

        return ScaledValue(
            original=value,
            scaled=scaled,
            target_breakpoint=target_breakpoint,
            ratio=ratio,
            constraints=constraints,
            performance=ComputationInfo(),
        )

    def get_performance_metrics(self) -> PerformanceMetrics:
        """Snapshot of the current metrics; later requests do not mutate it."""
        return self._metrics.snapshot()

    def clear_cache(self) -> None:
        self._cache.clear()
        self._metrics.reset_memory()

    def invalidate_cache(self, pattern: str | None = None) -> None:
        """Drop cache entries whose key contains ``pattern`` (all if omitted)."""
        if not pattern:
            self.clear_cache()
            return
        removed = self._cache.invalidate(pattern)
        self._metrics.update_memory(len(self._cache))
        logger.debug("Invalidated %d cache entries matching '%s'", removed, pattern)

    def update_config(self, new_config: ResponsiveConfig) -> None:
        """Replace the configuration, rebuild ratios, and clear the cache.

        The new ratio table is built before anything is swapped, so a
        rejected configuration leaves the engine unchanged. Counters are
        kept; only the memory estimate resets.
        """
        self._config, self._ratios = self._prepare(new_config)
        self.clear_cache()
        logger.info(
            "Configuration replaced: base '%s', %d breakpoints, origin=%s",
            new_config.base.name, len(new_config.breakpoints), new_config.strategy.origin,
        )
