"""Pydantic models for breakpoints, scaling strategies, results, and API payloads."""

from __future__ import annotations

from typing import Any, Callable, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.json_schema import SkipJsonSchema


class Breakpoint(BaseModel):
    """A named viewport descriptor."""

    model_config = ConfigDict(frozen=True)

    name: str
    width: float = Field(gt=0)
    height: float = Field(gt=0)
    alias: str | None = None
    custom: dict[str, Any] = {}


class ConstantScale(BaseModel):
    """Fixed multiplier applied regardless of the breakpoint ratio."""

    kind: Literal["constant"] = "constant"
    value: float

    def factor(self, ratio: float) -> float:
        return self.value


class RatioFunctionScale(BaseModel):
    """Multiplier derived from the breakpoint ratio.

    ``fn`` must be a pure function of the ratio: results are memoized, so any
    hidden state it reads would leak stale values out of the cache.
    """

    kind: Literal["ratio_function"] = "ratio_function"
    fn: Callable[[float], float] = Field(exclude=True)

    def factor(self, ratio: float) -> float:
        return float(self.fn(ratio))


class ScalingToken(BaseModel):
    """Scaling rule for one class of design value (fontSize, spacing, ...)."""

    scale: ConstantScale | SkipJsonSchema[RatioFunctionScale]
    min: float | None = None
    max: float | None = None
    step: float | None = Field(default=None, gt=0)
    curve: str | None = None
    unit: str | None = None
    precision: int | None = Field(default=None, ge=0)
    responsive: bool = True

    @field_validator("scale", mode="before")
    @classmethod
    def coerce_scale(cls, v: Any) -> Any:
        """Accept a bare number or callable in place of the tagged form."""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return ConstantScale(value=v)
        if callable(v):
            return RatioFunctionScale(fn=v)
        return v


class RoundingRule(BaseModel):
    """Direction and default decimal digits of the final rounding step."""

    mode: Literal["nearest", "up", "down", "custom"] = "nearest"
    precision: int = Field(default=1, ge=0)


class AccessibilityRules(BaseModel):
    min_font_size: float = 12
    min_tap_target: float = 44
    contrast_preservation: bool = True


class PerformanceOptions(BaseModel):
    memoization: bool = True
    cache_strategy: Literal["memory", "localStorage", "sessionStorage"] = "memory"
    precompute_values: bool = True


class ScalingStrategy(BaseModel):
    """How ratios are derived and how each token scales.

    ``origin`` and ``mode`` are left as plain strings; unknown values are
    rejected by the engine with ``InvalidConfigError``.
    """

    origin: str = "width"
    mode: str = "linear"
    tokens: dict[str, ScalingToken] = {}
    rounding: RoundingRule = RoundingRule()
    accessibility: AccessibilityRules = AccessibilityRules()
    performance: PerformanceOptions = PerformanceOptions()


class DevelopmentOptions(BaseModel):
    enable_debug_mode: bool = False
    show_scaling_info: bool = False
    log_scaling_calculations: bool = False


class ResponsiveConfig(BaseModel):
    """Complete configuration: base breakpoint, all breakpoints, and strategy."""

    base: Breakpoint
    breakpoints: list[Breakpoint]
    strategy: ScalingStrategy = ScalingStrategy()
    development: DevelopmentOptions = DevelopmentOptions()


class ScaleOptions(BaseModel):
    """Per-request overrides for a scale operation."""

    token: str | None = None
    scale: float | None = None
    min: float | None = None
    max: float | None = None
    step: float | None = Field(default=None, gt=0)
    unit: str | None = None
    bypass_cache: bool = False


class ConstraintFlags(BaseModel):
    """Which constraints are binding on the final value.

    Detected by exact equality with the bound, so a value that lands on a
    bound without being clamped is reported as clamped too.
    """

    min_applied: bool = False
    max_applied: bool = False
    step_applied: bool = False


class ComputationInfo(BaseModel):
    computation_time: float = 0.0
    cache_hit: bool = False


class ScaledValue(BaseModel):
    """Result of scaling one value to one breakpoint."""

    original: float
    scaled: float
    target_breakpoint: Breakpoint
    ratio: float
    constraints: ConstraintFlags = ConstraintFlags()
    performance: ComputationInfo = ComputationInfo()


class PerformanceMetrics(BaseModel):
    """Running engine metrics. Times in milliseconds, memory in estimated bytes."""

    total_operations: int = 0
    cache_hit_rate: float = 0.0
    average_computation_time: float = 0.0
    memory_usage: int = 0
    peak_memory_usage: int = 0


class ScaleRequest(BaseModel):
    """Body of POST /scale. ``breakpoint`` is a breakpoint name or alias."""

    value: float
    breakpoint: str
    options: ScaleOptions = ScaleOptions()


class PresetInfo(BaseModel):
    """Preset metadata for API response."""

    name: str
    description: str


class ConfigIssues(BaseModel):
    """Result of validating a configuration."""

    valid: bool
    issues: list[str] = []


class ErrorResponse(BaseModel):
    """Error response body."""

    error_type: str
    code: str
    message: str
    detail: Any = None
