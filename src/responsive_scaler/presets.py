"""Default configuration, builders, and named configuration presets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from pydantic import BaseModel

from responsive_scaler.config import (
    Breakpoint,
    PresetInfo,
    ResponsiveConfig,
    ScalingStrategy,
    ScalingToken,
)
from responsive_scaler.errors import InvalidConfigError


def default_tokens() -> dict[str, ScalingToken]:
    """Token rules for the common design values."""
    return {
        "fontSize": ScalingToken(scale=0.85, min=12, max=48, unit="px", precision=1),
        "spacing": ScalingToken(scale=0.9, step=2, unit="px", precision=1),
        "radius": ScalingToken(scale=0.95, min=2, unit="px", precision=1),
        "lineHeight": ScalingToken(scale=0.9, min=1.2, unit="em", precision=1),
        "shadow": ScalingToken(scale=0.8, unit="px", precision=1),
        "border": ScalingToken(scale=0.9, min=1, unit="px", precision=1),
    }


def create_breakpoint(
    name: str,
    width: float,
    height: float,
    alias: str | None = None,
) -> Breakpoint:
    return Breakpoint(name=name, width=width, height=height, alias=alias, custom={})


def create_scaling_strategy(**overrides: Any) -> ScalingStrategy:
    """Default strategy with ``overrides`` merged in.

    ``tokens``, ``rounding``, ``accessibility`` and ``performance`` are
    merged one level deep, so overriding one token keeps the others.
    """
    defaults = ScalingStrategy(tokens=default_tokens()).model_dump(exclude={"tokens"})
    tokens: dict[str, Any] = dict(default_tokens())
    tokens.update(overrides.pop("tokens", None) or {})

    for section in ("rounding", "accessibility", "performance"):
        if section in overrides:
            value = overrides.pop(section)
            if isinstance(value, BaseModel):
                value = value.model_dump(exclude_unset=True)
            defaults[section] = {**defaults[section], **value}
    defaults.update(overrides)

    return ScalingStrategy(tokens=tokens, **defaults)


def create_default_config() -> ResponsiveConfig:
    """Desktop-first configuration: 1920x1080 base scaled down by width."""
    desktop = create_breakpoint("desktop", 1920, 1080, alias="base")
    return ResponsiveConfig(
        base=desktop,
        breakpoints=[
            create_breakpoint("mobile", 390, 844, alias="mobile"),
            create_breakpoint("tablet", 768, 1024, alias="tablet"),
            create_breakpoint("laptop", 1366, 768, alias="laptop"),
            desktop,
        ],
        strategy=create_scaling_strategy(),
    )


@dataclass
class ConfigPreset:
    """Named transformation of an existing configuration."""

    name: str
    description: str
    apply: Callable[[ResponsiveConfig], ResponsiveConfig]

    def to_preset_info(self) -> PresetInfo:
        return PresetInfo(name=self.name, description=self.description)


# Preset registry
CONFIG_PRESETS: dict[str, ConfigPreset] = {}


def _register(name: str, description: str):
    def decorator(fn: Callable[[ResponsiveConfig], ResponsiveConfig]):
        CONFIG_PRESETS[name] = ConfigPreset(name=name, description=description, apply=fn)
        return fn
    return decorator


def _with_token_scales(config: ResponsiveConfig, scales: dict[str, float]) -> ResponsiveConfig:
    result = config.model_copy(deep=True)
    for name, scale in scales.items():
        token = result.strategy.tokens.get(name)
        if token is not None:
            result.strategy.tokens[name] = ScalingToken.model_validate(
                {**token.model_dump(exclude={"scale"}), "scale": scale}
            )
    return result


@_register("conservative", "Minimal change between breakpoints")
def conservative(config: ResponsiveConfig) -> ResponsiveConfig:
    return _with_token_scales(config, {"fontSize": 0.95, "spacing": 0.95, "radius": 0.98})


@_register("aggressive", "Dramatic change between breakpoints")
def aggressive(config: ResponsiveConfig) -> ResponsiveConfig:
    return _with_token_scales(config, {"fontSize": 0.7, "spacing": 0.75, "radius": 0.8})


@_register("mobile-first", "Design for the mobile breakpoint and scale up")
def mobile_first(config: ResponsiveConfig) -> ResponsiveConfig:
    """Rebase on the breakpoint aliased 'mobile', with larger font sizes.

    Configurations without both a 'mobile' and a 'base' alias are returned
    unchanged (as a copy).
    """
    result = config.model_copy(deep=True)
    mobile = next((bp for bp in result.breakpoints if bp.alias == "mobile"), None)
    desktop = next((bp for bp in result.breakpoints if bp.alias == "base"), None)
    if mobile is None or desktop is None:
        return result

    result.base = mobile
    result.strategy.origin = "width"
    font = result.strategy.tokens.get("fontSize")
    if font is not None:
        result.strategy.tokens["fontSize"] = ScalingToken.model_validate(
            {**font.model_dump(exclude={"scale"}), "scale": 1.2, "min": 14}
        )
    return result


def get_preset(name: str) -> ConfigPreset:
    if name not in CONFIG_PRESETS:
        raise InvalidConfigError(
            f"Unknown preset '{name}'. Available: {sorted(CONFIG_PRESETS.keys())}"
        )
    return CONFIG_PRESETS[name]


def apply_preset(name: str, config: ResponsiveConfig) -> ResponsiveConfig:
    """Return a new configuration with the named preset applied."""
    return get_preset(name).apply(config)


def list_presets() -> list[PresetInfo]:
    return [preset.to_preset_info() for preset in CONFIG_PRESETS.values()]
