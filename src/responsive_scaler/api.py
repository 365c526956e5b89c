"""FastAPI application exposing the scaling engine."""

import logging

from fastapi import Depends, FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from responsive_scaler.config import (
    ConfigIssues,
    ErrorResponse,
    ResponsiveConfig,
    ScaledValue,
    ScaleRequest,
)
from responsive_scaler.engine import ScalingEngine
from responsive_scaler.errors import (
    InvalidBreakpointError,
    InvalidConfigError,
    ScalingError,
)
from responsive_scaler.presets import apply_preset, create_default_config, list_presets
from responsive_scaler.settings import Settings
from responsive_scaler.validation import validate_config

logger = logging.getLogger(__name__)

# Create app
app = FastAPI(title="Responsive Scaler", version="0.1.0")

# Settings
settings = Settings()
logging.getLogger("responsive_scaler").setLevel(settings.log_level.upper())

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error_body(exc: ScalingError) -> dict:
    return ErrorResponse(
        error_type=type(exc).__name__,
        code=exc.code,
        message=str(exc),
        detail=exc.details,
    ).model_dump()


# Error handlers
@app.exception_handler(InvalidConfigError)
async def invalid_config_handler(request: Request, exc: InvalidConfigError):
    return JSONResponse(status_code=400, content=_error_body(exc))


@app.exception_handler(InvalidBreakpointError)
async def invalid_breakpoint_handler(request: Request, exc: InvalidBreakpointError):
    return JSONResponse(status_code=404, content=_error_body(exc))


@app.exception_handler(ScalingError)
async def general_error_handler(request: Request, exc: ScalingError):
    logger.exception("Scaling engine error")
    return JSONResponse(status_code=500, content=_error_body(exc))


def _initial_config() -> ResponsiveConfig:
    config = create_default_config()
    if settings.preset:
        config = apply_preset(settings.preset, config)
    return config


_engine: ScalingEngine | None = None


# Dependency injection
def get_engine() -> ScalingEngine:
    """Provide the process-wide ScalingEngine. Overridable in tests."""
    global _engine
    if _engine is None:
        _engine = ScalingEngine(_initial_config())
    return _engine


# API routes (sync def, the engine is not async-aware)
@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}


@app.get("/config")
def get_config(engine: ScalingEngine = Depends(get_engine)):
    """Current configuration and its precomputed ratios."""
    return {
        "config": engine.config.model_dump(mode="json"),
        "ratios": engine.ratios,
    }


@app.get("/presets")
def get_presets():
    """List all configuration presets."""
    return {"presets": [p.model_dump() for p in list_presets()]}


@app.post("/scale", response_model=ScaledValue)
def scale(request: ScaleRequest, engine: ScalingEngine = Depends(get_engine)):
    """Scale a value to a breakpoint given by name or alias."""
    breakpoint = engine.find_breakpoint(request.breakpoint)
    return engine.scale_value(request.value, breakpoint, request.options)


@app.get("/metrics")
def metrics(engine: ScalingEngine = Depends(get_engine)):
    """Snapshot of the engine's performance metrics."""
    return engine.get_performance_metrics().model_dump()


@app.post("/cache/clear")
def clear_cache(engine: ScalingEngine = Depends(get_engine)):
    engine.clear_cache()
    return {"status": "cleared"}


@app.post("/cache/invalidate")
def invalidate_cache(
    pattern: str | None = Query(default=None, description="Substring of cache keys to drop"),
    engine: ScalingEngine = Depends(get_engine),
):
    engine.invalidate_cache(pattern)
    return {"status": "invalidated", "pattern": pattern}


@app.post("/config/validate", response_model=ConfigIssues)
def check(config: ResponsiveConfig):
    """Validate a configuration without applying it."""
    issues = validate_config(config)
    return ConfigIssues(valid=not issues, issues=issues)


@app.post("/config/preset/{name}")
def use_preset(name: str, engine: ScalingEngine = Depends(get_engine)):
    """Replace the engine configuration with a preset of the default config."""
    engine.update_config(apply_preset(name, create_default_config()))
    return {"status": "ok", "preset": name, "ratios": engine.ratios}
