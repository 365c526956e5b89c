"""Shared pytest fixtures for scaling engine tests."""

import pytest

from responsive_scaler.engine import ScalingEngine
from responsive_scaler.presets import create_default_config
from responsive_scaler.settings import Settings


@pytest.fixture
def settings():
    """Default settings instance."""
    return Settings()


@pytest.fixture
def config():
    """Default desktop-first configuration (1920x1080 base, width origin)."""
    return create_default_config()


@pytest.fixture
def engine(config):
    return ScalingEngine(config)


@pytest.fixture
def breakpoints(config):
    """Breakpoints of the default configuration keyed by name."""
    return {bp.name: bp for bp in config.breakpoints}
