"""Breakpoint-aware scaling of design values."""

import logging

from responsive_scaler.engine import ScalingEngine
from responsive_scaler.presets import create_default_config

__all__ = ["ScalingEngine", "create_default_config"]

logger = logging.getLogger(__name__)
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
