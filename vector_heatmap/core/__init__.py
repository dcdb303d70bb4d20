"""Core configuration, identifiers and gradient presets for vector_heatmap."""

from .config import HeatmapConfig, create
from .errors import ConfigurationError
from .gradients import (
    BLACK_BODY,
    BLUE_RED,
    DEFAULT_GRADIENT,
    HEATED_METAL,
    INCANDESCENT,
    STEPPED_COLORS,
    SUNRISE,
    VISIBLE_SPECTRUM,
)
from .identifiers import IdRole, make_id
from .registry import get_gradient, list_gradients, register_gradient

__all__ = [
    "HeatmapConfig",
    "create",
    "ConfigurationError",
    "IdRole",
    "make_id",
    "register_gradient",
    "get_gradient",
    "list_gradients",
    "BLUE_RED",
    "HEATED_METAL",
    "SUNRISE",
    "INCANDESCENT",
    "VISIBLE_SPECTRUM",
    "BLACK_BODY",
    "STEPPED_COLORS",
    "DEFAULT_GRADIENT",
]
