"""
Vector Heatmap - Density heatmaps drawn with SVG filters.

This package clusters weighted points on a grid, draws each cluster as a
reference to one shared blurred stamp, and colorizes the result through a
declarative SVG filter pipeline. No pixels are computed in Python.
"""

from .components.heatmap import DensityHeatmap
from .core.config import HeatmapConfig, create
from .core.errors import ConfigurationError
from .core.gradients import (
    BLACK_BODY,
    BLUE_RED,
    HEATED_METAL,
    INCANDESCENT,
    STEPPED_COLORS,
    SUNRISE,
    VISIBLE_SPECTRUM,
)
from .core.identifiers import IdRole
from .core.registry import get_gradient, list_gradients, register_gradient
from .preprocessing.clustering import Point, cluster, cluster_frame
from .rendering.bridge import clear_markup_cache, to_svg_document
from .rendering.filters import build_filter
from .rendering.scene import compose, render
from .rendering.tree import SceneNode

__version__ = "0.1.0"

__all__ = [
    # Core
    "HeatmapConfig",
    "create",
    "ConfigurationError",
    "IdRole",
    "Point",
    "cluster",
    "cluster_frame",
    "build_filter",
    "compose",
    "render",
    "SceneNode",
    # Gradients
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
    # Components
    "DensityHeatmap",
    # Utilities
    "to_svg_document",
    "clear_markup_cache",
]
