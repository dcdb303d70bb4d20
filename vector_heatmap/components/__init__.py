"""Visualization components."""

from .heatmap import DensityHeatmap

__all__ = [
    "DensityHeatmap",
]
