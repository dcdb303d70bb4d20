"""Preprocessing utilities: point clustering and gradient sampling."""

from .clustering import (
    Point,
    cell_key,
    cluster,
    cluster_frame,
    frame_to_points,
    merge_points,
    records_to_points,
)
from .palette import PALETTE_SIZE, channel_table, parse_color, sample_gradient

__all__ = [
    "Point",
    "cell_key",
    "merge_points",
    "cluster",
    "cluster_frame",
    "frame_to_points",
    "records_to_points",
    "PALETTE_SIZE",
    "parse_color",
    "sample_gradient",
    "channel_table",
]
