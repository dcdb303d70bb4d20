"""Scene composition: shared stamp definitions plus one reference per point."""

from typing import Any, Iterable, List

from ..core.config import HeatmapConfig
from ..core.identifiers import IdRole, make_id, make_ref
from ..preprocessing.clustering import Point, cluster, records_to_points
from .filters import build_filter
from .tree import SceneNode, element


def _point_gradient(config: HeatmapConfig) -> SceneNode:
    """Black radial gradient, opaque at the center and transparent at the edge."""
    return element(
        "radialGradient",
        {"id": make_id(IdRole.POINT_GRADIENT, config.id_suffix)},
        [
            element(
                "stop",
                {"offset": 0, "stop-color": "black", "stop-opacity": 1},
            ),
            element(
                "stop",
                {"offset": 1, "stop-color": "black", "stop-opacity": 0},
            ),
        ],
    )


def _stamp(config: HeatmapConfig) -> SceneNode:
    return element(
        "circle",
        {
            "id": make_id(IdRole.POINT, config.id_suffix),
            "cx": 0,
            "cy": 0,
            "r": config.radius,
            "fill": make_ref(IdRole.POINT_GRADIENT, config.id_suffix),
        },
    )


def _instance(point: Point, href: str, max_weight: float) -> SceneNode:
    # Opacity above 1 is left for the renderer to clamp
    return element(
        "use",
        {
            "href": href,
            "x": point.x,
            "y": point.y,
            "fill-opacity": point.weight / max_weight,
        },
    )


def compose(config: HeatmapConfig, clustered_points: Iterable[Point]) -> SceneNode:
    """
    Assemble the heatmap scene for already clustered points.

    The scene is a group holding a ``defs`` block (radial gradient, stamp
    circle, filter) followed by a filtered group with one ``use`` reference
    to the stamp per point. Every point costs one reference, not a shape.

    Identifiers carry ``config.id_suffix``. Heatmaps sharing a document must
    use distinct suffixes; equal suffixes alias their definitions silently.

    Args:
        config: Render configuration
        clustered_points: Points to place, typically the output of ``cluster``

    Returns:
        Root ``g`` SceneNode; the caller embeds it in an ``svg`` container
    """
    href = "#" + make_id(IdRole.POINT, config.id_suffix)
    instances: List[SceneNode] = [
        _instance(point, href, config.max_weight) for point in clustered_points
    ]

    defs = element(
        "defs",
        children=[
            _point_gradient(config),
            _stamp(config),
            build_filter(
                config.blur,
                config.gradient,
                make_id(IdRole.FILTER, config.id_suffix),
            ),
        ],
    )
    points_group = element(
        "g",
        {"filter": make_ref(IdRole.FILTER, config.id_suffix)},
        instances,
    )
    return element("g", children=[defs, points_group])


def render(config: HeatmapConfig, records: Iterable[Any]) -> SceneNode:
    """
    Map records to points, cluster them and compose the scene.

    Args:
        config: Render configuration (holds the record mapping function)
        records: Input records of the shape ``config.map_record`` expects

    Returns:
        Root ``g`` SceneNode
    """
    points = records_to_points(records, config.map_record)
    return compose(config, cluster(points, config.radius))
