"""Identifier namespacing for shared SVG definitions."""

from enum import Enum
from typing import Optional

ID_PREFIX = "heatmap"


class IdRole(Enum):
    """Roles of the definitions a heatmap scene declares and references."""

    FILTER = "Filter"
    POINT = "Point"
    POINT_GRADIENT = "PointGradient"


def make_id(role: IdRole, id_suffix: Optional[str] = None) -> str:
    """
    Build the document-level identifier for a definition.

    Several heatmaps rendered into one document share the id namespace, so
    each instance must pass its own suffix.

    Args:
        role: Which definition the identifier names
        id_suffix: Optional per-instance suffix

    Returns:
        Identifier string, e.g. ``heatmapFilter`` or ``heatmapFilter_a``

    Examples:
        >>> make_id(IdRole.POINT)
        'heatmapPoint'
        >>> make_id(IdRole.POINT_GRADIENT, "left")
        'heatmapPointGradient_left'
    """
    identifier = f"{ID_PREFIX}{role.value}"
    if id_suffix is not None:
        identifier = f"{identifier}_{id_suffix}"
    return identifier


def make_ref(role: IdRole, id_suffix: Optional[str] = None) -> str:
    """Return a ``url(#...)`` reference to a definition."""
    return f"url(#{make_id(role, id_suffix)})"
