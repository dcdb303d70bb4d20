"""Scene building and Streamlit rendering."""

from .bridge import clear_markup_cache, to_svg_document
from .filters import build_filter
from .scene import compose, render
from .tree import SceneNode, collect_ids, element

__all__ = [
    "SceneNode",
    "element",
    "collect_ids",
    "build_filter",
    "compose",
    "render",
    "to_svg_document",
    "clear_markup_cache",
]
