"""Bridge between heatmap scenes and the Streamlit page.

The core builds a ``g`` node and never decides the viewport. This module wraps
scenes in an ``svg`` root and displays the markup, keeping one cached markup
string per component key in session state so unchanged reruns skip
serialization.
"""

from typing import Callable, Dict, Optional, Sequence, Tuple

import streamlit as st
import streamlit.components.v1 as components

from .tree import SceneNode, element, format_value

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

# Session state key for per-component markup cache
# Each component key stores exactly one (content_hash, markup) entry
_MARKUP_CACHE_KEY = "_vh_markup_cache"


def to_svg_document(
    scene: SceneNode,
    width: float,
    height: float,
    view_box: Optional[Sequence[float]] = None,
) -> SceneNode:
    """
    Wrap a scene in an ``svg`` root establishing its coordinate system.

    Args:
        scene: Scene returned by ``compose`` / ``render``
        width: Rendered width in CSS pixels
        height: Rendered height in CSS pixels
        view_box: (min_x, min_y, width, height) in data coordinates.
            Defaults to (0, 0, width, height).

    Returns:
        ``svg`` SceneNode containing the scene
    """
    if view_box is None:
        view_box = (0, 0, width, height)
    if len(view_box) != 4:
        raise ValueError(f"view_box must have 4 values, got {len(view_box)}")

    return element(
        "svg",
        {
            "xmlns": SVG_NAMESPACE,
            "width": width,
            "height": height,
            "viewBox": format_value(list(view_box)),
        },
        [scene],
    )


def _get_markup_cache() -> Dict[str, Tuple[str, str]]:
    """Get per-component markup cache from session state."""
    if _MARKUP_CACHE_KEY not in st.session_state:
        st.session_state[_MARKUP_CACHE_KEY] = {}
    return st.session_state[_MARKUP_CACHE_KEY]


def clear_markup_cache() -> None:
    """
    Clear all cached heatmap markup.

    Call this when loading a new file to force every heatmap to re-render.
    """
    if _MARKUP_CACHE_KEY in st.session_state:
        st.session_state[_MARKUP_CACHE_KEY].clear()


def get_cached_markup(key: str, content_hash: str) -> Optional[str]:
    """Return cached markup for ``key`` if it was built from ``content_hash``."""
    cached = _get_markup_cache().get(key)
    if cached is not None and cached[0] == content_hash:
        return cached[1]
    return None


def render_heatmap_html(
    build_document: Callable[[], SceneNode],
    content_hash: str,
    key: str,
    height: int,
) -> str:
    """
    Display a heatmap document in Streamlit.

    Args:
        build_document: Callable returning the ``svg`` SceneNode; only called
            on a cache miss
        content_hash: Hash of everything the document depends on
        key: Unique key for this heatmap on the page
        height: Height in pixels of the embedding frame

    Returns:
        The displayed SVG markup
    """
    markup = get_cached_markup(key, content_hash)
    if markup is None:
        markup = build_document().to_svg()
        _get_markup_cache()[key] = (content_hash, markup)

    components.html(markup, height=height)
    return markup
