"""Pytest configuration and shared fixtures for vector-heatmap tests."""

import random
from unittest.mock import patch

import polars as pl
import pytest

from vector_heatmap import BLUE_RED, Point, create


class MockSessionState(dict):
    """Mock Streamlit session_state that behaves like a dict."""
    pass


@pytest.fixture
def mock_streamlit():
    """
    Mock Streamlit's session_state and html embedding for component tests.

    Yields the session state dict; the patched ``components.html`` is
    available as ``mock_streamlit.html``.
    """
    mock_session_state = MockSessionState()

    with patch("streamlit.session_state", mock_session_state), patch(
        "streamlit.components.v1.html"
    ) as mock_html:
        mock_session_state.html = mock_html
        yield mock_session_state


@pytest.fixture
def point_config():
    """Config whose records are already Points."""
    return create(lambda point: point, BLUE_RED)


@pytest.fixture
def dict_config():
    """Config mapping dict records with lon/lat/count keys."""
    return create(
        lambda record: Point(record["lon"], record["lat"], record["count"]),
        BLUE_RED,
    )


@pytest.fixture
def scattered_points():
    """Random points over a 500x300 area."""
    rng = random.Random(42)
    return [
        Point(rng.uniform(0, 500), rng.uniform(0, 300), rng.uniform(0.1, 5.0))
        for _ in range(500)
    ]


@pytest.fixture
def sample_heatmap_data() -> pl.LazyFrame:
    """Create sample data for DensityHeatmap component."""
    rng = random.Random(7)
    n_points = 1000
    return pl.LazyFrame({
        "px": [rng.uniform(0, 800) for _ in range(n_points)],
        "py": [rng.uniform(0, 600) for _ in range(n_points)],
        "fare": [rng.uniform(1, 40) for _ in range(n_points)],
        "zone": [rng.randint(1, 5) for _ in range(n_points)],
    })
