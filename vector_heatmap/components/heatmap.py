"""Density heatmap component rendered as SVG filters."""

import re
import sys
from typing import Any, Dict, Optional, Sequence, Union

import polars as pl

from ..core.config import GradientStop, HeatmapConfig, create
from ..core.gradients import DEFAULT_GRADIENT
from ..core.registry import get_gradient
from ..preprocessing.clustering import Point, cluster_frame, records_to_points
from ..preprocessing.hashing import compute_config_hash, compute_dataframe_hash
from ..rendering.scene import compose
from ..rendering.tree import SceneNode

GradientSpec = Union[str, Sequence[GradientStop]]

# Characters that would break a url(#...) reference
_UNSAFE_ID_CHARS = re.compile(r"[^A-Za-z0-9_-]")


def _row_to_point(row: Dict[str, Any]) -> Point:
    """Map one clustered row (x, y, weight) to a Point."""
    return Point(row["x"], row["y"], row["weight"])


def _resolve_gradient(gradient: Optional[GradientSpec]) -> Sequence[GradientStop]:
    if gradient is None:
        return DEFAULT_GRADIENT
    if isinstance(gradient, str):
        return get_gradient(gradient)
    return gradient


def _suffix_from_key(key: str) -> str:
    """Turn a Streamlit key into an id suffix that is valid inside url(#...)."""
    return _UNSAFE_ID_CHARS.sub("_", key)


class DensityHeatmap:
    """
    Smooth density heatmap over tabular point data.

    Points are clustered on a grid of half the stamp radius, each cluster is
    drawn as a reference to one shared blurred stamp, and an SVG filter maps
    the accumulated darkness to the gradient colors. The browser does all
    pixel work; Python only sends one ``<use>`` element per occupied cell.

    Example:
        heatmap = DensityHeatmap(
            data=pl.scan_parquet("pickups.parquet"),
            x_column="px",
            y_column="py",
            weight_column="fare",
            gradient="Heated Metal",
            radius=30,
            max_weight="auto",
            width=900,
            height=600,
        )
        heatmap(key="pickups")
    """

    _component_type: str = "density_heatmap"

    def __init__(
        self,
        data: Union[pl.LazyFrame, pl.DataFrame],
        x_column: str,
        y_column: str,
        weight_column: Optional[str] = None,
        gradient: Optional[GradientSpec] = None,
        radius: float = 25.0,
        blur: float = 15.0,
        max_weight: Union[float, str, None] = None,
        width: int = 800,
        height: int = 600,
        view_box: Optional[Sequence[float]] = None,
        id_suffix: Optional[str] = None,
    ):
        """
        Initialize the DensityHeatmap component.

        Args:
            data: Polars LazyFrame or DataFrame with point data
            x_column: Name of column for x coordinates (in view_box units)
            y_column: Name of column for y coordinates
            weight_column: Name of column for point weights. If None, every
                row weighs 1.
            gradient: Registered gradient name (e.g., 'Sunrise') or a list of
                (stop, color) pairs. Defaults to 'Blue Red'.
            radius: Stamp radius; also sets the clustering cell (radius / 2)
            blur: Gaussian blur standard deviation
            max_weight: Weight rendered at full opacity. None means 1;
                'auto' uses the heaviest cluster.
            width: Rendered width in pixels
            height: Rendered height in pixels
            view_box: (min_x, min_y, width, height) in data coordinates.
                Defaults to (0, 0, width, height).
            id_suffix: Suffix for definition ids. Defaults to the render key,
                so several heatmaps on one page do not share filters.
        """
        if isinstance(data, pl.DataFrame):
            data = data.lazy()

        if isinstance(max_weight, str) and max_weight != "auto":
            raise ValueError(
                f"max_weight must be a number, None or 'auto', got '{max_weight}'"
            )

        self._data = data
        self._x_column = x_column
        self._y_column = y_column
        self._weight_column = weight_column
        self._gradient_name = gradient if isinstance(gradient, str) else None
        self._gradient = tuple(_resolve_gradient(gradient))
        self._radius = radius
        self._blur = blur
        self._max_weight = max_weight
        self._width = width
        self._height = height
        self._view_box = tuple(view_box) if view_box is not None else None
        self._id_suffix = id_suffix
        self._clustered: Optional[pl.DataFrame] = None

        self._validate_mappings()
        # Fail early on invalid radius/blur/max_weight
        numeric_max_weight = 1.0 if max_weight in (None, "auto") else max_weight
        self._build_config(self._id_suffix, numeric_max_weight)

    def _validate_mappings(self) -> None:
        """Validate that coordinate and weight columns exist in the data schema."""
        column_names = self._data.collect_schema().names()
        for role, column in (
            ("x_column", self._x_column),
            ("y_column", self._y_column),
            ("weight_column", self._weight_column),
        ):
            if column is not None and column not in column_names:
                raise ValueError(
                    f"Column '{column}' for {role} not found in data. "
                    f"Available columns: {column_names}"
                )

    def _get_config(self) -> Dict[str, Any]:
        """Return the configuration that affects rendered output."""
        return {
            "x_column": self._x_column,
            "y_column": self._y_column,
            "weight_column": self._weight_column,
            "gradient": [[stop, color] for stop, color in self._gradient],
            "radius": self._radius,
            "blur": self._blur,
            "max_weight": self._max_weight,
            "width": self._width,
            "height": self._height,
            "view_box": self._view_box,
        }

    def get_clustered_data(self) -> pl.DataFrame:
        """
        Return the clustered points (x, y, weight), computing them once.

        Returns:
            DataFrame with one row per occupied grid cell
        """
        if self._clustered is None:
            total = self._data.select(pl.len()).collect().item()
            self._clustered = cluster_frame(
                self._data,
                x_column=self._x_column,
                y_column=self._y_column,
                weight_column=self._weight_column,
                radius=self._radius,
            )
            print(
                f"[DENSITY_HEATMAP] Clustered {total:,} pts -> "
                f"{len(self._clustered):,} cells (radius {self._radius})",
                file=sys.stderr,
            )
        return self._clustered

    def _resolve_max_weight(self) -> float:
        if self._max_weight is None:
            return 1.0
        if self._max_weight == "auto":
            clustered = self.get_clustered_data()
            heaviest = clustered["weight"].max() if len(clustered) > 0 else None
            if heaviest is None or heaviest <= 0:
                return 1.0
            return float(heaviest)
        return float(self._max_weight)

    def _build_config(
        self, id_suffix: Optional[str], max_weight: float
    ) -> HeatmapConfig:
        config = (
            create(_row_to_point, self._gradient)
            .with_radius(self._radius)
            .with_blur(self._blur)
            .with_max_weight(max_weight)
        )
        if id_suffix is not None:
            config = config.with_id_suffix(id_suffix)
        return config

    def render_scene(self, id_suffix: Optional[str] = None) -> SceneNode:
        """
        Build the heatmap scene without touching Streamlit.

        Args:
            id_suffix: Overrides the suffix given at construction

        Returns:
            Root ``g`` SceneNode
        """
        suffix = id_suffix if id_suffix is not None else self._id_suffix
        config = self._build_config(suffix, self._resolve_max_weight())
        rows = self.get_clustered_data().iter_rows(named=True)
        return compose(config, records_to_points(rows, config.map_record))

    def to_svg(self, id_suffix: Optional[str] = None) -> str:
        """Return the standalone SVG document markup."""
        from ..rendering.bridge import to_svg_document

        return to_svg_document(
            self.render_scene(id_suffix), self._width, self._height, self._view_box
        ).to_svg()

    def __call__(
        self,
        key: Optional[str] = None,
        height: Optional[int] = None,
    ) -> str:
        """
        Render the component in Streamlit.

        Args:
            key: Unique key for this heatmap on the page. Also used as the
                id suffix when none was given at construction, with
                characters outside [A-Za-z0-9_-] replaced by underscores.
            height: Optional frame height in pixels (defaults to the
                heatmap height)

        Returns:
            The displayed SVG markup
        """
        from ..rendering.bridge import render_heatmap_html, to_svg_document

        suffix = self._id_suffix
        if suffix is None and key is not None:
            suffix = _suffix_from_key(key)
        # Stable across reruns, unlike id(self)
        cache_key = key or (
            f"{self._component_type}_{compute_config_hash(self._get_config())[:16]}"
        )
        content_hash = compute_config_hash(
            {
                **self._get_config(),
                "id_suffix": suffix,
                "data": compute_dataframe_hash(self.get_clustered_data()),
            }
        )

        return render_heatmap_html(
            lambda: to_svg_document(
                self.render_scene(suffix), self._width, self._height, self._view_box
            ),
            content_hash=content_hash,
            key=cache_key,
            height=height if height is not None else self._height,
        )

    def __repr__(self) -> str:
        gradient = self._gradient_name or f"{len(self._gradient)} stops"
        return (
            f"DensityHeatmap("
            f"x_column='{self._x_column}', "
            f"y_column='{self._y_column}', "
            f"weight_column={self._weight_column!r}, "
            f"gradient={gradient!r}, "
            f"radius={self._radius})"
        )
