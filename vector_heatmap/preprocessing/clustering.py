"""Grid clustering of weighted points.

Nearby points are merged into their weighted centroid so the number of shapes
a heatmap draws is bounded by the number of occupied grid cells rather than by
the input size. The grid cell is half the render radius, so a merged point
moves at most a quarter radius along each axis.

Two entry points share the same semantics:
- cluster: plain Python over a list of Points
- cluster_frame: polars group-by over a LazyFrame/DataFrame
"""

import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, Union

import polars as pl


@dataclass(frozen=True)
class Point:
    """A weighted position.

    Attributes:
        x: Horizontal coordinate (no implied unit)
        y: Vertical coordinate
        weight: Non-negative, unnormalized importance
    """

    x: float
    y: float
    weight: float = 1.0


def cell_key(x: float, y: float, cell_size: float) -> Tuple[int, int]:
    """
    Return the integer grid cell containing (x, y).

    Examples:
        >>> cell_key(12.0, -0.5, 12.5)
        (0, -1)
    """
    return (math.floor(x / cell_size), math.floor(y / cell_size))


def merge_points(a: Point, b: Point) -> Point:
    """
    Merge two points into their weighted centroid.

    The merged weight is the sum of both weights. When both weights are zero
    the centroid falls back to the unweighted midpoint.

    Examples:
        >>> merge_points(Point(0, 0, 1), Point(10, 0, 3))
        Point(x=7.5, y=0.0, weight=4)
    """
    total = a.weight + b.weight
    if total == 0:
        return Point((a.x + b.x) / 2, (a.y + b.y) / 2, total)
    return Point(
        (a.x * a.weight + b.x * b.weight) / total,
        (a.y * a.weight + b.y * b.weight) / total,
        total,
    )


class _CellAccumulator:
    """Running weighted sums for the points folded into one cell."""

    __slots__ = ("first", "count", "sum_w", "sum_wx", "sum_wy", "sum_x", "sum_y")

    def __init__(self, point: Point):
        self.first = point
        self.count = 1
        self.sum_w = point.weight
        self.sum_wx = point.x * point.weight
        self.sum_wy = point.y * point.weight
        self.sum_x = point.x
        self.sum_y = point.y

    def add(self, point: Point) -> None:
        self.count += 1
        self.sum_w += point.weight
        self.sum_wx += point.x * point.weight
        self.sum_wy += point.y * point.weight
        self.sum_x += point.x
        self.sum_y += point.y

    def to_point(self) -> Point:
        if self.count == 1:
            return self.first
        if self.sum_w == 0:
            # All members weightless: unweighted mean keeps the result order independent
            return Point(self.sum_x / self.count, self.sum_y / self.count, self.sum_w)
        return Point(self.sum_wx / self.sum_w, self.sum_wy / self.sum_w, self.sum_w)


def cluster(points: Iterable[Point], radius: float) -> List[Point]:
    """
    Merge points sharing a grid cell of size ``radius / 2``.

    Points are folded in input order into a cell -> accumulator map. Each
    output point is the weighted centroid of its cell's members and carries
    their total weight, so total weight is conserved and the result does not
    depend on the order of points within a cell (up to float rounding).

    A cell holding a single point returns that point unchanged. A cell whose
    members all weigh zero keeps weight 0 and sits at their unweighted mean.

    Args:
        points: Input points
        radius: Render radius; the cell size is ``radius / 2``

    Returns:
        One point per occupied cell, in order of first occupation

    Raises:
        ValueError: If radius is not positive
    """
    if radius <= 0:
        raise ValueError(f"radius must be positive, got {radius}")

    cell_size = radius / 2
    cells: Dict[Tuple[int, int], _CellAccumulator] = {}

    for point in points:
        key = cell_key(point.x, point.y, cell_size)
        accumulator = cells.get(key)
        if accumulator is None:
            cells[key] = _CellAccumulator(point)
        else:
            accumulator.add(point)

    return [accumulator.to_point() for accumulator in cells.values()]


def records_to_points(
    records: Iterable[Any], map_record: Callable[[Any], Point]
) -> List[Point]:
    """Apply the record mapping function to every record."""
    return [map_record(record) for record in records]


def cluster_frame(
    data: Union[pl.LazyFrame, pl.DataFrame],
    x_column: str = "x",
    y_column: str = "y",
    weight_column: Optional[str] = None,
    radius: float = 25.0,
) -> pl.DataFrame:
    """
    Cluster tabular points with a polars group-by on grid cells.

    Same semantics as :func:`cluster`, computed lazily: each row is binned
    with integer division by the cell size and every cell aggregates to its
    weighted centroid.

    Args:
        data: Input data as Polars LazyFrame or DataFrame
        x_column: Name of x coordinate column
        y_column: Name of y coordinate column
        weight_column: Name of weight column. If None, every row weighs 1.
        radius: Render radius; the cell size is ``radius / 2``

    Returns:
        DataFrame with columns x, y, weight (one row per occupied cell)

    Raises:
        ValueError: If radius is not positive or a column is missing
    """
    if radius <= 0:
        raise ValueError(f"radius must be positive, got {radius}")

    if isinstance(data, pl.DataFrame):
        data = data.lazy()

    column_names = data.collect_schema().names()
    for column in (x_column, y_column, weight_column):
        if column is not None and column not in column_names:
            raise ValueError(
                f"Column '{column}' not found in data. "
                f"Available columns: {column_names}"
            )

    cell_size = radius / 2

    columns = [
        pl.col(x_column).cast(pl.Float64).alias("_x"),
        pl.col(y_column).cast(pl.Float64).alias("_y"),
    ]
    if weight_column is not None:
        columns.append(pl.col(weight_column).cast(pl.Float64).alias("_w"))
    binned = data.select(columns)
    if weight_column is None:
        binned = binned.with_columns(pl.lit(1.0, dtype=pl.Float64).alias("_w"))

    binned = binned.with_columns(
        [
            (pl.col("_x") / cell_size).floor().cast(pl.Int64).alias("_cell_x"),
            (pl.col("_y") / cell_size).floor().cast(pl.Int64).alias("_cell_y"),
        ]
    )

    result = (
        binned.group_by(["_cell_x", "_cell_y"], maintain_order=True)
        .agg(
            [
                (pl.col("_x") * pl.col("_w")).sum().alias("_sum_wx"),
                (pl.col("_y") * pl.col("_w")).sum().alias("_sum_wy"),
                pl.col("_w").sum().alias("weight"),
                pl.col("_x").mean().alias("_mean_x"),
                pl.col("_y").mean().alias("_mean_y"),
            ]
        )
        .select(
            [
                # Weightless cells fall back to the unweighted mean
                pl.when(pl.col("weight") != 0)
                .then(pl.col("_sum_wx") / pl.col("weight"))
                .otherwise(pl.col("_mean_x"))
                .alias("x"),
                pl.when(pl.col("weight") != 0)
                .then(pl.col("_sum_wy") / pl.col("weight"))
                .otherwise(pl.col("_mean_y"))
                .alias("y"),
                pl.col("weight"),
            ]
        )
    )

    return result.collect()


def frame_to_points(frame: pl.DataFrame) -> List[Point]:
    """Convert a clustered frame (x, y, weight columns) into Points."""
    return [
        Point(x, y, weight)
        for x, y, weight in frame.select(["x", "y", "weight"]).iter_rows()
    ]
