"""Immutable heatmap configuration and its builder functions."""

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Callable, Optional, Sequence, Tuple, Union

from .errors import ConfigurationError

if TYPE_CHECKING:
    from ..preprocessing.clustering import Point

Color = Union[Tuple[int, int, int], str]
GradientStop = Tuple[float, Color]
Gradient = Tuple[GradientStop, ...]

DEFAULT_MAX_WEIGHT = 1.0
DEFAULT_RADIUS = 25.0
DEFAULT_BLUR = 15.0


@dataclass(frozen=True)
class HeatmapConfig:
    """
    Render configuration for one heatmap.

    The configuration holds a reference to the record mapping function, so it
    is tied to one record shape. Build it where you render instead of keeping
    it in long-lived application state. Instances are frozen; use
    :func:`create` and the ``with_*`` methods to derive new values.

    Attributes:
        map_record: Function turning one input record into a Point
        gradient: Ordered (stop, color) pairs, stops in [0, 1]
        max_weight: Weight that renders at full opacity
        radius: Stamp radius; also sets the clustering cell size (radius / 2)
        blur: Gaussian blur standard deviation
        id_suffix: Suffix keeping definition ids unique per heatmap instance
    """

    map_record: Callable[[Any], "Point"] = field(compare=False)
    gradient: Gradient
    max_weight: float = DEFAULT_MAX_WEIGHT
    radius: float = DEFAULT_RADIUS
    blur: float = DEFAULT_BLUR
    id_suffix: Optional[str] = None

    def __post_init__(self) -> None:
        _validate(self.max_weight, self.radius, self.blur)

    def with_max_weight(self, max_weight: float) -> "HeatmapConfig":
        """Return a copy with a different full-opacity weight."""
        return replace(self, max_weight=float(max_weight))

    def with_radius(self, radius: float) -> "HeatmapConfig":
        """Return a copy with a different stamp radius."""
        return replace(self, radius=float(radius))

    def with_blur(self, blur: float) -> "HeatmapConfig":
        """Return a copy with a different blur standard deviation."""
        return replace(self, blur=float(blur))

    def with_id_suffix(self, id_suffix: str) -> "HeatmapConfig":
        """Return a copy whose definition ids carry ``id_suffix``."""
        return replace(self, id_suffix=id_suffix)


def _validate(max_weight: float, radius: float, blur: float) -> None:
    if radius <= 0:
        raise ConfigurationError(f"radius must be positive, got {radius}")
    if max_weight <= 0:
        raise ConfigurationError(f"max_weight must be positive, got {max_weight}")
    if blur < 0:
        raise ConfigurationError(f"blur must be non-negative, got {blur}")


def create(
    map_record: Callable[[Any], "Point"],
    gradient: Sequence[GradientStop],
) -> HeatmapConfig:
    """
    Create a configuration with default weight, radius and blur.

    Args:
        map_record: Function turning one input record into a Point
        gradient: Ordered (stop, color) pairs. Colors are (r, g, b) tuples
            with 0-255 channels or hex strings.

    Returns:
        HeatmapConfig with max_weight=1, radius=25, blur=15 and no id suffix

    Example:
        config = (
            create(lambda row: Point(row["lon"], row["lat"], row["n"]), BLUE_RED)
            .with_radius(30)
            .with_id_suffix("sales")
        )
    """
    return HeatmapConfig(
        map_record=map_record,
        gradient=tuple((float(stop), color) for stop, color in gradient),
    )
