"""Filter pipeline that colorizes blurred greyscale stamps.

The stamps are drawn black on transparent. The pipeline blurs them, multiplies
them over a faint white flood so the result is a continuous grey field, then
remaps each channel through lookup tables built from the gradient palette:

    SourceGraphic -> feGaussianBlur ("blurred")
    feFlood white @ 0.1 ("flooded")
    feBlend multiply(flooded, blurred) ("toTransfer")
    feComponentTransfer(toTransfer) with table funcs for R, G, B, A
"""

from typing import List, Sequence

from ..core.config import GradientStop
from ..preprocessing.palette import PALETTE_SIZE, channel_table, sample_gradient
from .tree import SceneNode, element

FLOOD_COLOR = "white"
FLOOD_OPACITY = 0.1

# Collapses the flood's grey floor to transparent and ramps denser greys
# toward full opacity
ALPHA_TABLE: List[float] = [0.0, 0.0, 0.5, 0.6, 0.7, 0.8, 0.9, 1.0]

BLURRED = "blurred"
FLOODED = "flooded"
TO_TRANSFER = "toTransfer"


def _transfer_func(tag: str, table: Sequence[float]) -> SceneNode:
    return element(tag, {"type": "table", "tableValues": list(table)})


def build_filter(
    blur_std_dev: float,
    gradient: Sequence[GradientStop],
    instance_id: str,
    palette_size: int = PALETTE_SIZE,
) -> SceneNode:
    """
    Build the blur -> flood -> blend -> component-transfer filter.

    Args:
        blur_std_dev: Gaussian blur standard deviation
        gradient: (stop, color) pairs, low density first
        instance_id: Identifier of the filter element
        palette_size: Number of gradient samples per channel table

    Returns:
        ``filter`` SceneNode with four primitives in pipeline order
    """
    palette = sample_gradient(gradient, palette_size)

    return element(
        "filter",
        {"id": instance_id},
        [
            element(
                "feGaussianBlur",
                {
                    "in": "SourceGraphic",
                    "stdDeviation": blur_std_dev,
                    "result": BLURRED,
                },
            ),
            element(
                "feFlood",
                {
                    "flood-color": FLOOD_COLOR,
                    "flood-opacity": FLOOD_OPACITY,
                    "result": FLOODED,
                },
            ),
            element(
                "feBlend",
                {
                    "in": FLOODED,
                    "in2": BLURRED,
                    "mode": "multiply",
                    "result": TO_TRANSFER,
                },
            ),
            element(
                "feComponentTransfer",
                {"in": TO_TRANSFER},
                [
                    _transfer_func("feFuncR", channel_table(palette, "r")),
                    _transfer_func("feFuncG", channel_table(palette, "g")),
                    _transfer_func("feFuncB", channel_table(palette, "b")),
                    _transfer_func("feFuncA", ALPHA_TABLE),
                ],
            ),
        ],
    )
