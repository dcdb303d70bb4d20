"""Gradient sampling into dense color palettes."""

from typing import List, Sequence, Tuple

import numpy as np

from ..core.config import Color, GradientStop

RGB = Tuple[int, int, int]

PALETTE_SIZE = 128

# Channel divisor used when mapping 0-255 colors into transfer tables
CHANNEL_SCALE = 256.0

_CHANNELS = {"r": 0, "g": 1, "b": 2}


def parse_color(color: Color) -> RGB:
    """
    Normalize a color to an (r, g, b) tuple of 0-255 ints.

    Args:
        color: (r, g, b) sequence or hex string ('#rgb' or '#rrggbb')

    Returns:
        (r, g, b) tuple

    Raises:
        ValueError: If the color cannot be parsed

    Examples:
        >>> parse_color("#ff8000")
        (255, 128, 0)
        >>> parse_color("#0f0")
        (0, 255, 0)
    """
    if isinstance(color, str):
        text = color.strip().lstrip("#")
        if len(text) == 3:
            text = "".join(ch * 2 for ch in text)
        if len(text) != 6:
            raise ValueError(f"Invalid hex color: '{color}'")
        try:
            return (int(text[0:2], 16), int(text[2:4], 16), int(text[4:6], 16))
        except ValueError:
            raise ValueError(f"Invalid hex color: '{color}'") from None

    if len(color) != 3:
        raise ValueError(f"Color must have 3 channels, got {len(color)}: {color}")
    r, g, b = (int(round(channel)) for channel in color)
    return (r, g, b)


def sample_gradient(
    gradient: Sequence[GradientStop], samples: int = PALETTE_SIZE
) -> List[RGB]:
    """
    Sample a sparse gradient into a dense palette.

    Colors are linearly interpolated in RGB between neighbouring stops and
    sampled at ``i / (samples - 1)``. Positions before the first stop or after
    the last one take the end colors. Repeated stop positions produce a hard
    step. A single stop gives a constant palette, no stops give black.

    Args:
        gradient: (stop, color) pairs, stops expected in [0, 1]
        samples: Number of palette entries

    Returns:
        List of ``samples`` (r, g, b) tuples, low-density end first
    """
    if samples <= 0:
        return []

    ordered = sorted(gradient, key=lambda stop: stop[0])
    if not ordered:
        return [(0, 0, 0)] * samples

    positions = np.array([float(stop) for stop, _ in ordered])
    colors = np.array([parse_color(color) for _, color in ordered], dtype=float)
    if len(ordered) == 1:
        return [tuple(int(c) for c in colors[0])] * samples

    t = np.linspace(0.0, 1.0, samples) if samples > 1 else np.zeros(1)

    # Segment index for every sample; side="right" makes repeated stops step
    hi = np.clip(np.searchsorted(positions, t, side="right"), 1, len(ordered) - 1)
    lo = hi - 1
    span = positions[hi] - positions[lo]
    offset = t - positions[lo]
    frac = np.divide(offset, span, out=np.zeros_like(t), where=span > 0)
    frac = np.clip(frac, 0.0, 1.0)

    sampled = colors[lo] + (colors[hi] - colors[lo]) * frac[:, None]
    sampled = np.clip(np.rint(sampled), 0, 255).astype(int)
    return [(int(r), int(g), int(b)) for r, g, b in sampled]


def channel_table(palette: Sequence[RGB], channel: str) -> List[float]:
    """
    Build a component-transfer table for one color channel.

    Transfer tables are indexed by ascending input brightness while the palette
    runs from low to high density, and dense regions come out darkest from the
    blend stage, so the palette is reversed.

    Args:
        palette: Sampled palette, low-density end first
        channel: One of 'r', 'g', 'b'

    Returns:
        Channel values divided by 256 and clamped to [0, 1]
    """
    if channel not in _CHANNELS:
        raise ValueError(f"Unknown channel '{channel}'. Expected one of: r, g, b")
    index = _CHANNELS[channel]
    return [
        min(max(color[index] / CHANNEL_SCALE, 0.0), 1.0)
        for color in reversed(palette)
    ]
