"""Built-in gradient presets.

Each preset runs from the low-density end (stop 0) to the high-density end
(stop 1). Presets are registered by name so components can accept either a
name or a list of stops.
"""

from .registry import register_gradient

BLUE_RED = register_gradient(
    "Blue Red",
    [
        (0.0, (0, 0, 255)),
        (1.0, (255, 0, 0)),
    ],
)

HEATED_METAL = register_gradient(
    "Heated Metal",
    [
        (0.0, (0, 0, 0)),
        (0.4, (128, 0, 128)),
        (0.6, (255, 0, 0)),
        (0.8, (255, 255, 0)),
        (1.0, (255, 255, 255)),
    ],
)

SUNRISE = register_gradient(
    "Sunrise",
    [
        (0.0, (255, 0, 0)),
        (0.66, (255, 255, 0)),
        (1.0, (255, 255, 255)),
    ],
)

INCANDESCENT = register_gradient(
    "Incandescent",
    [
        (0.0, (0, 0, 0)),
        (0.33, (139, 0, 0)),
        (0.66, (255, 255, 0)),
        (1.0, (255, 255, 255)),
    ],
)

VISIBLE_SPECTRUM = register_gradient(
    "Visible Spectrum",
    [
        (0.0, (255, 0, 255)),
        (0.25, (0, 0, 255)),
        (0.5, (0, 255, 0)),
        (0.75, (255, 255, 0)),
        (1.0, (255, 0, 0)),
    ],
)

BLACK_BODY = register_gradient(
    "Black Body",
    [
        (0.0, (0, 0, 0)),
        (0.39, (230, 0, 0)),
        (0.58, (230, 210, 0)),
        (1.0, (255, 255, 255)),
    ],
)

# Repeated stops make hard steps between bands
STEPPED_COLORS = register_gradient(
    "Stepped Colors",
    [
        (0.0, (0, 0, 128)),
        (0.25, (0, 0, 128)),
        (0.25, (0, 0, 255)),
        (0.5, (0, 0, 255)),
        (0.5, (0, 128, 0)),
        (0.75, (0, 128, 0)),
        (0.75, (255, 0, 0)),
        (1.0, (255, 0, 0)),
    ],
)

DEFAULT_GRADIENT = BLUE_RED
