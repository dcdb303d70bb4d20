"""Error types raised by vector_heatmap."""


class ConfigurationError(ValueError):
    """Raised when a heatmap configuration value is out of range.

    This error is raised when:
    1. ``radius`` is zero or negative
    2. ``max_weight`` is zero or negative
    3. ``blur`` is negative

    Gradient stops are not validated; unordered stops only degrade the
    sampled palette.
    """

    pass
