"""Named gradient registry for picking presets by name."""

from typing import TYPE_CHECKING, Dict, Sequence

if TYPE_CHECKING:
    from .config import Gradient, GradientStop

# Global registry mapping gradient names to their stops
_GRADIENT_REGISTRY: Dict[str, "Gradient"] = {}


def register_gradient(name: str, stops: Sequence["GradientStop"]) -> "Gradient":
    """
    Register a gradient under a unique name.

    Args:
        name: Unique gradient name (e.g., 'Blue Red')
        stops: Ordered (stop, color) pairs

    Returns:
        The registered gradient as a tuple of stops

    Raises:
        ValueError: If the name is already registered
    """
    if name in _GRADIENT_REGISTRY:
        raise ValueError(f"Gradient '{name}' is already registered")
    gradient = tuple((float(stop), color) for stop, color in stops)
    _GRADIENT_REGISTRY[name] = gradient
    return gradient


def get_gradient(name: str) -> "Gradient":
    """
    Get a gradient by its registered name.

    Args:
        name: The registered gradient name

    Returns:
        The gradient stops

    Raises:
        KeyError: If no gradient is registered with that name
    """
    if name not in _GRADIENT_REGISTRY:
        available = list(_GRADIENT_REGISTRY.keys())
        raise KeyError(
            f"No gradient registered with name '{name}'. "
            f"Available gradients: {available}"
        )
    return _GRADIENT_REGISTRY[name]


def list_gradients() -> Dict[str, "Gradient"]:
    """
    Get all registered gradients.

    Returns:
        Dict mapping gradient names to their stops
    """
    return _GRADIENT_REGISTRY.copy()


def is_registered(name: str) -> bool:
    """
    Check if a gradient name is registered.

    Args:
        name: The gradient name to check

    Returns:
        True if registered, False otherwise
    """
    return name in _GRADIENT_REGISTRY
