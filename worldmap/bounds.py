"""World bounds checks and tile distance."""
import math

from .constants import MAX_X, MAX_Y, MIN_X, MIN_Y
from .types import WorldCoordinate


def is_valid(x: float, y: float) -> bool:
    """True when (x, y) is inside the world box, edges included."""
    return MIN_X <= x <= MAX_X and MIN_Y <= y <= MAX_Y


def clamp(x: float, y: float) -> WorldCoordinate:
    """Clamp each axis into the world box."""
    return WorldCoordinate(max(MIN_X, min(MAX_X, x)), max(MIN_Y, min(MAX_Y, y)))


def distance(a, b) -> float:
    """Straight-line tile distance between two positions; plane is ignored."""
    dx = a.x - b.x
    dy = a.y - b.y
    return math.sqrt(dx * dx + dy * dy)
