"""Coordinate conversion between OSRS game tiles and the map surface.

Game tiles are bottom-left origin with y growing north; the tile images are
top-left origin. The formulas below flip the y axis and apply the quarter-tile
nudges the tile source needs so a clicked pixel resolves to the tile under the
cursor.
"""
import math
from typing import TYPE_CHECKING

from .constants import (
    MAP_HEIGHT_MAX_ZOOM_PX,
    OFFSET_X,
    OFFSET_Y,
    TILE_HEIGHT_PX,
    TILE_WIDTH_PX,
)
from .types import GeoPoint, ProjectedPoint, WorldPosition

if TYPE_CHECKING:
    from .surface import MappingSurface


def _round_half_up(value: float) -> float:
    # Same as the map surface's Math.round; NaN/inf pass through untouched.
    if not math.isfinite(value):
        return value
    return math.floor(value + 0.5)


def world_to_projected(x: float, y: float) -> ProjectedPoint:
    """Convert game tile coords (e.g. Lumbridge 3222, 3218) to max-zoom map pixels.

    No bounds check: off-world input gives a valid but meaningless point.
    """
    px = (x - OFFSET_X) * TILE_WIDTH_PX + TILE_WIDTH_PX / 4
    py = MAP_HEIGHT_MAX_ZOOM_PX - (y - OFFSET_Y) * TILE_HEIGHT_PX
    return ProjectedPoint(px, py)


def world_to_projected_centered(x: float, y: float) -> ProjectedPoint:
    """Pixel position of the tile's center rather than its corner."""
    return world_to_projected(x + 0.5, y + 0.5)


def projected_to_world(px, py=None, z: int = 0) -> WorldPosition:
    """Convert max-zoom map pixels back to a game tile.

    Accepts either ``(px, py, z)`` or ``(ProjectedPoint, z)``. The plane is
    passed through as given; pixels carry no plane information. Sub-tile
    precision is lost to rounding.
    """
    if isinstance(px, ProjectedPoint):
        if py is not None:
            z = py
        px, py = px.x, px.y

    y = MAP_HEIGHT_MAX_ZOOM_PX - py + TILE_HEIGHT_PX / 4
    y = _round_half_up((y - TILE_HEIGHT_PX) / TILE_HEIGHT_PX) + OFFSET_Y
    x = _round_half_up((px - TILE_WIDTH_PX) / TILE_WIDTH_PX) + OFFSET_X
    return WorldPosition(x, y, z)


def world_to_geo(surface: "MappingSurface", x: float, y: float) -> GeoPoint:
    """Game tile -> surface lat/lng, unprojected at the surface's max zoom."""
    return surface.unproject(world_to_projected(x, y), surface.max_zoom)


def world_to_geo_centered(surface: "MappingSurface", x: float, y: float) -> GeoPoint:
    return world_to_geo(surface, x + 0.5, y + 0.5)


def geo_to_world(surface: "MappingSurface", geo: GeoPoint, z: int = 0) -> WorldPosition:
    """Surface lat/lng (e.g. a pointer event) -> game tile on plane ``z``."""
    point = surface.project(geo, surface.max_zoom)
    return projected_to_world(point.x, point.y, z)
