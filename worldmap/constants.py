"""World geometry for the OSRS map tiles (Explv's map layout).

Values are empirically derived from the tile source; do not tweak them.
"""
from dataclasses import dataclass, asdict


@dataclass(frozen=True)
class WorldGeometry:
    """Fixed projection parameters between game tiles and map pixels."""
    # Map size at maximum zoom (pixels)
    map_height_max_zoom_px: int = 364544
    map_width_max_zoom_px: int = 104448

    # One game tile at maximum zoom
    tile_width_px: int = 32
    tile_height_px: int = 32

    # World coordinate that lands on the projected origin
    offset_x: int = 1024
    offset_y: int = 6208

    # World bounding box (inclusive)
    min_x: int = 1024
    max_x: int = 4224
    min_y: int = 1216
    max_y: int = 12608

    region_size: int = 64

    min_zoom: int = 4
    max_zoom: int = 11
    default_zoom: int = 8

    def to_dict(self) -> dict:
        return asdict(self)


GEOMETRY = WorldGeometry()

MAP_HEIGHT_MAX_ZOOM_PX = GEOMETRY.map_height_max_zoom_px
MAP_WIDTH_MAX_ZOOM_PX = GEOMETRY.map_width_max_zoom_px
TILE_WIDTH_PX = GEOMETRY.tile_width_px
TILE_HEIGHT_PX = GEOMETRY.tile_height_px
OFFSET_X = GEOMETRY.offset_x
OFFSET_Y = GEOMETRY.offset_y
MIN_X, MAX_X = GEOMETRY.min_x, GEOMETRY.max_x
MIN_Y, MAX_Y = GEOMETRY.min_y, GEOMETRY.max_y
REGION_SIZE = GEOMETRY.region_size
MIN_ZOOM = GEOMETRY.min_zoom
MAX_ZOOM = GEOMETRY.max_zoom
DEFAULT_ZOOM = GEOMETRY.default_zoom

# Tile images per plane; {plane} is filled here, {z}/{x}/{y} by the tile layer.
TILE_SERVER_URL = "https://raw.githubusercontent.com/Explv/osrs_map_tiles/master/{plane}/{z}/{x}/{y}.png"
