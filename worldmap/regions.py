"""Region ids: the world split into 64x64 tile blocks.

id = (x >> 6) * 256 + (y >> 6). The y index only has 8 bits, so any y above
256 * 64 would alias onto another region. The world stops at MAX_Y = 12608
(y index 197), and nothing here guards against wider worlds.
"""
import math

from .constants import REGION_SIZE
from .types import LocalCoordinate, Region, WorldCoordinate

_SHIFT = 6  # log2(REGION_SIZE)


def _as_int(value) -> int:
    # Truncate like JS ToInt32 within int32 range (non-finite -> 0); larger
    # values keep Python's unbounded ints and are not wrapped at 2**31.
    if isinstance(value, int):
        return value
    if not math.isfinite(value):
        return 0
    return int(value)


def region_from_id(region_id: int) -> WorldCoordinate:
    """South-west corner of a region id."""
    region_id = _as_int(region_id)
    return WorldCoordinate((region_id >> 8) << _SHIFT, (region_id & 0xFF) << _SHIFT)


def region_of(x: int, y: int) -> Region:
    """Region containing tile (x, y). Tiles on a multiple of 64 start a new region."""
    region_id = (_as_int(x) >> _SHIFT) * 256 + (_as_int(y) >> _SHIFT)
    base = region_from_id(region_id)
    return Region(region_id, base.x, base.y)


def local_coordinate(x: int, y: int) -> LocalCoordinate:
    """Tile offset inside its region, 0..63 on both axes.

    Equal to (x - region.x, y - region.y) wherever the id packs cleanly; the
    block base comes from floor division so negative or aliased tiles still
    land in 0..63.
    """
    base_x = (_as_int(x) >> _SHIFT) << _SHIFT
    base_y = (_as_int(y) >> _SHIFT) << _SHIFT
    return LocalCoordinate(x - base_x, y - base_y)


def region_bounds(region_id: int) -> tuple[WorldCoordinate, WorldCoordinate]:
    """Inclusive (south-west, north-east) tiles covered by a region."""
    base = region_from_id(region_id)
    return base, WorldCoordinate(base.x + REGION_SIZE - 1, base.y + REGION_SIZE - 1)
