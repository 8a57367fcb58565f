"""Plane names and the per-plane tile image template."""
from .constants import TILE_SERVER_URL

# Same plane numbering the game client uses.
LAYER_PLANES = {"surface": 0, "floor1": 1, "floor2": 2, "floor3": 3}


def plane_for_layer(layer: str) -> int:
    """Map a layer name ('surface', 'floor1', ...) to its plane index."""
    try:
        return LAYER_PLANES[layer.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown layer: {layer!r} (expected one of {', '.join(LAYER_PLANES)})") from None


def layer_for_plane(plane: int) -> str | None:
    """Layer name for a plane, or None for planes without a name."""
    for name, value in LAYER_PLANES.items():
        if value == plane:
            return name
    return None


def tile_url_template(plane: int, template: str = TILE_SERVER_URL) -> str:
    """Fill in the plane only; {z}/{x}/{y} stay for the tile layer."""
    return template.replace("{plane}", str(plane))


def tile_url(plane: int, zoom: int, tile_x: int, tile_y: int, template: str = TILE_SERVER_URL) -> str:
    """Full tile image path for already-known tile-grid indices."""
    return (
        tile_url_template(plane, template)
        .replace("{z}", str(zoom))
        .replace("{x}", str(tile_x))
        .replace("{y}", str(tile_y))
    )
