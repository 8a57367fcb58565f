"""
OSRS Map Coordinates – HTTP API for the map viewer.
Run: python api_server.py (host/port from config/settings.yaml)
  or: uvicorn api_server:app --reload --host 127.0.0.1 --port 8000
"""
import logging
from pathlib import Path

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
import uvicorn

# Ensure we run from project root so config paths resolve
ROOT = Path(__file__).resolve().parent
import sys
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from worldmap.bounds import clamp, distance, is_valid
from worldmap.constants import GEOMETRY
from worldmap.layers import layer_for_plane, plane_for_layer, tile_url, tile_url_template
from worldmap.map_coords import (
    geo_to_world,
    projected_to_world,
    world_to_geo,
    world_to_geo_centered,
    world_to_projected,
    world_to_projected_centered,
)
from worldmap.regions import local_coordinate, region_bounds, region_from_id, region_of
from worldmap.settings import load_settings
from worldmap.surface import SimpleSurface
from worldmap.types import GeoPoint, WorldCoordinate

logger = logging.getLogger(__name__)

settings = load_settings()
logging.basicConfig(level=str(settings.get("log_level", "INFO")).upper())
logger.info("Settings loaded (tile server: %s)", settings["tile_server_url"])

app = FastAPI(title="OSRS Map Coordinates API", version="1.0.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.get("cors_origins", ["*"])),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

_surface: SimpleSurface | None = None


def get_surface() -> SimpleSurface:
    global _surface
    if _surface is None:
        _surface = SimpleSurface(zoom=settings["default_zoom"], max_zoom=settings["max_zoom"])
    return _surface


# --- Pydantic models ---

class WorldPoint(BaseModel):
    x: float
    y: float
    centered: bool = False


class PixelPoint(BaseModel):
    # Max-zoom map pixels (X grows east, Y grows south).
    x: float
    y: float
    z: int = 0


class LatLng(BaseModel):
    lat: float
    lng: float
    z: int = 0


class Tile(BaseModel):
    x: float
    y: float


class DistanceBody(BaseModel):
    a: Tile
    b: Tile


@app.get("/api/geometry")
def get_geometry():
    return GEOMETRY.to_dict()


@app.get("/api/surface")
def get_surface_zoom():
    """Current and maximum zoom of the flat map surface used for lat/lng."""
    s = get_surface()
    return {"zoom": s.zoom, "max_zoom": s.max_zoom}


@app.post("/api/transform/world-to-projected")
def to_projected(body: WorldPoint):
    convert = world_to_projected_centered if body.centered else world_to_projected
    return convert(body.x, body.y).to_dict()


@app.post("/api/transform/projected-to-world")
def to_world(body: PixelPoint):
    return projected_to_world(body.x, body.y, body.z).to_dict()


@app.post("/api/transform/world-to-geo")
def to_geo(body: WorldPoint):
    convert = world_to_geo_centered if body.centered else world_to_geo
    return convert(get_surface(), body.x, body.y).to_dict()


@app.post("/api/transform/geo-to-world")
def from_geo(body: LatLng):
    return geo_to_world(get_surface(), GeoPoint(body.lat, body.lng), body.z).to_dict()


@app.get("/api/regions/at")
def get_region_at(x: int, y: int):
    """Region containing a tile, plus the tile's offset inside it."""
    return {
        "region": region_of(x, y).to_dict(),
        "local": local_coordinate(x, y).to_dict(),
    }


@app.get("/api/regions/{region_id}")
def get_region(region_id: int):
    if region_id < 0:
        logger.warning("Rejected region id %s", region_id)
        raise HTTPException(status_code=404, detail="Region not found")
    south_west, north_east = region_bounds(region_id)
    return {
        "id": region_id,
        "base": region_from_id(region_id).to_dict(),
        "south_west": south_west.to_dict(),
        "north_east": north_east.to_dict(),
        "valid": is_valid(south_west.x, south_west.y),
    }


@app.get("/api/bounds/check")
def check_bounds(x: float, y: float):
    return {"valid": is_valid(x, y), "clamped": clamp(x, y).to_dict()}


@app.post("/api/distance")
def get_distance(body: DistanceBody):
    a = WorldCoordinate(body.a.x, body.a.y)
    b = WorldCoordinate(body.b.x, body.b.y)
    return {"distance": distance(a, b)}


def _resolve_plane(plane: int | None, layer: str | None) -> int:
    """layer wins over plane; falls back to the configured default plane."""
    if layer is not None:
        try:
            return plane_for_layer(layer)
        except ValueError as e:
            logger.warning("Rejected layer %r", layer)
            raise HTTPException(status_code=400, detail=str(e))
    if plane is None:
        return settings["default_plane"]
    return plane


@app.get("/api/tiles/template")
def get_tile_template(plane: int | None = None, layer: str | None = None):
    """Tile image pattern for one plane; {z}/{x}/{y} are left for the tile layer."""
    plane = _resolve_plane(plane, layer)
    return {
        "plane": plane,
        "layer": layer_for_plane(plane),
        "template": tile_url_template(plane, settings["tile_server_url"]),
    }


@app.get("/api/tiles/url")
def get_tile_url(x: int, y: int, zoom: int | None = None, plane: int | None = None, layer: str | None = None):
    """Full tile image path for known tile-grid indices (x, y) at a zoom level."""
    plane = _resolve_plane(plane, layer)
    if zoom is None:
        zoom = get_surface().zoom
    if not GEOMETRY.min_zoom <= zoom <= GEOMETRY.max_zoom:
        raise HTTPException(status_code=400, detail=f"Zoom must be {GEOMETRY.min_zoom}..{GEOMETRY.max_zoom}")
    return {
        "plane": plane,
        "zoom": zoom,
        "url": tile_url(plane, zoom, x, y, settings["tile_server_url"]),
    }


def main() -> None:
    """Run the API with the host/port from settings."""
    uvicorn.run(app, host=settings["api_host"], port=int(settings["api_port"]))


if __name__ == "__main__":
    main()
