"""Command-line interface for OSRS map coordinate conversion."""
import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from worldmap.bounds import clamp, distance, is_valid
from worldmap.constants import GEOMETRY
from worldmap.layers import layer_for_plane, plane_for_layer, tile_url, tile_url_template
from worldmap.map_coords import (
    projected_to_world,
    world_to_geo,
    world_to_geo_centered,
    world_to_projected,
    world_to_projected_centered,
)
from worldmap.regions import local_coordinate, region_bounds, region_of
from worldmap.settings import load_settings
from worldmap.surface import SimpleSurface
from worldmap.types import WorldCoordinate

from worldmap_ui import theme
from worldmap_ui.widgets import kv_table, rs_header, rs_table

console = Console()
logger = logging.getLogger(__name__)


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _resolve_plane(plane: int | None, layer: str | None, default: int) -> int:
    """--layer wins over --plane; falls back to the configured default plane."""
    if layer is not None:
        try:
            return plane_for_layer(layer)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="--layer")
    return default if plane is None else plane


@click.group()
@click.option("--settings", "settings_file", type=click.Path(dir_okay=False), default=None, help="Settings YAML file")
@click.option("--verbose", "-v", is_flag=True, help="Debug logging")
@click.pass_context
def cli(ctx: click.Context, settings_file: str | None, verbose: bool) -> None:
    """OSRS world map coordinate tools."""
    settings = load_settings(settings_file)
    _setup_logging("DEBUG" if verbose else str(settings.get("log_level", "INFO")))
    logger.debug("Settings: %s", settings)
    ctx.obj = settings


@cli.command()
@click.argument("x", type=float)
@click.argument("y", type=float)
@click.option("--centered", is_flag=True, help="Use the tile center instead of its corner")
@click.option("--geo", is_flag=True, help="Also show lat/lng on a flat map surface")
@click.pass_obj
def project(settings: dict, x: float, y: float, centered: bool, geo: bool) -> None:
    """Convert a world tile to max-zoom map pixels."""
    point = world_to_projected_centered(x, y) if centered else world_to_projected(x, y)
    values = point.to_dict()
    if geo:
        surface = SimpleSurface(settings["default_zoom"], settings["max_zoom"])
        latlng = world_to_geo_centered(surface, x, y) if centered else world_to_geo(surface, x, y)
        values.update(latlng.to_dict())
    console.print(kv_table(values, title=theme.TITLE_PROJECTED))


@cli.command()
@click.argument("px", type=float)
@click.argument("py", type=float)
@click.option("--plane", "-z", type=int, default=None, help="Plane to attach (pixels carry none)")
@click.option("--layer", default=None, help="Layer name instead of --plane")
@click.pass_obj
def unproject(settings: dict, px: float, py: float, plane: int | None, layer: str | None) -> None:
    """Convert max-zoom map pixels to a world tile."""
    z = _resolve_plane(plane, layer, settings["default_plane"])
    position = projected_to_world(px, py, z)
    values = position.to_dict()
    values["on_map"] = theme.style_validity(is_valid(position.x, position.y))
    console.print(kv_table(values, title=theme.TITLE_WORLD))


@cli.command()
@click.argument("x", type=int)
@click.argument("y", type=int)
def region(x: int, y: int) -> None:
    """Show the region containing a tile."""
    r = region_of(x, y)
    south_west, north_east = region_bounds(r.id)
    offset = local_coordinate(x, y)
    rows = [
        ("Region ID", r.id),
        ("Base", f"{r.x}, {r.y}"),
        ("Bounds", f"{south_west.x}, {south_west.y} .. {north_east.x}, {north_east.y}"),
        ("Local", f"{offset.x}, {offset.y}"),
    ]
    console.print(rs_table(("Field", "Value"), rows, title=theme.TITLE_REGION))


@cli.command("region-id")
@click.argument("region_id", type=click.IntRange(min=0))
def region_id(region_id: int) -> None:
    """Show the tiles covered by a region id."""
    south_west, north_east = region_bounds(region_id)
    rows = [
        ("Region ID", region_id),
        ("Base", f"{south_west.x}, {south_west.y}"),
        ("North-east", f"{north_east.x}, {north_east.y}"),
        ("Status", theme.style_validity(is_valid(south_west.x, south_west.y))),
    ]
    console.print(rs_table(("Field", "Value"), rows, title=theme.TITLE_REGION))


@cli.command()
@click.argument("x", type=int)
@click.argument("y", type=int)
def local(x: int, y: int) -> None:
    """Show a tile's offset inside its region (0..63)."""
    console.print(kv_table(local_coordinate(x, y).to_dict(), title=theme.TITLE_REGION))


@cli.command()
@click.argument("x", type=float)
@click.argument("y", type=float)
def check(x: float, y: float) -> None:
    """Check a tile against the world bounds and show it clamped."""
    clamped = clamp(x, y)
    rows = [
        ("Status", theme.style_validity(is_valid(x, y))),
        ("Clamped", f"{clamped.x}, {clamped.y}"),
    ]
    console.print(rs_table(("Field", "Value"), rows, title=theme.TITLE_BOUNDS))


@cli.command("distance")
@click.argument("x1", type=float)
@click.argument("y1", type=float)
@click.argument("x2", type=float)
@click.argument("y2", type=float)
def distance_cmd(x1: float, y1: float, x2: float, y2: float) -> None:
    """Straight-line tile distance between two tiles."""
    d = distance(WorldCoordinate(x1, y1), WorldCoordinate(x2, y2))
    console.print(f"[{theme.RS_GOLD}]Distance:[/] {d:.3f} tiles")


@cli.command("tile-url")
@click.option("--plane", "-z", type=int, default=None, help="Plane index")
@click.option("--layer", default=None, help="Layer name (surface, floor1, floor2, floor3)")
@click.option("--tile", "tile_xy", type=int, nargs=2, default=None, metavar="X Y", help="Tile-grid indices for a full URL")
@click.option("--zoom", type=click.IntRange(GEOMETRY.min_zoom, GEOMETRY.max_zoom), default=None, help="Zoom for --tile")
@click.pass_obj
def tile_url_cmd(
    settings: dict,
    plane: int | None,
    layer: str | None,
    tile_xy: tuple[int, int] | None,
    zoom: int | None,
) -> None:
    """Show the tile image pattern for a plane, or one tile's URL with --tile."""
    z = _resolve_plane(plane, layer, settings["default_plane"])
    name = layer_for_plane(z) or "unnamed"
    console.print(rs_header(theme.TITLE_MAIN, f"Plane {z} ({name})"))
    if tile_xy:
        zoom = settings["default_zoom"] if zoom is None else zoom
        url = tile_url(z, zoom, tile_xy[0], tile_xy[1], settings["tile_server_url"])
    else:
        url = tile_url_template(z, settings["tile_server_url"])
    console.print(url, soft_wrap=True, highlight=False)


@cli.command()
def geometry() -> None:
    """Show the fixed world geometry."""
    console.print(rs_header(theme.TITLE_MAIN, theme.TITLE_GEOMETRY))
    console.print(kv_table(GEOMETRY.to_dict()))


if __name__ == "__main__":
    cli()
