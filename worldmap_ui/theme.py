"""RuneScape map theme for the coordinate CLI.
Central place for colors, borders, and copy.
"""
from rich import box

# --- Box / border ---
RS_BOX = box.SQUARE

# --- Colors (Rich style strings; hex for truecolor, named fallback) ---
RS_GOLD = "#f9d000"
RS_BROWN = "#94866d"
RS_BROWN_DARK = "#605443"
RS_TAN = "#d0bd97"
RS_BG_DARK = "#18140c"
RS_SUCCESS = "green"
RS_DANGER = "red"

# --- Panel style combinations ---
rs_header_style = f"bold {RS_GOLD} on {RS_BG_DARK}"
rs_panel_border_style = RS_BROWN
rs_table_header_style = f"bold {RS_GOLD}"
rs_table_cell_style = RS_TAN

# --- Copy constants ---
TITLE_MAIN = "OSRS Map Coordinates"
TITLE_PROJECTED = "Map Pixels (max zoom)"
TITLE_WORLD = "World Tile"
TITLE_REGION = "Region"
TITLE_BOUNDS = "World Bounds"
TITLE_GEOMETRY = "World Geometry"
LABEL_VALID = "ON MAP"
LABEL_INVALID = "OFF MAP"


def style_validity(valid: bool) -> str:
    """Return Rich markup for an in-bounds badge (e.g. [green]ON MAP[/])."""
    if valid:
        return f"[{RS_SUCCESS}]{LABEL_VALID}[/]"
    return f"[{RS_DANGER}]{LABEL_INVALID}[/]"
