"""Reusable RuneScape-themed widgets for the CLI."""
from typing import Any, List, Optional, Sequence, Tuple

from rich.panel import Panel
from rich.table import Table

from worldmap_ui import theme


def rs_table(
    headers: Sequence[str],
    rows: List[Tuple[Any, ...]],
    title: Optional[str] = None,
) -> Table:
    """Build a themed Table with gold headers and brown border."""
    t = Table(
        title=title,
        box=theme.RS_BOX,
        border_style=theme.rs_panel_border_style,
        header_style=theme.rs_table_header_style,
    )
    for h in headers:
        t.add_column(h, style=theme.rs_table_cell_style)
    for row in rows:
        t.add_row(*(str(cell) for cell in row))
    return t


def kv_table(values: dict, title: Optional[str] = None) -> Table:
    """Two-column Field/Value table from a dict (e.g. a to_dict() result)."""
    return rs_table(("Field", "Value"), list(values.items()), title=title)


def rs_header(text: str, subtitle: Optional[str] = None) -> Panel:
    """Top bar: gold on dark brown."""
    content = text
    if subtitle:
        content = f"{text}  |  {subtitle}"
    return Panel(
        content,
        style=theme.rs_header_style,
        border_style=theme.RS_BROWN_DARK,
        box=theme.RS_BOX,
    )
