"""Viewer settings loaded from config/settings.yaml."""
import os
from pathlib import Path

import yaml

from .constants import DEFAULT_ZOOM, MAX_ZOOM, TILE_SERVER_URL

ROOT = Path(__file__).resolve().parent.parent
DEFAULT_SETTINGS_PATH = ROOT / "config" / "settings.yaml"
SETTINGS_ENV_VAR = "WORLDMAP_SETTINGS"


def get_default_settings() -> dict:
    """Default settings; geometry constants are deliberately not configurable."""
    return {
        "tile_server_url": TILE_SERVER_URL,
        "default_plane": 0,
        "default_zoom": DEFAULT_ZOOM,
        "max_zoom": MAX_ZOOM,
        "log_level": "INFO",
        "api_host": "127.0.0.1",
        "api_port": 8000,
        "cors_origins": ["*"],
    }


def settings_path() -> Path:
    """Settings file: $WORLDMAP_SETTINGS if set, else config/settings.yaml."""
    override = os.environ.get(SETTINGS_ENV_VAR)
    if override:
        return Path(override)
    return DEFAULT_SETTINGS_PATH


def load_settings(path: str | Path | None = None) -> dict:
    """Load settings and overlay them on the defaults. Missing file -> defaults."""
    settings = get_default_settings()
    path = Path(path) if path else settings_path()
    if not path.exists():
        return settings
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Settings file must contain a mapping: {path}")
    settings.update(data)
    return settings
