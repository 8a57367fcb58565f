"""
Shared fixtures for the map coordinate tests.
"""

import os
import sys

import pytest

# Add the project root to the Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from worldmap.surface import SimpleSurface
from worldmap.types import WorldCoordinate


@pytest.fixture
def surface():
    """Flat map surface at the default zoom."""
    return SimpleSurface()


@pytest.fixture
def lumbridge():
    """Lumbridge castle courtyard."""
    return WorldCoordinate(3222, 3218)


@pytest.fixture
def settings_file(tmp_path):
    """Write a settings YAML and return its path."""
    def _write(text: str):
        path = tmp_path / "settings.yaml"
        path.write_text(text, encoding="utf-8")
        return path
    return _write
