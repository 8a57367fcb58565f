"""Map surface collaborators: the pixel <-> lat/lng step.

The coordinate helpers only produce and consume ProjectedPoint; the final
projection belongs to whatever renders the map. SimpleSurface mirrors
Leaflet's CRS.Simple so the API and CLI can answer lat/lng questions without
a browser.
"""
from typing import Protocol

from .constants import DEFAULT_ZOOM, MAX_ZOOM
from .types import GeoPoint, ProjectedPoint


class MappingSurface(Protocol):
    max_zoom: int
    zoom: int

    def project(self, geo: GeoPoint, zoom: int) -> ProjectedPoint: ...

    def unproject(self, point: ProjectedPoint, zoom: int) -> GeoPoint: ...


class SimpleSurface:
    """Flat CRS: scale = 2 ** zoom, y axis pointing down in pixel space.

    Conversions always run at ``max_zoom``. ``zoom`` answers the current-zoom
    query only; the API uses it as the default zoom for tile URLs.
    """

    def __init__(self, zoom: int = DEFAULT_ZOOM, max_zoom: int = MAX_ZOOM) -> None:
        self.zoom = zoom
        self.max_zoom = max_zoom

    @staticmethod
    def scale(zoom: int) -> float:
        return 2.0 ** zoom

    def project(self, geo: GeoPoint, zoom: int) -> ProjectedPoint:
        s = self.scale(zoom)
        return ProjectedPoint(geo.lng * s, -geo.lat * s)

    def unproject(self, point: ProjectedPoint, zoom: int) -> GeoPoint:
        s = self.scale(zoom)
        return GeoPoint(-point.y / s, point.x / s)
