"""Value types passed between the map surface and the coordinate helpers."""
from dataclasses import dataclass, asdict


@dataclass(frozen=True)
class WorldCoordinate:
    """Game tile (x, y). Off-world values are allowed; see bounds.is_valid."""
    x: int
    y: int

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class WorldPosition:
    """Game tile plus plane (z). Plane 0 is the surface."""
    x: int
    y: int
    z: int = 0

    @property
    def coordinate(self) -> WorldCoordinate:
        return WorldCoordinate(self.x, self.y)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class ProjectedPoint:
    """Pixel position on the map surface at its maximum zoom."""
    x: float
    y: float

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class GeoPoint:
    """The surface's native lat/lng pair. Opaque to this package."""
    lat: float
    lng: float

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class Region:
    """64x64 tile block; x/y are its south-west corner."""
    id: int
    x: int
    y: int

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class LocalCoordinate:
    x: int
    y: int

    def to_dict(self) -> dict:
        return asdict(self)
