"""Overlay geometry store - the two fixed coordinate sequences.

- Trail: ordered polyline points (at least 2)
- ParkBoundary: ordered polygon ring (at least 3, implicitly closed)
- OverlayGeometry: both overlays, created once per screen

All classes are frozen and copy their points into a tuple, so geometry cannot
change after construction.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from trail_overlays.constants import OverlayConfig
from trail_overlays.model.geo_point import GeoPoint


def _freeze_points(owner: str, points: Sequence[GeoPoint], minimum: int) -> tuple[GeoPoint, ...]:
    """Copy points into a tuple and validate them.

    Raises:
        TypeError: If an element is not a GeoPoint
        ValueError: If there are fewer than minimum points
    """
    frozen = tuple(points)
    for idx, point in enumerate(frozen):
        if not isinstance(point, GeoPoint):
            raise TypeError(f"{owner} point {idx} must be a GeoPoint, got {type(point).__name__}")
    if len(frozen) < minimum:
        raise ValueError(f"{owner} needs at least {minimum} points, got {len(frozen)}")
    return frozen


@dataclass(frozen=True)
class Trail:
    """Hiking trail drawn as a polyline."""

    points: tuple[GeoPoint, ...]

    def __post_init__(self) -> None:
        points = _freeze_points(owner="Trail", points=self.points, minimum=OverlayConfig.MIN_TRAIL_POINTS)
        object.__setattr__(self, "points", points)

    @staticmethod
    def from_lat_lons(latlons: Iterable[tuple[float, float]]) -> "Trail":
        return Trail(points=tuple(GeoPoint(lat=lat, lon=lon) for lat, lon in latlons))

    def __len__(self) -> int:
        return len(self.points)


@dataclass(frozen=True)
class ParkBoundary:
    """Park area drawn as a polygon.

    The ring is stored open (last point != first point); renderers close it
    with closed_ring().
    """

    points: tuple[GeoPoint, ...]

    def __post_init__(self) -> None:
        points = _freeze_points(owner="ParkBoundary", points=self.points, minimum=OverlayConfig.MIN_PARK_POINTS)
        object.__setattr__(self, "points", points)

    @staticmethod
    def from_lat_lons(latlons: Iterable[tuple[float, float]]) -> "ParkBoundary":
        return ParkBoundary(points=tuple(GeoPoint(lat=lat, lon=lon) for lat, lon in latlons))

    def closed_ring(self) -> tuple[GeoPoint, ...]:
        """Points with the first point repeated at the end."""
        if self.points[0] == self.points[-1]:
            return self.points
        return self.points + (self.points[0],)

    def __len__(self) -> int:
        return len(self.points)


@dataclass(frozen=True)
class OverlayGeometry:
    """Both overlays of the screen."""

    trail: Trail
    park: ParkBoundary


def default_geometry() -> OverlayGeometry:
    """Boston Common trail and park outline from OverlayConfig."""
    return OverlayGeometry(
        trail=Trail.from_lat_lons(OverlayConfig.TRAIL_POINTS),
        park=ParkBoundary.from_lat_lons(OverlayConfig.PARK_BOUNDARY_POINTS),
    )
