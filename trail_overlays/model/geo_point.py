"""GeoPoint - The coordinate atom for map overlays.

A GeoPoint is a single WGS84 coordinate. It is immutable and used only as
coordinate data for overlays and the camera.

Used by:
- Trail (ordered polyline points)
- ParkBoundary (ordered polygon ring)
- CameraView (map center)
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class GeoPoint:
    """A point on the map in decimal degrees.

    Attributes:
        lat: Latitude in decimal degrees (WGS84)
        lon: Longitude in decimal degrees (WGS84)

    Example:
        point = GeoPoint(lat=42.3601, lon=-71.0589)
    """

    lat: float
    lon: float

    def __post_init__(self) -> None:
        """Validate data after initialization."""
        if not (np.isfinite(self.lat) and np.isfinite(self.lon)):
            raise ValueError(f"GeoPoint must have finite coordinates, got ({self.lat}, {self.lon})")
        if not -90.0 <= self.lat <= 90.0:
            raise ValueError(f"Latitude out of range [-90, 90]: {self.lat}")
        if not -180.0 <= self.lon <= 180.0:
            raise ValueError(f"Longitude out of range [-180, 180]: {self.lon}")

    @property
    def lat_lon(self) -> tuple[float, float]:
        """Return (lat, lon) tuple - standard geographic order."""
        return (self.lat, self.lon)

    @property
    def lon_lat(self) -> tuple[float, float]:
        """Return (lon, lat) tuple - GeoJSON/Pydeck order."""
        return (self.lon, self.lat)

    def __repr__(self) -> str:
        return f"GeoPoint(lat={self.lat:.5f}, lon={self.lon:.5f})"
