"""Camera and map surface settings.

The camera only holds the initial view. Pan and zoom gestures are handled
inside the deck.gl component and never written back here.
"""

from dataclasses import dataclass, field

import numpy as np

from trail_overlays.constants import MapConfig
from trail_overlays.model.geo_point import GeoPoint


@dataclass(frozen=True)
class CameraView:
    """Map center and zoom level."""

    center: GeoPoint = field(
        default_factory=lambda: GeoPoint(lat=MapConfig.START_CENTER_LAT, lon=MapConfig.START_CENTER_LON)
    )
    zoom: float = MapConfig.DEFAULT_ZOOM

    def __post_init__(self) -> None:
        if not np.isfinite(self.zoom) or self.zoom < 0:
            raise ValueError(f"Zoom must be finite and >= 0, got {self.zoom}")


@dataclass(frozen=True)
class MapSurfaceSettings:
    """Switches for the map surface.

    Attributes:
        zoom_controls_enabled: Allow zooming with scroll, double click and pinch
        my_location_enabled: Draw the device location marker when one is known
    """

    zoom_controls_enabled: bool = MapConfig.ZOOM_CONTROLS_ENABLED
    my_location_enabled: bool = MapConfig.MY_LOCATION_ENABLED
