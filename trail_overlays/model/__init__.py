"""Data model classes for the map overlay screen.

- GeoPoint: Coordinate atom (lat, lon)
- Trail / ParkBoundary / OverlayGeometry: Fixed overlay geometry
- RGBA: Overlay color
- BoundedWidth / PolylineStyle / PolygonStyle / StyleState: Overlay styling
- ActiveDialog / InfoContent: Which modal is open and what it says
- CameraView / MapSurfaceSettings: Initial view and map switches
- ClickInfo: Result of click detection
"""

from trail_overlays.model.camera import CameraView, MapSurfaceSettings
from trail_overlays.model.click_info import ClickInfo, MapClickType, OverlayType
from trail_overlays.model.color import RGBA
from trail_overlays.model.dialog import INFO_CONTENT, ActiveDialog, InfoContent
from trail_overlays.model.geo_point import GeoPoint
from trail_overlays.model.overlay_geometry import (
    OverlayGeometry,
    ParkBoundary,
    Trail,
    default_geometry,
)
from trail_overlays.model.overlay_style import (
    BoundedWidth,
    PolygonStyle,
    PolylineStyle,
    StyleState,
)

__all__ = [
    "GeoPoint",
    "Trail",
    "ParkBoundary",
    "OverlayGeometry",
    "default_geometry",
    "RGBA",
    "BoundedWidth",
    "PolylineStyle",
    "PolygonStyle",
    "StyleState",
    "ActiveDialog",
    "InfoContent",
    "INFO_CONTENT",
    "CameraView",
    "MapSurfaceSettings",
    "ClickInfo",
    "MapClickType",
    "OverlayType",
]
