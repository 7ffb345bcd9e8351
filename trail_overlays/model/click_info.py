"""Click detection types - unified click information for map interactions.

- MapClickType: Source of click (OVERLAY or EMPTY map)
- OverlayType: Which overlay was clicked (or None for empty map)
- ClickInfo: Click information returned by ClickDetector
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class MapClickType(Enum):
    """Source of click on the map - EXACTLY one per interaction."""

    OVERLAY = "overlay"  # Picked a pickable overlay
    EMPTY = "empty"  # Clicked the base map (raw coordinates)


class OverlayType(Enum):
    """Clickable overlays on the map."""

    TRAIL = "trail"
    PARK = "park"


@dataclass(frozen=True)
class ClickInfo:
    """Click information - the ONLY output from click detection.

    STRICT CONTRACT:
    - For EMPTY: lat/lon are REQUIRED, overlay is None
    - For OVERLAY: overlay is REQUIRED, lat/lon are optional (where the overlay was hit)
    """

    click_type: MapClickType
    overlay: Optional[OverlayType] = None
    lat: Optional[float] = None
    lon: Optional[float] = None

    def __post_init__(self) -> None:
        """Validate invariants - fail immediately on invalid state."""
        if self.click_type == MapClickType.EMPTY:
            if self.lat is None or self.lon is None:
                raise ValueError("EMPTY click must have lat/lon set")
            if self.overlay is not None:
                raise ValueError("EMPTY click must NOT have overlay set")
        elif self.click_type == MapClickType.OVERLAY:
            if self.overlay is None:
                raise ValueError("OVERLAY click must have overlay set")

    @property
    def is_overlay(self) -> bool:
        return self.click_type == MapClickType.OVERLAY

    @property
    def display_name(self) -> str:
        """Short text for logs and toasts."""
        if self.overlay is not None:
            return self.overlay.value
        return f"map at ({self.lat:.5f}, {self.lon:.5f})"
