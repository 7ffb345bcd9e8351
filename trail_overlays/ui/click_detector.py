"""Click detector - detects overlay clicks from Pydeck events.

Pydeck click events return the picked row directly. Our layers put a "type"
field on every row ("trail" or "park"), which identifies the overlay.

Key tracking prevents re-processing the same click on reruns.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from trail_overlays.constants import ClickConfig
from trail_overlays.model.click_info import ClickInfo, MapClickType, OverlayType

if TYPE_CHECKING:
    from trail_overlays.ui.state_machine import ClickDeduplicationContext

logger = logging.getLogger(__name__)

_OVERLAY_BY_TYPE = {
    ClickConfig.TYPE_TRAIL: OverlayType.TRAIL,
    ClickConfig.TYPE_PARK: OverlayType.PARK,
}


@dataclass
class ClickDetector:
    """Detects clicks from Pydeck picked objects.

    Attributes:
        dedup: ClickDeduplicationContext for tracking the last-seen click
    """

    dedup: "ClickDeduplicationContext"

    def detect(
        self,
        clicked_object: dict[str, Any] | None,
        clicked_coordinate: list[float] | None,
    ) -> ClickInfo | None:
        """Detect click from Pydeck event data.

        Args:
            clicked_object: The picked deck.gl object data (dict) or None
            clicked_coordinate: [lon, lat] of click location or None

        Returns:
            ClickInfo for new clicks, None otherwise
        """
        obj_id = self._get_object_id(obj=clicked_object)
        coord_tuple = tuple(clicked_coordinate) if clicked_coordinate else None

        if not self.dedup.is_new_click(coord=coord_tuple, obj_id=obj_id):
            return None

        if clicked_object is not None:
            return self._parse_object_click(obj=clicked_object, coord=clicked_coordinate)

        if clicked_coordinate is not None:
            lon, lat = clicked_coordinate[0], clicked_coordinate[1]
            logger.debug(f"[CLICK] Base map click at ({lat:.6f}, {lon:.6f})")
            return ClickInfo(click_type=MapClickType.EMPTY, lat=lat, lon=lon)

        return None

    def _get_object_id(self, obj: dict[str, Any] | None) -> str | None:
        if obj is None:
            return None
        obj_type = self._resolve_type(obj=obj) or ""
        obj_id = obj.get("id", "")
        return f"{obj_type}_{obj_id}" if obj_id else obj_type

    @staticmethod
    def _resolve_type(obj: dict[str, Any]) -> str | None:
        """Object type, looking into properties for GeoJSON features."""
        obj_type = obj.get("type")
        if obj_type == "Feature":
            return obj.get("properties", {}).get("type")
        return obj_type

    def _parse_object_click(self, obj: dict[str, Any], coord: list[float] | None) -> ClickInfo | None:
        """Parse clicked object to ClickInfo."""
        obj_type = self._resolve_type(obj=obj)
        if not obj_type:
            logger.warning(f"Object click without type field: {obj}")
            return None

        overlay = _OVERLAY_BY_TYPE.get(obj_type)
        if overlay is None:
            logger.warning(f"Unknown object type: {obj_type}")
            return None

        lon, lat = (coord[0], coord[1]) if coord else (None, None)
        logger.info(f"[CLICK] {overlay.value} clicked")
        return ClickInfo(click_type=MapClickType.OVERLAY, overlay=overlay, lat=lat, lon=lon)
