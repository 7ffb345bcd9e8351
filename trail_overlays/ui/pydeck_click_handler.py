"""Pydeck click handler using streamlit-deckgl.

st_deckgl returns the full deck.gl onClick event, including clicks on the
empty base map, where st.pydeck_chart only reports object selections.
"""

import logging
from dataclasses import dataclass
from typing import Any

import pydeck as pdk
from streamlit_deckgl import st_deckgl  # type: ignore[import-untyped]

from trail_overlays.constants import MapConfig

logger = logging.getLogger(__name__)


@dataclass
class PydeckClickResult:
    """Result from Pydeck click detection.

    Attributes:
        clicked_object: The picked deck.gl object data (dict) or None for a base map click
        clicked_coordinate: [lon, lat] of click location
    """

    clicked_object: dict[str, Any] | None
    clicked_coordinate: list[float] | None

    @property
    def is_object_click(self) -> bool:
        """True if a pickable object was clicked."""
        return self.clicked_object is not None

    @staticmethod
    def empty() -> "PydeckClickResult":
        """Return empty result (no click detected)."""
        return PydeckClickResult(clicked_object=None, clicked_coordinate=None)


def parse_click_event(event: dict[str, Any] | None) -> PydeckClickResult:
    """Split an st_deckgl event into picked object and coordinate.

    st_deckgl SPREADS object properties into the event dict (no "object" key):
    - Base map click: {coordinate: [lon, lat], eventType: "click"}
    - Object click: {type: "trail", id: ..., coordinate: [lon, lat], eventType: "click", ...}
    """
    if not event:
        return PydeckClickResult.empty()

    clicked_object: dict[str, Any] | None = None
    clicked_coordinate: list[float] | None = None

    coord = event.get("coordinate")
    if isinstance(coord, (list, tuple)) and len(coord) >= 2:
        clicked_coordinate = [float(coord[0]), float(coord[1])]

    # Picked objects are recognised by the "type" field set on our layer rows
    if event.get("type") and event["type"] != "click":
        clicked_object = {k: v for k, v in event.items() if k not in ("coordinate", "eventType")}
        logger.debug(f"Object click detected: type={event.get('type')}, id={event.get('id')}")

    if clicked_coordinate is None and clicked_object is None:
        return PydeckClickResult.empty()

    return PydeckClickResult(clicked_object=clicked_object, clicked_coordinate=clicked_coordinate)


def render_pydeck_map(
    deck: pdk.Deck,
    key: str,
    height: int = MapConfig.MAP_HEIGHT_PX,
) -> PydeckClickResult:
    """Render Pydeck map and return the last click.

    Args:
        deck: Configured pydeck.Deck object
        key: Unique key for this component instance
        height: Height in pixels

    Returns:
        PydeckClickResult with click info (object and/or coordinate)
    """
    # MUST pass events=['click'] to enable click detection!
    event = st_deckgl(deck, key=key, height=height, events=["click"])
    logger.debug(f"st_deckgl event keys: {list(event.keys()) if isinstance(event, dict) else type(event)}")
    return parse_click_event(event if isinstance(event, dict) else None)
