"""Click handlers for the overlay screen.

ClickDetector turns raw deck.gl events into ClickInfo; dispatch_click looks
up the event wired to the clicked overlay in the rendered Scene and sends it
to the state machine.
"""

import logging

from trail_overlays.model.click_info import ClickInfo, OverlayType
from trail_overlays.ui.state_machine import DialogStateMachine
from trail_overlays.ui.view_tree import Scene

logger = logging.getLogger(__name__)


def get_click_event(overlay: OverlayType, scene: Scene) -> str | None:
    """Event wired to the overlay in this scene, or None if it is not clickable.

    Raises:
        RuntimeError: If the overlay type has no counterpart in the scene
    """
    if overlay == OverlayType.TRAIL:
        specs = scene.polylines
    elif overlay == OverlayType.PARK:
        specs = scene.polygons
    else:
        raise RuntimeError(f"No click handler registered for overlay '{overlay}'")

    for spec in specs:
        if spec.clickable:
            return spec.on_click
    return None


def dispatch_click(click_info: ClickInfo, sm: DialogStateMachine, scene: Scene) -> bool:
    """Dispatch a click to the action wired to the clicked overlay.

    Clicks on the empty base map do nothing.

    Returns:
        True if a dialog transition happened.
    """
    logger.info(f"[CLICK] Dispatching click on {click_info.display_name} in state {sm.get_state_name()}")

    if not click_info.is_overlay or click_info.overlay is None:
        return False

    event = get_click_event(overlay=click_info.overlay, scene=scene)
    if event is None:
        logger.debug(f"[CLICK] {click_info.overlay.value} is not clickable")
        return False
    return sm.try_transition(event)
