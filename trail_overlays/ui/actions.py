"""UI Actions - All action functions for the overlay screen.

Centralizes the functions that modify screen state:
- Dialog operations (open_trail_info, open_park_info, open_customization, dismiss_dialog)
- Style operations (set_polyline_color, set_polyline_width, ...)
- Map version bumps that clear stale click state

Dialog actions go through the state machine; with the UI listener attached
every successful transition ends in st.rerun().
"""

import logging

from trail_overlays.model.color import RGBA
from trail_overlays.model.dialog import ActiveDialog
from trail_overlays.ui.state_machine import DialogStateMachine, ScreenContext

logger = logging.getLogger(__name__)


# =============================================================================
# MAP VERSION HELPER
# =============================================================================


def bump_map_version(ctx: ScreenContext) -> None:
    """Increment map_version to create a fresh Pydeck component.

    The map component key includes the version, so the new instance has no
    memory of the previous click event.
    """
    old_version = ctx.map_version
    ctx.map_version = old_version + 1
    logger.info(f"[MAP] Bumped map_version: {old_version} -> {ctx.map_version}")


# =============================================================================
# DIALOGS
# =============================================================================


def open_trail_info(sm: DialogStateMachine) -> bool:
    """Show the "Hiking Trail" dialog."""
    return sm.try_transition("open_trail_info")


def open_park_info(sm: DialogStateMachine) -> bool:
    """Show the "Boston Common" dialog."""
    return sm.try_transition("open_park_info")


def open_customization(sm: DialogStateMachine) -> bool:
    """Show the overlay customization dialog."""
    return sm.try_transition("open_customization")


def dismiss_dialog(sm: DialogStateMachine, which: ActiveDialog) -> bool:
    """Close `which` if it is the open dialog.

    Returns:
        True if the dialog was closed, False if `which` was not open.
    """
    if sm.is_closed or which is ActiveDialog.NONE:
        logger.debug(f"Dismiss {which.value} ignored, no dialog is open")
        return False
    if which is not sm.active_dialog:
        logger.debug(f"Dismiss {which.value} ignored, active dialog is {sm.active_dialog.value}")
        return False
    # Bump before the transition: the UI listener reruns and never returns
    bump_map_version(ctx=sm.context)
    return sm.try_transition("dismiss", which=which)


# =============================================================================
# STYLES
# =============================================================================


def set_polyline_color(ctx: ScreenContext, color: RGBA) -> None:
    ctx.style.set_polyline_color(color)


def set_polyline_width(ctx: ScreenContext, width: float) -> None:
    ctx.style.set_polyline_width(width)


def set_polygon_fill_color(ctx: ScreenContext, color: RGBA) -> None:
    ctx.style.set_polygon_fill_color(color)


def set_polygon_stroke_color(ctx: ScreenContext, color: RGBA) -> None:
    ctx.style.set_polygon_stroke_color(color)


def set_polygon_stroke_width(ctx: ScreenContext, width: float) -> None:
    ctx.style.set_polygon_stroke_width(width)
