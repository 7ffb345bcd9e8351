"""User interface components for the map overlay screen.

File Structure:
- view_tree.py: Pure render_scene() from state to Scene
- center_map.py: Pydeck map with the trail and park layers
- dialogs.py: Info and customization modals
- basemap.py: OpenStreetMap raster style for the base map

Core Components:
- state_machine.py: DialogStateMachine (4 states) + ScreenContext
- actions.py: All action functions (open/dismiss dialogs, style setters)
- click_detector.py / pydeck_click_handler.py: deck.gl click events to ClickInfo
- click_handlers.py: Overlay click dispatch
"""

from trail_overlays.ui.actions import (
    bump_map_version,
    dismiss_dialog,
    open_customization,
    open_park_info,
    open_trail_info,
    set_polygon_fill_color,
    set_polygon_stroke_color,
    set_polygon_stroke_width,
    set_polyline_color,
    set_polyline_width,
)
from trail_overlays.ui.center_map import MapRenderer
from trail_overlays.ui.click_detector import ClickDetector
from trail_overlays.ui.click_handlers import dispatch_click
from trail_overlays.ui.dialogs import render_dialog
from trail_overlays.ui.state_machine import (
    DialogStateMachine,
    ScreenContext,
    StreamlitUIListener,
)
from trail_overlays.ui.view_tree import Scene, render_scene

__all__ = [
    "DialogStateMachine",
    "ScreenContext",
    "StreamlitUIListener",
    "MapRenderer",
    "ClickDetector",
    "Scene",
    "render_scene",
    "render_dialog",
    "dispatch_click",
    "bump_map_version",
    "dismiss_dialog",
    "open_customization",
    "open_park_info",
    "open_trail_info",
    "set_polygon_fill_color",
    "set_polygon_stroke_color",
    "set_polygon_stroke_width",
    "set_polyline_color",
    "set_polyline_width",
]
