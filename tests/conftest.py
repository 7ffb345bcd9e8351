"""Shared pytest fixtures for trail_overlays tests.

State machines are created WITHOUT the Streamlit UI listener, so transitions
run synchronously and never call st.rerun().

COORDINATES:
    Fixtures use the Boston Common geometry from OverlayConfig unless a test
    needs a smaller shape; hand-made shapes are a few hundred meters across.
"""

import pytest

from trail_overlays.model.camera import CameraView
from trail_overlays.model.overlay_geometry import OverlayGeometry, ParkBoundary, Trail, default_geometry
from trail_overlays.model.overlay_style import StyleState
from trail_overlays.ui.state_machine import (
    ClickDeduplicationContext,
    DialogStateMachine,
    ScreenContext,
)
from trail_overlays.ui.view_tree import Scene, render_scene


@pytest.fixture
def geometry() -> OverlayGeometry:
    """Boston Common trail (6 points) and park rectangle (4 points)."""
    return default_geometry()


@pytest.fixture
def small_geometry() -> OverlayGeometry:
    """Two-point trail inside a triangle park: the smallest valid shapes."""
    return OverlayGeometry(
        trail=Trail.from_lat_lons([(42.3600, -71.0600), (42.3620, -71.0580)]),
        park=ParkBoundary.from_lat_lons([(42.3590, -71.0610), (42.3630, -71.0610), (42.3610, -71.0570)]),
    )


@pytest.fixture
def style() -> StyleState:
    """Default styles: blue 10px trail, green park with 5px stroke."""
    return StyleState()


@pytest.fixture
def camera() -> CameraView:
    return CameraView()


@pytest.fixture
def dedup() -> ClickDeduplicationContext:
    """Fresh dedup context for each test."""
    return ClickDeduplicationContext()


@pytest.fixture
def state_machine_and_context() -> tuple[DialogStateMachine, ScreenContext]:
    """Fresh DialogStateMachine in CLOSED with default context."""
    return DialogStateMachine.create(add_ui_listener=False)


@pytest.fixture
def current_scene():
    """Build the scene for a state machine, the way app.py does each rerun."""

    def _scene(sm: DialogStateMachine) -> Scene:
        ctx = sm.context
        return render_scene(
            geometry=ctx.geometry,
            style=ctx.style,
            dialog=sm.active_dialog,
            camera=ctx.camera,
            surface=ctx.surface,
            my_location=ctx.my_location,
        )

    return _scene
