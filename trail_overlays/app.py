"""Trail Overlays - Interactive map with a hiking trail and a park boundary.

Shows a trail polyline and a park polygon over Boston Common. Clicking an
overlay opens its info dialog; the settings button opens a dialog to change
overlay colors and widths.

Run: streamlit run trail_overlays/app.py
"""

import logging
import traceback

import streamlit as st

from trail_overlays.constants import AppConfig, MapConfig
from trail_overlays.ui import (
    ClickDetector,
    DialogStateMachine,
    MapRenderer,
    ScreenContext,
    StreamlitUIListener,
    dispatch_click,
    render_dialog,
    render_scene,
)
from trail_overlays.ui.pydeck_click_handler import render_pydeck_map

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


# =============================================================================
# SESSION STATE
# =============================================================================


def init_session_state() -> None:
    """Initialize session state with the state machine and map renderer."""
    if "state_machine" not in st.session_state:
        sm, ctx = DialogStateMachine.create()
        st.session_state.state_machine = sm
        st.session_state.context = ctx

    if "map_renderer" not in st.session_state:
        st.session_state.map_renderer = MapRenderer()


def reset_ui_state() -> None:
    """Close any dialog while preserving the overlay styles.

    Called when an error occurs to recover gracefully. The state machine is
    recreated on the existing context, so colors and widths survive.
    """
    logger.info("Resetting UI state due to error recovery")

    ctx: ScreenContext = st.session_state.context
    ctx.state = None
    ctx.click_dedup.clear()
    ctx.map_version += 1

    sm = DialogStateMachine(context=ctx)
    sm.add_listener(StreamlitUIListener())
    st.session_state.state_machine = sm

    logger.info(f"UI state reset complete - styles preserved: {ctx.style!r}")


# =============================================================================
# MAIN
# =============================================================================


def main() -> None:
    """Application entry point."""
    st.set_page_config(page_title=AppConfig.TITLE, page_icon=AppConfig.ICON, layout=AppConfig.LAYOUT)
    init_session_state()

    col_title, col_fab = st.columns([12, 1], vertical_alignment="bottom")
    with col_title:
        st.title(AppConfig.TITLE)

    try:
        _run_app_ui(fab_container=col_fab)
    except Exception as e:
        error_msg = f"{type(e).__name__}: {e}"
        full_traceback = traceback.format_exc()
        logger.error(f"[UI] UI error caught: {error_msg}\n{full_traceback}")

        st.error(f"⚠️ [UI] Something went wrong: {error_msg}")

        reset_ui_state()

        if st.button("🔄 Reset and Continue", type="primary"):
            st.rerun()


def _run_app_ui(fab_container) -> None:
    """Run the main application UI. Separated for error handling wrapper."""
    sm: DialogStateMachine = st.session_state.state_machine
    ctx: ScreenContext = st.session_state.context
    renderer: MapRenderer = st.session_state.map_renderer

    logger.info(f"[RENDER] Render cycle starting: state={sm.get_state_name()}, map_version={ctx.map_version}")

    scene = render_scene(
        geometry=ctx.geometry,
        style=ctx.style,
        dialog=sm.active_dialog,
        camera=ctx.camera,
        surface=ctx.surface,
        my_location=ctx.my_location,
    )

    with fab_container:
        if st.button(scene.control.label, key="fab_customize", help=scene.control.help):
            sm.try_transition(scene.control.on_click)

    deck = renderer.render(scene=scene)
    click_result = render_pydeck_map(
        deck=deck,
        key=f"main_map_{ctx.map_version}",
        height=MapConfig.MAP_HEIGHT_PX,
    )

    detector = ClickDetector(dedup=ctx.click_dedup)
    click_info = detector.detect(
        clicked_object=click_result.clicked_object,
        clicked_coordinate=click_result.clicked_coordinate,
    )
    if click_info:
        dispatch_click(click_info=click_info, sm=sm, scene=scene)

    if scene.dialog is not None:
        render_dialog(spec=scene.dialog, sm=sm)


if __name__ == "__main__":
    main()
