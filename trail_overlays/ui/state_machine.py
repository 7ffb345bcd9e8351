"""State machine for the map overlay screen.

Uses python-statemachine for the dialog state with:
- One state per modal, so two dialogs can never be open together
- Guarded dismiss (only the active dialog can be dismissed)
- A listener for Streamlit side effects

Architecture Overview
---------------------
The screen follows Streamlit's rerun model:

1. User action triggers a transition (e.g., click trail -> open_trail_info)
2. StreamlitUIListener fires after_transition and calls st.rerun()
3. On the next render cycle the view tree is rebuilt from ScreenContext
   and the active dialog is presented

Style changes are not transitions. They update ScreenContext.style directly
from widget callbacks; the map shows them once the dialog is dismissed.

States:
    CLOSED: No dialog, map is interactive (initial)
    TRAIL_INFO: "Hiking Trail" info dialog
    PARK_INFO: "Boston Common" info dialog
    CUSTOMIZATION: Overlay colors/widths dialog

Transitions:
    any -> TRAIL_INFO: open_trail_info (click trail)
    any -> PARK_INFO: open_park_info (click park)
    any -> CUSTOMIZATION: open_customization (settings button)
    X -> CLOSED: dismiss(which=X) (Close/Done button or dismissing the modal)

Opening a dialog while another one is open replaces it (latest wins).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import streamlit as st
from statemachine import State, StateMachine
from statemachine.exceptions import TransitionNotAllowed

from trail_overlays.constants import ClickConfig
from trail_overlays.model.camera import CameraView, MapSurfaceSettings
from trail_overlays.model.dialog import ActiveDialog
from trail_overlays.model.geo_point import GeoPoint
from trail_overlays.model.overlay_geometry import OverlayGeometry, default_geometry
from trail_overlays.model.overlay_style import StyleState

logger = logging.getLogger(__name__)


@dataclass
class ClickDeduplicationContext:
    """Click deduplication by tracking the last-seen click key.

    st_deckgl keeps returning its last event on every rerun, so the same
    click would otherwise be processed again after each button press.
    """

    last_click_key: str | None = None

    def is_new_click(self, coord: tuple[float, ...] | None, obj_id: str | None) -> bool:
        """Return True (and remember it) if this click differs from the last one."""
        if coord is None and obj_id is None:
            return False

        key = self.make_key(coord=coord, obj_id=obj_id)
        if key == self.last_click_key:
            logger.debug(f"[CLICK] Duplicate click ignored: {key}")
            return False

        self.last_click_key = key
        return True

    @staticmethod
    def make_key(coord: tuple[float, ...] | None, obj_id: str | None) -> str:
        parts = []
        if obj_id:
            parts.append(obj_id)
        if coord:
            decimals = ClickConfig.CLICK_KEY_DECIMALS
            parts.append(f"{coord[0]:.{decimals}f}_{coord[1]:.{decimals}f}")
        return "@".join(parts)

    def clear(self) -> None:
        """Clear dedup state."""
        self.last_click_key = None


@dataclass
class ScreenContext:
    """Shared context/model for the state machine.

    Holds everything that drives rendering: fixed geometry, current styles,
    initial camera, map surface switches and click bookkeeping.

    Note: The 'state' field is managed by python-statemachine when this
    object is passed as the model. It stores the current state value.
    """

    # State managed by python-statemachine (model pattern)
    state: str | None = None

    geometry: OverlayGeometry = field(default_factory=default_geometry)
    style: StyleState = field(default_factory=StyleState)
    camera: CameraView = field(default_factory=CameraView)
    surface: MapSurfaceSettings = field(default_factory=MapSurfaceSettings)
    my_location: GeoPoint | None = None

    click_dedup: ClickDeduplicationContext = field(default_factory=ClickDeduplicationContext)

    # Bumped to remount the map component and drop its stale click event
    map_version: int = 0

    def __repr__(self) -> str:
        return f"ScreenContext(state={self.state}, style={self.style!r}, map_version={self.map_version})"


class StreamlitUIListener:
    """Listener that triggers a Streamlit rerun after state transitions.

    Keeps the state machine free of UI concerns. Dialogs open and close only
    on a fresh script run, so every transition ends with st.rerun().

    Usage:
        sm = DialogStateMachine(context=context)
        sm.add_listener(StreamlitUIListener())
    """

    def after_transition(self, event: str, source: State, target: State) -> None:
        logger.info(f"[STATE] {source.name} --({event})--> {target.name}")
        st.rerun()


class DialogStateMachine(StateMachine):
    """State machine for the dialog shown over the map.

    See module docstring for complete transition documentation.
    """

    # ==========================================================================
    # State Definitions
    # ==========================================================================

    closed = State("Closed", initial=True)
    trail_info = State("TrailInfo")
    park_info = State("ParkInfo")
    customization = State("Customization")

    # ==========================================================================
    # Transitions: opening (latest wins)
    # ==========================================================================

    open_trail_info = (
        closed.to(trail_info) | trail_info.to.itself() | park_info.to(trail_info) | customization.to(trail_info)
    )
    open_park_info = closed.to(park_info) | park_info.to.itself() | trail_info.to(park_info) | customization.to(park_info)
    open_customization = (
        closed.to(customization)
        | customization.to.itself()
        | trail_info.to(customization)
        | park_info.to(customization)
    )

    # ==========================================================================
    # Transitions: closing
    # ==========================================================================

    dismiss = (
        trail_info.to(closed, cond="is_active_dialog")
        | park_info.to(closed, cond="is_active_dialog")
        | customization.to(closed, cond="is_active_dialog")
    )

    # ==========================================================================
    # Guards (Conditions)
    # ==========================================================================

    def is_active_dialog(self, which: ActiveDialog) -> bool:
        """Guard: Only the dialog that is currently shown can be dismissed."""
        return which == self.active_dialog

    # ==========================================================================
    # State Check Properties
    # ==========================================================================

    _DIALOG_BY_STATE = {
        "closed": ActiveDialog.NONE,
        "trail_info": ActiveDialog.TRAIL_INFO,
        "park_info": ActiveDialog.PARK_INFO,
        "customization": ActiveDialog.CUSTOMIZATION,
    }

    @property
    def active_dialog(self) -> ActiveDialog:
        """The dialog currently presented (NONE when closed)."""
        return self._DIALOG_BY_STATE[self.current_state.id]

    @property
    def is_closed(self) -> bool:
        return self.closed.is_active

    @property
    def show_trail_info(self) -> bool:
        return self.trail_info.is_active

    @property
    def show_park_info(self) -> bool:
        return self.park_info.is_active

    @property
    def show_customization(self) -> bool:
        return self.customization.is_active

    # ==========================================================================
    # Entry Hooks
    # ==========================================================================

    def on_enter_customization(self) -> None:
        logger.info(f"Customization opened with {self.context.style!r}")

    def on_enter_closed(self) -> None:
        # Next click on the same overlay must open its dialog again
        self.context.click_dedup.clear()

    # ==========================================================================
    # Initialization
    # ==========================================================================

    def __init__(self, context: ScreenContext | None = None, start_value: str | None = None) -> None:
        """Initialize state machine with model pattern.

        Args:
            context: Shared context/model (creates new if None)
            start_value: Optional initial state value (for restoring state)
        """
        model = context or ScreenContext()
        super().__init__(model=model, start_value=start_value)

    @property
    def context(self) -> ScreenContext:
        """Alias for model."""
        return self.model

    def get_state_name(self) -> str:
        """Get current state name for display."""
        return self.current_state.name

    def __repr__(self) -> str:
        return f"DialogStateMachine(state={self.get_state_name()}, model={self.context!r})"

    def try_transition(self, event: str, **kwargs: Any) -> bool:
        """Attempt a transition, returning success/failure.

        Args:
            event: Transition event name
            **kwargs: Arguments for transition

        Returns:
            True if transition succeeded, False otherwise.
        """
        try:
            self.send(event, **kwargs)
            return True
        except TransitionNotAllowed:
            logger.warning(f"Transition '{event}' not allowed from {self.get_state_name()}")
            return False

    @staticmethod
    def create(add_ui_listener: bool = True) -> tuple["DialogStateMachine", ScreenContext]:
        """Factory method to create state machine with context and optional UI listener.

        Args:
            add_ui_listener: If True, adds StreamlitUIListener for auto st.rerun().
                             Set to False for testing or non-Streamlit usage.

        Returns:
            Tuple of (DialogStateMachine, ScreenContext)
        """
        context = ScreenContext()
        sm = DialogStateMachine(context=context)
        if add_ui_listener:
            sm.add_listener(StreamlitUIListener())
            logger.info("Created DialogStateMachine with StreamlitUIListener")
        else:
            logger.info("Created DialogStateMachine without UI listener")
        return sm, context
