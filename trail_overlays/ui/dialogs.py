"""Modal dialogs for the overlay screen.

- Info dialog: title, text and a Close button (trail and park)
- Customization dialog: color swatches and width sliders for both overlays

Dialogs are Streamlit fragments: widget interactions rerun only the dialog.
Style changes are applied in widget callbacks, so the dialog always renders
the current style; the map picks them up on the next full rerun.
"""

import logging
from collections.abc import Callable

import streamlit as st

from trail_overlays.constants import DialogConfig, StyleConfig
from trail_overlays.model.color import RGBA
from trail_overlays.model.dialog import ActiveDialog
from trail_overlays.model.overlay_style import (
    polygon_fill_palette,
    polygon_stroke_palette,
    polyline_palette,
)
from trail_overlays.ui.actions import (
    dismiss_dialog,
    set_polygon_fill_color,
    set_polygon_stroke_color,
    set_polygon_stroke_width,
    set_polyline_color,
    set_polyline_width,
)
from trail_overlays.ui.state_machine import DialogStateMachine, ScreenContext
from trail_overlays.ui.view_tree import DialogSpec

logger = logging.getLogger(__name__)

_COLOR_NAMES = {RGBA.named(name): name for name in StyleConfig.NAMED_COLORS}


def color_label(color: RGBA) -> str:
    """Human-friendly color name, ignoring alpha."""
    return _COLOR_NAMES.get(color.with_alpha(1.0), color.to_hex())


def swatch_html(color: RGBA, selected: bool) -> str:
    """Colored square, with a white inner ring when selected."""
    size = StyleConfig.SWATCH_SIZE_PX
    ring = f"box-shadow: inset 0 0 0 4px {color.to_css()}, inset 0 0 0 8px {StyleConfig.SWATCH_SELECTED_RING};"
    return (
        f'<div style="width: {size}px; height: {size}px; border-radius: 8px; '
        f'background: {color.to_css()}; border: 1px solid #ccc; {ring if selected else ""}"></div>'
    )


# =============================================================================
# DISPATCH
# =============================================================================


def render_dialog(spec: DialogSpec, sm: DialogStateMachine) -> None:
    """Present the dialog described by spec.

    Raises:
        RuntimeError: If spec has no renderer
    """
    if spec.kind.is_info:
        body = _info_dialog_body
    elif spec.kind is ActiveDialog.CUSTOMIZATION:
        body = _customization_dialog_body
    else:
        raise RuntimeError(f"No dialog renderer for '{spec.kind.value}'")

    def on_dismiss() -> None:
        # Closed with X, Escape or a click outside the dialog
        dismiss_dialog(sm=sm, which=spec.kind)

    st.dialog(spec.title, on_dismiss=on_dismiss)(body)(spec=spec, sm=sm)


# =============================================================================
# INFO DIALOG
# =============================================================================


def _info_dialog_body(spec: DialogSpec, sm: DialogStateMachine) -> None:
    st.text(spec.body)
    if st.button(spec.confirm_label, key=f"confirm_{spec.kind.value}"):
        logger.info(f"Closing {spec.kind.value} dialog")
        dismiss_dialog(sm=sm, which=spec.kind)


# =============================================================================
# CUSTOMIZATION DIALOG
# =============================================================================


def _color_row(
    key: str,
    palette: list[RGBA],
    current: RGBA,
    on_select: Callable[[ScreenContext, RGBA], None],
    ctx: ScreenContext,
) -> None:
    """One swatch + button per palette color."""
    columns = st.columns(len(palette))
    for idx, (column, color) in enumerate(zip(columns, palette)):
        selected = color == current
        with column:
            st.markdown(swatch_html(color=color, selected=selected), unsafe_allow_html=True)
            st.button(
                color_label(color),
                key=f"{key}_{idx}",
                type="primary" if selected else "secondary",
                on_click=on_select,
                args=(ctx, color),
            )


def _width_slider(
    key: str,
    label: str,
    value: float,
    minimum: float,
    maximum: float,
    on_change: Callable[[ScreenContext, float], None],
    ctx: ScreenContext,
) -> None:
    """Slider bounded to [minimum, maximum] with a "label: Npx" caption."""

    def _changed() -> None:
        on_change(ctx, st.session_state[key])

    st.write(f"{label}: {int(value)}px")
    st.slider(
        label,
        min_value=minimum,
        max_value=maximum,
        value=value,
        step=1.0,
        key=key,
        on_change=_changed,
        label_visibility="collapsed",
    )


def _customization_dialog_body(spec: DialogSpec, sm: DialogStateMachine) -> None:
    ctx = sm.context
    style = ctx.style

    st.subheader(DialogConfig.POLYLINE_SECTION)
    st.write("Color")
    _color_row(
        key="polyline_color",
        palette=polyline_palette(),
        current=style.polyline.color,
        on_select=lambda c, color: set_polyline_color(ctx=c, color=color),
        ctx=ctx,
    )
    _width_slider(
        key="polyline_width",
        label="Width",
        value=style.polyline.width_px,
        minimum=StyleConfig.POLYLINE_WIDTH_MIN,
        maximum=StyleConfig.POLYLINE_WIDTH_MAX,
        on_change=lambda c, width: set_polyline_width(ctx=c, width=width),
        ctx=ctx,
    )

    st.divider()

    st.subheader(DialogConfig.POLYGON_SECTION)
    st.write("Fill Color")
    _color_row(
        key="polygon_fill",
        palette=polygon_fill_palette(),
        current=style.polygon.fill_color,
        on_select=lambda c, color: set_polygon_fill_color(ctx=c, color=color),
        ctx=ctx,
    )
    st.write("Stroke Color")
    _color_row(
        key="polygon_stroke",
        palette=polygon_stroke_palette(),
        current=style.polygon.stroke_color,
        on_select=lambda c, color: set_polygon_stroke_color(ctx=c, color=color),
        ctx=ctx,
    )
    _width_slider(
        key="polygon_stroke_width",
        label="Stroke Width",
        value=style.polygon.stroke_width_px,
        minimum=StyleConfig.POLYGON_STROKE_WIDTH_MIN,
        maximum=StyleConfig.POLYGON_STROKE_WIDTH_MAX,
        on_change=lambda c, width: set_polygon_stroke_width(ctx=c, width=width),
        ctx=ctx,
    )

    if st.button(spec.confirm_label, key="confirm_customization", type="primary"):
        logger.info(f"Customization done: {ctx.style!r}")
        dismiss_dialog(sm=sm, which=spec.kind)
