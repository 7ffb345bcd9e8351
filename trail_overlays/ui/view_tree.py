"""View tree - pure function from screen state to a renderable scene.

render_scene() holds no state and does no I/O: identical inputs give an
identical Scene. The Scene is then handed to MapRenderer (map surface) and
the dialog renderers (modals). On-click wiring is expressed as state machine
event names so the Scene stays a plain value.
"""

from dataclasses import dataclass

from trail_overlays.constants import DialogConfig
from trail_overlays.model.camera import CameraView, MapSurfaceSettings
from trail_overlays.model.color import RGBA
from trail_overlays.model.dialog import INFO_CONTENT, ActiveDialog
from trail_overlays.model.geo_point import GeoPoint
from trail_overlays.model.overlay_geometry import OverlayGeometry
from trail_overlays.model.overlay_style import StyleState

# State machine events wired to clickable elements
EVENT_OPEN_TRAIL_INFO = "open_trail_info"
EVENT_OPEN_PARK_INFO = "open_park_info"
EVENT_OPEN_CUSTOMIZATION = "open_customization"


@dataclass(frozen=True)
class MapSurfaceSpec:
    camera: CameraView
    zoom_controls_enabled: bool
    my_location_enabled: bool
    my_location: GeoPoint | None = None


@dataclass(frozen=True)
class PolylineSpec:
    points: tuple[GeoPoint, ...]
    color: RGBA
    width_px: float
    clickable: bool
    on_click: str


@dataclass(frozen=True)
class PolygonSpec:
    points: tuple[GeoPoint, ...]
    fill_color: RGBA
    stroke_color: RGBA
    stroke_width_px: float
    clickable: bool
    on_click: str


@dataclass(frozen=True)
class ControlSpec:
    """Floating action control overlaying the map."""

    label: str
    help: str
    on_click: str


@dataclass(frozen=True)
class DialogSpec:
    """A modal dialog.

    Attributes:
        kind: Which dialog this is (never ActiveDialog.NONE)
        title: Dialog title
        body: Info text (empty for the customization dialog)
        confirm_label: Label of the button that dismisses the dialog
    """

    kind: ActiveDialog
    title: str
    body: str
    confirm_label: str


@dataclass(frozen=True)
class Scene:
    """Everything the screen shows for one render cycle."""

    surface: MapSurfaceSpec
    polylines: tuple[PolylineSpec, ...]
    polygons: tuple[PolygonSpec, ...]
    control: ControlSpec
    dialogs: tuple[DialogSpec, ...]

    @property
    def dialog(self) -> DialogSpec | None:
        """The single open dialog, or None."""
        return self.dialogs[0] if self.dialogs else None


def _dialog_spec(active: ActiveDialog) -> DialogSpec | None:
    if active is ActiveDialog.NONE:
        return None
    if active is ActiveDialog.CUSTOMIZATION:
        return DialogSpec(
            kind=active,
            title=DialogConfig.CUSTOMIZATION_TITLE,
            body="",
            confirm_label=DialogConfig.CUSTOMIZATION_CONFIRM_LABEL,
        )
    content = INFO_CONTENT[active]
    return DialogSpec(
        kind=active,
        title=content.title,
        body=content.body,
        confirm_label=DialogConfig.INFO_CONFIRM_LABEL,
    )


def render_scene(
    geometry: OverlayGeometry,
    style: StyleState,
    dialog: ActiveDialog,
    camera: CameraView,
    surface: MapSurfaceSettings | None = None,
    my_location: GeoPoint | None = None,
) -> Scene:
    """Build the scene for the current state.

    Args:
        geometry: Trail and park geometry
        style: Current overlay styles
        dialog: Active dialog (ActiveDialog.NONE for no dialog)
        camera: Initial camera view
        surface: Map switches (defaults from MapConfig)
        my_location: Device location, drawn only when enabled in surface

    Returns:
        Scene with one polyline, one polygon, the settings control and
        zero or one dialog.
    """
    surface = surface or MapSurfaceSettings()

    trail = PolylineSpec(
        points=geometry.trail.points,
        color=style.polyline.color,
        width_px=style.polyline.width_px,
        clickable=True,
        on_click=EVENT_OPEN_TRAIL_INFO,
    )
    park = PolygonSpec(
        points=geometry.park.points,
        fill_color=style.polygon.fill_color,
        stroke_color=style.polygon.stroke_color,
        stroke_width_px=style.polygon.stroke_width_px,
        clickable=True,
        on_click=EVENT_OPEN_PARK_INFO,
    )
    control = ControlSpec(
        label=DialogConfig.FAB_LABEL,
        help=DialogConfig.FAB_HELP,
        on_click=EVENT_OPEN_CUSTOMIZATION,
    )

    dialog_spec = _dialog_spec(dialog)

    return Scene(
        surface=MapSurfaceSpec(
            camera=camera,
            zoom_controls_enabled=surface.zoom_controls_enabled,
            my_location_enabled=surface.my_location_enabled,
            my_location=my_location if surface.my_location_enabled else None,
        ),
        polylines=(trail,),
        polygons=(park,),
        control=control,
        dialogs=(dialog_spec,) if dialog_spec else (),
    )
