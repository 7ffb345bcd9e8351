"""MapRenderer - Pydeck map rendering for the overlay screen.

Turns a Scene into a pdk.Deck:
- Park boundary as a filled, stroked polygon (PolygonLayer)
- Hiking trail as a wide line (PathLayer)
- Device location marker when enabled and known (ScatterplotLayer)

Key conventions:
- Uses [lon, lat] coordinate order (GeoJSON standard)
- Colors as RGBA lists [R, G, B, A] (0-255)
- Widths in pixels (width_units / line_width_units = "pixels")
- Every pickable row carries "type" so clicks can be identified
"""

import logging
from dataclasses import dataclass, field
from typing import Any

import pydeck as pdk

from trail_overlays.constants import ClickConfig, MapConfig, OverlayConfig
from trail_overlays.model.overlay_geometry import ParkBoundary
from trail_overlays.ui.basemap import MAP_PROVIDER, OSM_STYLE
from trail_overlays.ui.view_tree import MapSurfaceSpec, PolygonSpec, PolylineSpec, Scene

logger = logging.getLogger(__name__)


@dataclass
class LayerCollection:
    """Manages Pydeck layers with correct z-ordering.

    Z-order (back to front): polygons → polylines → markers

    Polylines come after polygons so the trail stays visible on top of the
    park fill and wins picking where both overlap.
    """

    polygons: list[pdk.Layer] = field(default_factory=list)
    polylines: list[pdk.Layer] = field(default_factory=list)
    markers: list[pdk.Layer] = field(default_factory=list)

    def get_ordered_layers(self) -> list[pdk.Layer]:
        """Return all layers in correct z-order (back to front)."""
        return self.polygons + self.polylines + self.markers


class MapRenderer:
    """Renders a Scene on a Pydeck map.

    Example:
        renderer = MapRenderer()
        deck = renderer.render(scene=scene)
    """

    def render(self, scene: Scene) -> pdk.Deck:
        """Render the map part of a scene.

        Args:
            scene: Scene from render_scene()

        Returns:
            pdk.Deck object ready for display.
        """
        layer_collection = LayerCollection()

        for polygon in scene.polygons:
            layer_collection.polygons.append(self._create_polygon_layer(spec=polygon))
        for polyline in scene.polylines:
            layer_collection.polylines.append(self._create_polyline_layer(spec=polyline))

        location_layer = self._create_my_location_layer(surface=scene.surface)
        if location_layer is not None:
            layer_collection.markers.append(location_layer)

        layers = layer_collection.get_ordered_layers()
        logger.debug(f"[RENDER] Deck with layers {[layer.id for layer in layers]}")

        return pdk.Deck(
            map_style=OSM_STYLE,
            map_provider=MAP_PROVIDER,
            initial_view_state=self.get_view_state(surface=scene.surface),
            views=[self.get_map_view(surface=scene.surface)],
            layers=layers,
            tooltip=self._create_tooltip_config(),
            parameters={"pickingRadius": ClickConfig.PICKING_RADIUS_PX},
        )

    # =========================================================================
    # CAMERA
    # =========================================================================

    @staticmethod
    def get_view_state(surface: MapSurfaceSpec) -> pdk.ViewState:
        """Create Pydeck ViewState from the scene camera (top-down, north up)."""
        return pdk.ViewState(
            latitude=surface.camera.center.lat,
            longitude=surface.camera.center.lon,
            zoom=surface.camera.zoom,
            pitch=0,
            bearing=0,
        )

    @staticmethod
    def get_map_view(surface: MapSurfaceSpec) -> pdk.View:
        """MapView whose controller honours the zoom controls switch."""
        zoom_enabled = surface.zoom_controls_enabled
        return pdk.View(
            type="MapView",
            controller={
                "dragPan": True,
                "scrollZoom": zoom_enabled,
                "doubleClickZoom": zoom_enabled,
                "touchZoom": zoom_enabled,
                "keyboard": zoom_enabled,
                "dragRotate": False,
            },
        )

    # =========================================================================
    # LAYER DATA
    # =========================================================================

    @staticmethod
    def polyline_data(spec: PolylineSpec) -> list[dict[str, Any]]:
        """Rows for the trail PathLayer."""
        return [
            {
                "type": ClickConfig.TYPE_TRAIL,
                "id": ClickConfig.TYPE_TRAIL,
                "name": OverlayConfig.TRAIL_NAME,
                "path": [list(p.lon_lat) for p in spec.points],
                "color": spec.color.to_pydeck(),
                "width": spec.width_px,
            }
        ]

    @staticmethod
    def polygon_data(spec: PolygonSpec) -> list[dict[str, Any]]:
        """Rows for the park PolygonLayer (ring closed explicitly)."""
        ring = [list(p.lon_lat) for p in ParkBoundary(points=spec.points).closed_ring()]
        return [
            {
                "type": ClickConfig.TYPE_PARK,
                "id": ClickConfig.TYPE_PARK,
                "name": OverlayConfig.PARK_NAME,
                "polygon": ring,
                "fill_color": spec.fill_color.to_pydeck(),
                "line_color": spec.stroke_color.to_pydeck(),
                "line_width": spec.stroke_width_px,
            }
        ]

    # =========================================================================
    # LAYERS
    # =========================================================================

    def _create_polyline_layer(self, spec: PolylineSpec) -> pdk.Layer:
        return pdk.Layer(
            "PathLayer",
            self.polyline_data(spec=spec),
            get_path="path",
            get_color="color",
            get_width="width",
            width_units="pixels",
            cap_rounded=True,
            joint_rounded=True,
            pickable=spec.clickable,
            auto_highlight=spec.clickable,
            highlight_color=[255, 255, 255, 80],
            id=ClickConfig.LAYER_ID_TRAIL,
        )

    def _create_polygon_layer(self, spec: PolygonSpec) -> pdk.Layer:
        return pdk.Layer(
            "PolygonLayer",
            self.polygon_data(spec=spec),
            get_polygon="polygon",
            get_fill_color="fill_color",
            get_line_color="line_color",
            get_line_width="line_width",
            line_width_units="pixels",
            filled=True,
            stroked=True,
            pickable=spec.clickable,
            auto_highlight=spec.clickable,
            highlight_color=[255, 255, 255, 60],
            id=ClickConfig.LAYER_ID_PARK,
        )

    def _create_my_location_layer(self, surface: MapSurfaceSpec) -> pdk.Layer | None:
        """Blue dot at the device location, only when enabled and known."""
        if not surface.my_location_enabled or surface.my_location is None:
            return None

        location = surface.my_location
        return pdk.Layer(
            "ScatterplotLayer",
            [{"position": list(location.lon_lat), "name": "My Location"}],
            get_position="position",
            get_radius=MapConfig.MY_LOCATION_RADIUS_PX,
            radius_units="pixels",
            get_fill_color=MapConfig.MY_LOCATION_COLOR,
            get_line_color=[255, 255, 255, 255],
            stroked=True,
            line_width_min_pixels=2,
            pickable=False,
            id=ClickConfig.LAYER_ID_MY_LOCATION,
        )

    # =========================================================================
    # TOOLTIP CONFIGURATION
    # =========================================================================

    def _create_tooltip_config(self) -> dict[str, str | dict[str, str]]:
        """Create Pydeck tooltip configuration - name only, details in dialogs."""
        return {
            "html": "<b>{name}</b>",
            "style": {
                "backgroundColor": "rgba(255, 255, 255, 0.95)",
                "color": "#333",
                "padding": "6px 10px",
                "borderRadius": "4px",
            },
        }
