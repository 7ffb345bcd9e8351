"""Tests for trail_overlays data model classes.

Tests: GeoPoint, RGBA, Trail, ParkBoundary, OverlayGeometry, BoundedWidth,
PolylineStyle, PolygonStyle, StyleState, palettes, CameraView, ActiveDialog
Focus: Validation, immutability, clamping, setters touching only one field

Note: Fixtures are defined in conftest.py.
"""

import dataclasses
import logging

import pytest
from hypothesis import given, settings, strategies as st

from trail_overlays.constants import DialogConfig, OverlayConfig, StyleConfig
from trail_overlays.model.camera import CameraView, MapSurfaceSettings
from trail_overlays.model.color import RGBA
from trail_overlays.model.dialog import INFO_CONTENT, ActiveDialog
from trail_overlays.model.geo_point import GeoPoint
from trail_overlays.model.overlay_geometry import OverlayGeometry, ParkBoundary, Trail
from trail_overlays.model.overlay_style import (
    BoundedWidth,
    PolygonStyle,
    PolylineStyle,
    StyleState,
    polygon_fill_palette,
    polygon_stroke_palette,
    polyline_palette,
)


class TestGeoPoint:
    """GeoPoint - coordinate atom."""

    def test_creation_and_tuples(self) -> None:
        p = GeoPoint(lat=42.3601, lon=-71.0589)
        assert p.lat_lon == (42.3601, -71.0589)
        assert p.lon_lat == (-71.0589, 42.3601)

    def test_is_frozen(self) -> None:
        p = GeoPoint(lat=42.0, lon=-71.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.lat = 43.0  # type: ignore[misc]

    @pytest.mark.parametrize(
        "lat,lon",
        [
            (91.0, 0.0),
            (-90.5, 0.0),
            (0.0, 180.1),
            (0.0, -181.0),
            (float("nan"), 0.0),
            (0.0, float("inf")),
        ],
    )
    def test_invalid_coordinates_rejected(self, lat: float, lon: float) -> None:
        with pytest.raises(ValueError):
            GeoPoint(lat=lat, lon=lon)

    def test_bounds_inclusive(self) -> None:
        GeoPoint(lat=90.0, lon=180.0)
        GeoPoint(lat=-90.0, lon=-180.0)

    def test_equality_by_value(self) -> None:
        assert GeoPoint(lat=1.0, lon=2.0) == GeoPoint(lat=1.0, lon=2.0)


class TestRGBA:
    """RGBA - overlay color value."""

    def test_named_color(self) -> None:
        red = RGBA.named("Red")
        assert (red.r, red.g, red.b, red.a) == (255, 0, 0, 1.0)

    def test_named_with_alpha(self) -> None:
        green = RGBA.named("Green", alpha=0.3)
        assert green.a == 0.3

    def test_unknown_name_raises(self) -> None:
        with pytest.raises(KeyError):
            RGBA.named("Orange")

    @pytest.mark.parametrize("kwargs", [{"r": 256, "g": 0, "b": 0}, {"r": 0, "g": -1, "b": 0}, {"r": 0, "g": 0, "b": 0, "a": 1.5}])
    def test_out_of_range_channels_rejected(self, kwargs: dict) -> None:
        with pytest.raises(ValueError):
            RGBA(**kwargs)

    def test_to_pydeck_scales_alpha(self) -> None:
        assert RGBA(r=0, g=255, b=0, a=0.3).to_pydeck() == [0, 255, 0, 76]
        assert RGBA(r=0, g=0, b=255).to_pydeck() == [0, 0, 255, 255]

    def test_hex_and_css(self) -> None:
        c = RGBA(r=255, g=0, b=255, a=0.5)
        assert c.to_hex() == "#FF00FF"
        assert c.to_css() == "rgba(255, 0, 255, 0.5)"

    def test_with_alpha_changes_only_alpha(self) -> None:
        c = RGBA.named("Cyan").with_alpha(0.3)
        assert (c.r, c.g, c.b, c.a) == (0, 255, 255, 0.3)

    def test_equality_includes_alpha(self) -> None:
        assert RGBA.named("Green") != RGBA.named("Green", alpha=0.3)


class TestOverlayGeometry:
    """Trail and ParkBoundary - fixed overlay shapes."""

    def test_default_geometry_sizes(self, geometry: OverlayGeometry) -> None:
        assert len(geometry.trail) == len(OverlayConfig.TRAIL_POINTS)
        assert len(geometry.park) == len(OverlayConfig.PARK_BOUNDARY_POINTS)

    def test_trail_keeps_order(self, geometry: OverlayGeometry) -> None:
        assert [p.lat_lon for p in geometry.trail.points] == OverlayConfig.TRAIL_POINTS

    def test_trail_copies_caller_list(self) -> None:
        """Clearing the list a Trail was built from leaves the Trail intact."""
        pts = [GeoPoint(lat=42.3600, lon=-71.0600), GeoPoint(lat=42.3620, lon=-71.0580)]
        trail = Trail(points=pts)  # type: ignore[arg-type]
        pts.clear()
        assert len(trail) == 2
        assert isinstance(trail.points, tuple)

    def test_park_copies_caller_list(self) -> None:
        pts = [GeoPoint(lat=0.0, lon=0.0), GeoPoint(lat=0.0, lon=1.0), GeoPoint(lat=1.0, lon=1.0)]
        park = ParkBoundary(points=pts)  # type: ignore[arg-type]
        pts.append(GeoPoint(lat=1.0, lon=0.0))
        assert len(park) == 3

    def test_non_geopoint_rejected(self) -> None:
        with pytest.raises(TypeError, match="must be a GeoPoint"):
            Trail(points=(GeoPoint(lat=0.0, lon=0.0), (1.0, 1.0)))  # type: ignore[arg-type]

    def test_trail_needs_two_points(self) -> None:
        with pytest.raises(ValueError, match="at least 2"):
            Trail.from_lat_lons([(42.36, -71.06)])

    def test_park_needs_three_points(self) -> None:
        with pytest.raises(ValueError, match="at least 3"):
            ParkBoundary.from_lat_lons([(42.36, -71.06), (42.37, -71.06)])

    def test_smallest_valid_shapes(self, small_geometry: OverlayGeometry) -> None:
        assert len(small_geometry.trail) == 2
        assert len(small_geometry.park) == 3

    def test_park_ring_is_closed(self, geometry: OverlayGeometry) -> None:
        ring = geometry.park.closed_ring()
        assert ring[0] == ring[-1]
        assert len(ring) == len(geometry.park) + 1

    def test_already_closed_ring_not_duplicated(self) -> None:
        pts = [(0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (0.0, 0.0)]
        park = ParkBoundary.from_lat_lons(pts)
        assert len(park.closed_ring()) == 4

    def test_geometry_is_frozen(self, geometry: OverlayGeometry) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            geometry.trail = geometry.trail  # type: ignore[misc]


class TestBoundedWidth:
    """BoundedWidth - width that never leaves its range."""

    def test_value_in_range(self) -> None:
        w = BoundedWidth(value=10.0, minimum=5.0, maximum=30.0)
        assert float(w) == 10.0

    def test_direct_out_of_range_rejected(self) -> None:
        with pytest.raises(ValueError):
            BoundedWidth(value=31.0, minimum=5.0, maximum=30.0)

    def test_inverted_range_rejected(self) -> None:
        with pytest.raises(ValueError, match="Invalid range"):
            BoundedWidth(value=5.0, minimum=10.0, maximum=5.0)

    @pytest.mark.parametrize("value,expected", [(0.0, 5.0), (4.9, 5.0), (5.0, 5.0), (30.0, 30.0), (100.0, 30.0)])
    def test_clamped(self, value: float, expected: float) -> None:
        assert BoundedWidth.clamped(value=value, minimum=5.0, maximum=30.0).value == expected

    def test_clamped_rejects_nan(self) -> None:
        with pytest.raises(ValueError, match="finite"):
            BoundedWidth.clamped(value=float("nan"), minimum=5.0, maximum=30.0)

    def test_with_value_keeps_range(self) -> None:
        w = BoundedWidth(value=5.0, minimum=2.0, maximum=15.0).with_value(20.0)
        assert (w.value, w.minimum, w.maximum) == (15.0, 2.0, 15.0)


class TestDefaultStyles:
    """Styles at startup."""

    def test_polyline_defaults(self) -> None:
        s = PolylineStyle()
        assert s.color == RGBA.named("Blue")
        assert s.width_px == 10.0

    def test_polygon_defaults(self) -> None:
        s = PolygonStyle()
        assert s.fill_color == RGBA.named("Green", alpha=StyleConfig.FILL_ALPHA)
        assert s.stroke_color == RGBA.named("Green")
        assert s.stroke_width_px == 5.0

    def test_palettes(self) -> None:
        assert polyline_palette() == [RGBA.named(n) for n in ("Blue", "Red", "Green", "Magenta")]
        assert [c.a for c in polygon_fill_palette()] == [0.3, 0.3, 0.3]
        assert polygon_stroke_palette()[-1] == RGBA.named("Black")

    def test_defaults_are_in_palettes(self, style: StyleState) -> None:
        assert style.polyline.color in polyline_palette()
        assert style.polygon.fill_color in polygon_fill_palette()
        assert style.polygon.stroke_color in polygon_stroke_palette()


class TestStyleState:
    """StyleState setters - each changes exactly one field."""

    def test_set_polyline_color(self, style: StyleState) -> None:
        before = style.polygon
        style.set_polyline_color(RGBA.named("Red"))
        assert style.polyline.color == RGBA.named("Red")
        assert style.polyline.width_px == 10.0
        assert style.polygon == before

    def test_set_polygon_fill_keeps_stroke(self, style: StyleState) -> None:
        style.set_polygon_fill_color(RGBA.named("Yellow", alpha=0.3))
        assert style.polygon.fill_color == RGBA.named("Yellow", alpha=0.3)
        assert style.polygon.stroke_color == RGBA.named("Green")

    def test_set_polygon_stroke_color(self, style: StyleState) -> None:
        before = style.polyline
        style.set_polygon_stroke_color(RGBA.named("Black"))
        assert style.polygon.stroke_color == RGBA.named("Black")
        assert style.polyline == before

    def test_set_polygon_stroke_width_clamped(self, style: StyleState) -> None:
        style.set_polygon_stroke_width(1.0)
        assert style.polygon.stroke_width_px == StyleConfig.POLYGON_STROKE_WIDTH_MIN
        style.set_polygon_stroke_width(99.0)
        assert style.polygon.stroke_width_px == StyleConfig.POLYGON_STROKE_WIDTH_MAX

    def test_clamping_logs_warning(self, style: StyleState, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            style.set_polyline_width(50.0)
        assert "clamped" in caplog.text

    def test_in_range_width_no_warning(self, style: StyleState, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            style.set_polyline_width(20.0)
        assert caplog.text == ""

    @given(width=st.floats(min_value=StyleConfig.POLYLINE_WIDTH_MIN, max_value=StyleConfig.POLYLINE_WIDTH_MAX))
    @settings(max_examples=50)
    def test_polyline_width_in_range_is_exact(self, width: float) -> None:
        """Any width inside the slider range is stored unchanged."""
        style = StyleState()
        style.set_polyline_width(width)
        assert style.polyline.width_px == width

    @given(width=st.floats(allow_nan=False, allow_infinity=False))
    @settings(max_examples=50)
    def test_polyline_width_never_leaves_range(self, width: float) -> None:
        style = StyleState()
        style.set_polyline_width(width)
        assert StyleConfig.POLYLINE_WIDTH_MIN <= style.polyline.width_px <= StyleConfig.POLYLINE_WIDTH_MAX


class TestCameraAndSurface:
    def test_camera_defaults(self) -> None:
        cam = CameraView()
        assert cam.center.lat_lon == (42.3635, -71.0585)
        assert cam.zoom == 14.0

    @pytest.mark.parametrize("zoom", [-1.0, float("nan"), float("inf")])
    def test_invalid_zoom_rejected(self, zoom: float) -> None:
        with pytest.raises(ValueError, match="Zoom must be finite"):
            CameraView(zoom=zoom)

    def test_surface_defaults(self) -> None:
        surface = MapSurfaceSettings()
        assert surface.zoom_controls_enabled is True
        assert surface.my_location_enabled is False


class TestActiveDialog:
    def test_is_open(self) -> None:
        assert not ActiveDialog.NONE.is_open
        assert all(d.is_open for d in ActiveDialog if d is not ActiveDialog.NONE)

    def test_is_info(self) -> None:
        assert ActiveDialog.TRAIL_INFO.is_info
        assert ActiveDialog.PARK_INFO.is_info
        assert not ActiveDialog.CUSTOMIZATION.is_info

    def test_info_content(self) -> None:
        assert INFO_CONTENT[ActiveDialog.TRAIL_INFO].title == "Hiking Trail"
        assert INFO_CONTENT[ActiveDialog.PARK_INFO].title == "Boston Common"
        assert "Distance: 2.3 miles" in INFO_CONTENT[ActiveDialog.TRAIL_INFO].body
        assert "Established: 1634" in INFO_CONTENT[ActiveDialog.PARK_INFO].body
        assert INFO_CONTENT[ActiveDialog.PARK_INFO].body == DialogConfig.PARK_INFO
