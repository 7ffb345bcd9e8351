"""Configuration constants for Trail Overlays.

All configurable parameters are centralized here for easy tuning.

Classes:
    AppConfig: UI application settings
    MapConfig: Default map view and map surface parameters
    OverlayConfig: Trail and park boundary coordinates
    StyleConfig: Named colors, default styles, palettes and width ranges
    ClickConfig: Picked object types and picking radius
    DialogConfig: Dialog titles, texts and button labels
"""


class AppConfig:
    """UI application settings."""

    TITLE = "Map Overlays - Boston Common"
    ICON = "🗺️"
    LAYOUT = "wide"


class MapConfig:
    """Default map view parameters."""

    # Initial camera: Boston Common
    START_CENTER_LAT = 42.3635
    START_CENTER_LON = -71.0585
    DEFAULT_ZOOM = 14.0  # Higher number = more zoomed in

    # Map surface switches
    ZOOM_CONTROLS_ENABLED = True
    MY_LOCATION_ENABLED = False

    MAP_HEIGHT_PX = 600

    # Device location marker (only drawn when location is enabled and known)
    MY_LOCATION_RADIUS_PX = 8
    MY_LOCATION_COLOR = [66, 133, 244, 255]


class OverlayConfig:
    """Overlay geometry as (lat, lon) pairs."""

    # Path through Boston Common, start to end
    TRAIL_POINTS = [
        (42.3601, -71.0589),
        (42.3615, -71.0600),
        (42.3630, -71.0610),
        (42.3645, -71.0605),
        (42.3660, -71.0595),
        (42.3670, -71.0580),
    ]

    # Rectangular park outline: bottom left, top left, top right, bottom right
    PARK_BOUNDARY_POINTS = [
        (42.3590, -71.0620),
        (42.3680, -71.0620),
        (42.3680, -71.0550),
        (42.3590, -71.0550),
    ]

    MIN_TRAIL_POINTS = 2
    MIN_PARK_POINTS = 3

    TRAIL_NAME = "Hiking Trail"
    PARK_NAME = "Boston Common"


assert len(OverlayConfig.TRAIL_POINTS) >= OverlayConfig.MIN_TRAIL_POINTS
assert len(OverlayConfig.PARK_BOUNDARY_POINTS) >= OverlayConfig.MIN_PARK_POINTS


class StyleConfig:
    """Overlay colors, palettes and width ranges.

    Colors are (r, g, b) tuples with 0-255 channels. Alpha is kept separately
    as a 0.0-1.0 float, matching how the palettes are described to users.
    """

    NAMED_COLORS = {
        "Blue": (0, 0, 255),
        "Red": (255, 0, 0),
        "Green": (0, 255, 0),
        "Magenta": (255, 0, 255),
        "Yellow": (255, 255, 0),
        "Cyan": (0, 255, 255),
        "Black": (0, 0, 0),
    }

    # Alpha used for all polygon fill options
    FILL_ALPHA = 0.3

    # Palettes in display order (names from NAMED_COLORS)
    POLYLINE_COLORS = ["Blue", "Red", "Green", "Magenta"]
    POLYGON_FILL_COLORS = ["Green", "Yellow", "Cyan"]  # Rendered at FILL_ALPHA
    POLYGON_STROKE_COLORS = ["Green", "Yellow", "Cyan", "Black"]

    # Width ranges in pixels (slider bounds)
    POLYLINE_WIDTH_MIN = 5.0
    POLYLINE_WIDTH_MAX = 30.0
    POLYGON_STROKE_WIDTH_MIN = 2.0
    POLYGON_STROKE_WIDTH_MAX = 15.0

    # Defaults
    DEFAULT_POLYLINE_COLOR = "Blue"
    DEFAULT_POLYLINE_WIDTH = 10.0
    DEFAULT_POLYGON_FILL_COLOR = "Green"  # At FILL_ALPHA
    DEFAULT_POLYGON_STROKE_COLOR = "Green"
    DEFAULT_POLYGON_STROKE_WIDTH = 5.0

    # Swatch rendering in the customization dialog
    SWATCH_SIZE_PX = 40
    SWATCH_SELECTED_RING = "#FFFFFF"


assert set(StyleConfig.POLYLINE_COLORS) <= set(StyleConfig.NAMED_COLORS)
assert set(StyleConfig.POLYGON_FILL_COLORS) <= set(StyleConfig.NAMED_COLORS)
assert set(StyleConfig.POLYGON_STROKE_COLORS) <= set(StyleConfig.NAMED_COLORS)
assert StyleConfig.DEFAULT_POLYLINE_COLOR in StyleConfig.POLYLINE_COLORS
assert StyleConfig.DEFAULT_POLYGON_FILL_COLOR in StyleConfig.POLYGON_FILL_COLORS
assert StyleConfig.DEFAULT_POLYGON_STROKE_COLOR in StyleConfig.POLYGON_STROKE_COLORS
assert StyleConfig.POLYLINE_WIDTH_MIN <= StyleConfig.DEFAULT_POLYLINE_WIDTH <= StyleConfig.POLYLINE_WIDTH_MAX
assert (
    StyleConfig.POLYGON_STROKE_WIDTH_MIN
    <= StyleConfig.DEFAULT_POLYGON_STROKE_WIDTH
    <= StyleConfig.POLYGON_STROKE_WIDTH_MAX
)


class ClickConfig:
    """Click detection configuration.

    Every pickable layer puts a "type" field on its data rows so that picked
    objects can be identified from the deck.gl click event.
    """

    TYPE_TRAIL = "trail"
    TYPE_PARK = "park"

    LAYER_ID_TRAIL = "trail_polyline"
    LAYER_ID_PARK = "park_polygon"
    LAYER_ID_MY_LOCATION = "my_location"

    # Extra pixels around thin lines that still count as a hit
    PICKING_RADIUS_PX = 8

    # Decimal places for click key generation (5 decimals ≈ 1m)
    CLICK_KEY_DECIMALS = 5


class DialogConfig:
    """Dialog titles, texts and button labels."""

    TRAIL_TITLE = OverlayConfig.TRAIL_NAME
    TRAIL_INFO = (
        "Freedom Trail Extension\n"
        "\n"
        "Distance: 2.3 miles\n"
        "Difficulty: Easy\n"
        "Duration: ~45 minutes\n"
        "\n"
        "This scenic trail winds through historic Boston Common, offering beautiful views "
        "and easy walking paths suitable for all skill levels."
    )

    PARK_TITLE = OverlayConfig.PARK_NAME
    PARK_INFO = (
        "America's Oldest Public Park\n"
        "\n"
        "Established: 1634\n"
        "Area: 50 acres\n"
        "Features:\n"
        "• Central Plaza\n"
        "• Frog Pond\n"
        "• Historic monuments\n"
        "• Seasonal activities\n"
        "\n"
        "Boston Common is the starting point of the Freedom Trail and hosts numerous events "
        "throughout the year."
    )

    CUSTOMIZATION_TITLE = "Customize Overlays"
    POLYLINE_SECTION = "Trail (Polyline)"
    POLYGON_SECTION = "Park (Polygon)"

    INFO_CONFIRM_LABEL = "Close"
    CUSTOMIZATION_CONFIRM_LABEL = "Done"

    FAB_LABEL = "⚙️"
    FAB_HELP = "Customize overlay colors and widths"
