"""Overlay styling - colors and widths for the trail and the park.

BoundedWidth carries its own range so a width can never leave it: the
clamped() factory pulls values into range, direct construction with an
out-of-range value fails.

StyleState is the single writer of overlay styles. Each setter swaps in a
new frozen style value and leaves every other field untouched.
"""

import logging
from dataclasses import dataclass, field, replace

import numpy as np

from trail_overlays.constants import StyleConfig
from trail_overlays.model.color import RGBA

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoundedWidth:
    """Width in pixels constrained to [minimum, maximum]."""

    value: float
    minimum: float
    maximum: float

    def __post_init__(self) -> None:
        if self.minimum > self.maximum:
            raise ValueError(f"Invalid range [{self.minimum}, {self.maximum}]")
        if not self.minimum <= self.value <= self.maximum:
            raise ValueError(f"Width {self.value} outside [{self.minimum}, {self.maximum}]")

    @staticmethod
    def clamped(value: float, minimum: float, maximum: float) -> "BoundedWidth":
        """Create a width, clamping value into [minimum, maximum]."""
        if not np.isfinite(value):
            raise ValueError(f"Width must be finite, got {value}")
        return BoundedWidth(value=float(np.clip(value, minimum, maximum)), minimum=minimum, maximum=maximum)

    def with_value(self, value: float) -> "BoundedWidth":
        """Same range, new (clamped) value."""
        return BoundedWidth.clamped(value=value, minimum=self.minimum, maximum=self.maximum)

    def __float__(self) -> float:
        return self.value


def polyline_width(value: float) -> BoundedWidth:
    return BoundedWidth.clamped(
        value=value, minimum=StyleConfig.POLYLINE_WIDTH_MIN, maximum=StyleConfig.POLYLINE_WIDTH_MAX
    )


def polygon_stroke_width(value: float) -> BoundedWidth:
    return BoundedWidth.clamped(
        value=value, minimum=StyleConfig.POLYGON_STROKE_WIDTH_MIN, maximum=StyleConfig.POLYGON_STROKE_WIDTH_MAX
    )


@dataclass(frozen=True)
class PolylineStyle:
    """Trail style: line color and width."""

    color: RGBA = field(default_factory=lambda: RGBA.named(StyleConfig.DEFAULT_POLYLINE_COLOR))
    width: BoundedWidth = field(default_factory=lambda: polyline_width(StyleConfig.DEFAULT_POLYLINE_WIDTH))

    @property
    def width_px(self) -> float:
        return self.width.value


@dataclass(frozen=True)
class PolygonStyle:
    """Park style: fill color, stroke color and stroke width."""

    fill_color: RGBA = field(
        default_factory=lambda: RGBA.named(StyleConfig.DEFAULT_POLYGON_FILL_COLOR, alpha=StyleConfig.FILL_ALPHA)
    )
    stroke_color: RGBA = field(default_factory=lambda: RGBA.named(StyleConfig.DEFAULT_POLYGON_STROKE_COLOR))
    stroke_width: BoundedWidth = field(
        default_factory=lambda: polygon_stroke_width(StyleConfig.DEFAULT_POLYGON_STROKE_WIDTH)
    )

    @property
    def stroke_width_px(self) -> float:
        return self.stroke_width.value


@dataclass
class StyleState:
    """Current styles of both overlays.

    Attributes:
        polyline: Trail style
        polygon: Park style
    """

    polyline: PolylineStyle = field(default_factory=PolylineStyle)
    polygon: PolygonStyle = field(default_factory=PolygonStyle)

    def set_polyline_color(self, color: RGBA) -> None:
        self.polyline = replace(self.polyline, color=color)
        logger.info(f"[STYLE] Polyline color -> {color!r}")

    def set_polyline_width(self, width: float) -> None:
        """Set trail width, clamped to the polyline range."""
        self.polyline = replace(self.polyline, width=self.polyline.width.with_value(width))
        if self.polyline.width_px != width:
            logger.warning(f"[STYLE] Polyline width {width} clamped to {self.polyline.width_px}")
        logger.debug(f"[STYLE] Polyline width -> {self.polyline.width_px}")

    def set_polygon_fill_color(self, color: RGBA) -> None:
        self.polygon = replace(self.polygon, fill_color=color)
        logger.info(f"[STYLE] Polygon fill -> {color!r}")

    def set_polygon_stroke_color(self, color: RGBA) -> None:
        self.polygon = replace(self.polygon, stroke_color=color)
        logger.info(f"[STYLE] Polygon stroke -> {color!r}")

    def set_polygon_stroke_width(self, width: float) -> None:
        """Set park stroke width, clamped to the polygon stroke range."""
        self.polygon = replace(self.polygon, stroke_width=self.polygon.stroke_width.with_value(width))
        if self.polygon.stroke_width_px != width:
            logger.warning(f"[STYLE] Polygon stroke width {width} clamped to {self.polygon.stroke_width_px}")
        logger.debug(f"[STYLE] Polygon stroke width -> {self.polygon.stroke_width_px}")

    def __repr__(self) -> str:
        return (
            f"StyleState(polyline={self.polyline.color!r}/{self.polyline.width_px:g}px, "
            f"polygon={self.polygon.fill_color!r}/{self.polygon.stroke_color!r}/"
            f"{self.polygon.stroke_width_px:g}px)"
        )


def polyline_palette() -> list[RGBA]:
    """Colors offered for the trail, in display order."""
    return [RGBA.named(name) for name in StyleConfig.POLYLINE_COLORS]


def polygon_fill_palette() -> list[RGBA]:
    """Semi-transparent fill colors offered for the park."""
    return [RGBA.named(name, alpha=StyleConfig.FILL_ALPHA) for name in StyleConfig.POLYGON_FILL_COLORS]


def polygon_stroke_palette() -> list[RGBA]:
    """Solid stroke colors offered for the park."""
    return [RGBA.named(name) for name in StyleConfig.POLYGON_STROKE_COLORS]
