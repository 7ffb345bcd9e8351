"""RGBA color value used for overlay styling.

Channels r/g/b are 0-255 integers, alpha is a 0.0-1.0 float. Pydeck wants
[R, G, B, A] lists with all four channels in 0-255, see to_pydeck().
"""

from dataclasses import dataclass

from trail_overlays.constants import StyleConfig


@dataclass(frozen=True)
class RGBA:
    """Immutable RGBA color.

    Two colors are equal when all four channels are equal, which is what the
    customization dialog uses to mark the selected swatch.
    """

    r: int
    g: int
    b: int
    a: float = 1.0

    def __post_init__(self) -> None:
        for channel_name, channel in (("r", self.r), ("g", self.g), ("b", self.b)):
            if not 0 <= channel <= 255:
                raise ValueError(f"Channel {channel_name} out of range [0, 255]: {channel}")
        if not 0.0 <= self.a <= 1.0:
            raise ValueError(f"Alpha out of range [0.0, 1.0]: {self.a}")

    @staticmethod
    def named(name: str, alpha: float = 1.0) -> "RGBA":
        """Build a color from StyleConfig.NAMED_COLORS.

        Raises:
            KeyError: If the name is not a known color
        """
        r, g, b = StyleConfig.NAMED_COLORS[name]
        return RGBA(r=r, g=g, b=b, a=alpha)

    def with_alpha(self, alpha: float) -> "RGBA":
        """Return the same color with a different alpha."""
        return RGBA(r=self.r, g=self.g, b=self.b, a=alpha)

    def to_pydeck(self) -> list[int]:
        """Return [R, G, B, A] with every channel in 0-255."""
        return [self.r, self.g, self.b, round(self.a * 255)]

    def to_hex(self) -> str:
        """Return #RRGGBB (alpha dropped) for CSS swatches."""
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    def to_css(self) -> str:
        """Return rgba(...) string including alpha."""
        return f"rgba({self.r}, {self.g}, {self.b}, {self.a:g})"

    def __repr__(self) -> str:
        return f"RGBA({self.r}, {self.g}, {self.b}, a={self.a:g})"
