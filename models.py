"""Data model classes and constants for Gdenticon.

All geometry is in SVG user units; the canvas is ``size`` x ``size``.
Coordinates are numpy.float32 once the generator has set up the grid, so
plain numbers mixed into them (shape ratios, offsets) round to single
precision at every step.
"""

from collections.abc import Callable
from dataclasses import dataclass, field


# === Constants ===
DEFAULT_SIZE = 256
DEFAULT_PADDING = 0.08   # Fraction of the size left empty on every side
GRID = 4                 # Icon is laid out on a GRID x GRID cell grid

MIN_HASH_LENGTH = 11
HUE_DIGITS = 7           # Trailing hex digits that encode the hue
HUE_MAX = 0xFFFFFFF      # Largest value HUE_DIGITS hex digits can hold

DEFAULT_SATURATION = 0.5
DEFAULT_COLOR_LIGHTNESS = (0.4, 0.8)
DEFAULT_GRAYSCALE_LIGHTNESS = (0.3, 0.9)


# === Data Model ===

@dataclass(frozen=True)
class Point:
    """A canvas coordinate."""
    x: float
    y: float


@dataclass(frozen=True)
class Transform:
    """Placement of one grid cell: origin, side length and rotation class.

    Rotation is in quarter turns (0-3).  Rotating happens about the cell's
    bounding box, so shapes that are not points (circles) pass their own
    width/height to keep them inside the cell.
    """
    x: float
    y: float
    size: float
    rotation: int = 0

    def transform_point(self, x, y, w=0, h=0) -> Point:
        right = self.x + self.size
        bottom = self.y + self.size
        if self.rotation == 1:
            return Point(right - y - h, self.y + x)
        if self.rotation == 2:
            return Point(right - x - w, bottom - y - h)
        if self.rotation == 3:
            return Point(self.x + y, bottom - x - w)
        return Point(self.x + x, self.y + y)


NO_TRANSFORM = Transform(0, 0, 0, 0)


def lightness(min_value: float, max_value: float):
    """Map 0..1 onto *min_value*..*max_value*, clamped to 0..1."""
    def _map(value):
        value = min_value + value * (max_value - min_value)
        if value < 0:
            return 0
        if value > 1:
            return 1
        return value
    return _map


@dataclass
class Config:
    """Colour settings used to build the palette."""
    saturation: float = DEFAULT_SATURATION
    color_lightness: Callable[[float], float] = field(default_factory=lambda: lightness(*DEFAULT_COLOR_LIGHTNESS))
    grayscale_lightness: Callable[[float], float] = field(default_factory=lambda: lightness(*DEFAULT_GRAYSCALE_LIGHTNESS))

    @classmethod
    def from_ranges(cls, saturation: float = DEFAULT_SATURATION,
                    color_range: tuple[float, float] = DEFAULT_COLOR_LIGHTNESS,
                    grayscale_range: tuple[float, float] = DEFAULT_GRAYSCALE_LIGHTNESS) -> 'Config':
        return cls(
            saturation=saturation,
            color_lightness=lightness(*color_range),
            grayscale_lightness=lightness(*grayscale_range),
        )
