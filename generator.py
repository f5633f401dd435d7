"""Icon generator: turns a hex hash into an identicon SVG.

Hash digit roles (0-based positions):

    0       rotation seed of the center pass (unused: center never rotates)
    1       center shape
    2, 3    side shape, side rotation seed
    4, 5    corner shape, corner rotation seed
    8-10    colour picks for sides, corners and center
    last 7  hue
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum

from numpy import float32

from graphics import Graphics
from models import (
    Config, Transform, DEFAULT_SIZE, DEFAULT_PADDING, GRID,
    MIN_HASH_LENGTH, HUE_DIGITS, HUE_MAX,
)
from renderer import SvgRenderer
from shapes import Shape, CENTER_SHAPES, OUTER_SHAPES, draw
from theme import color_theme

logger = logging.getLogger(__name__)


_HEX_RE = re.compile(r"[0-9a-f]+", re.IGNORECASE)
_HASH_RE = re.compile(r"[0-9a-f]{%d,}" % MIN_HASH_LENGTH, re.IGNORECASE)


class HashError(Enum):
    NOT_HEX = "Invalid hash: not consisted of hex digits."
    TOO_SHORT = f"Invalid hash: too short, at least {MIN_HASH_LENGTH} hex digits required."


class InvalidHashFormat(ValueError):
    """The hash is not a hex string of at least MIN_HASH_LENGTH digits."""

    def __init__(self, reason: HashError):
        super().__init__(reason.value)
        self.reason = reason


def validate_hash(hash: str):
    if _HASH_RE.fullmatch(hash):
        return
    if not _HEX_RE.fullmatch(hash):
        raise InvalidHashFormat(HashError.NOT_HEX)
    raise InvalidHashFormat(HashError.TOO_SHORT)


def _nibble(hash, position):
    return int(hash[position], 16)


def parse_hue(hash: str) -> float:
    return int(hash[-HUE_DIGITS:], 16) / HUE_MAX


def select_color_indexes(hash: str, palette_size: int = 5) -> list[int]:
    """Palette indexes for the sides, corners and center, in that order.

    Dark gray (0) never pairs with dark colour (4), nor light gray (2) with
    light colour (3); the later pick of such a pair falls back to the mid
    colour (1).
    """
    chosen: list[int] = []

    def is_duplicate(values, index):
        return index in values and any(v in chosen for v in values)

    for i in range(3):
        index = _nibble(hash, 8 + i) % palette_size
        if is_duplicate((0, 4), index) or is_duplicate((2, 3), index):
            index = 1
        chosen.append(index)
    return chosen


@dataclass(frozen=True)
class RenderPass:
    """One group of cells drawn with the same shape and colour."""
    name: str
    color_slot: int                   # Index into the selected colour indexes
    shapes: tuple[Shape, ...]
    shape_position: int               # Hash digit choosing the shape
    rotation_position: int            # Hash digit seeding rotation; 0 = none
    cells: tuple[tuple[int, int], ...]  # (column, row) pairs


RENDER_PASSES = (
    RenderPass("sides", 0, OUTER_SHAPES, 2, 3,
               ((1, 0), (2, 0), (2, 3), (1, 3), (0, 1), (3, 1), (3, 2), (0, 2))),
    RenderPass("corners", 1, OUTER_SHAPES, 4, 5,
               ((0, 0), (3, 0), (3, 3), (0, 3))),
    RenderPass("center", 2, CENTER_SHAPES, 1, 0,
               ((1, 1), (2, 1), (2, 2), (1, 2))),
)


@dataclass
class _RenderState:
    hash: str
    palette: list[str]
    color_indexes: list[int]
    x: float
    y: float
    cell: float


def render_pass(state: _RenderState, graphics: Graphics, rp: RenderPass):
    rotation = _nibble(state.hash, rp.rotation_position) if rp.rotation_position > 0 else 0
    shape = rp.shapes[_nibble(state.hash, rp.shape_position) % len(rp.shapes)]
    color = state.palette[state.color_indexes[rp.color_slot]]
    logger.debug("%s: shape=%s color=%s rotation seed=%d", rp.name, shape.name, color, rotation)

    renderer = graphics.renderer
    renderer.begin_shape(color)
    for i, (col, row) in enumerate(rp.cells):
        graphics.transform = Transform(
            state.x + col * state.cell,
            state.y + row * state.cell,
            state.cell,
            rotation % 4,
        )
        rotation += 1
        draw(shape, graphics, state.cell, i)
    renderer.end_shape(color)


def render_icon(renderer: SvgRenderer, hash: str, size: float,
                config: Config | None = None, padding: float = DEFAULT_PADDING):
    """Draw the identicon for *hash* onto *renderer*."""
    validate_hash(hash)
    config = config or Config()

    # single precision from here on; every shape coordinate derives from these
    size = float32(size)
    pad = float32(padding) * size
    size -= pad * 2
    cell = size / GRID
    x = y = pad + size / 2 - cell * 2

    hue = parse_hue(hash)
    palette = color_theme(hue, config)
    color_indexes = select_color_indexes(hash, len(palette))
    logger.debug("hue=%.6f palette=%s color indexes=%s", hue, palette, color_indexes)

    state = _RenderState(hash, palette, color_indexes, x, y, cell)
    graphics = Graphics(renderer)
    for rp in RENDER_PASSES:
        render_pass(state, graphics, rp)


def generate(hash: str, size: float = DEFAULT_SIZE,
             config: Config | None = None, padding: float = DEFAULT_PADDING) -> str:
    """Return the identicon SVG document for *hash*.

    Raises InvalidHashFormat before doing any work if the hash is unusable.
    """
    renderer = SvgRenderer(size)
    render_icon(renderer, hash, size, config, padding)
    return renderer.to_svg()
