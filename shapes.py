"""Shape library: the fixed catalog of parametric cell shapes.

Shapes come in two families.  ``outer`` shapes decorate the sides and
corners of the icon, ``center`` shapes make up the 2x2 centerpiece.  The
order of members inside a family decides which shape a hash digit selects,
so it must never change.

Every drawing routine takes ``(g, cell, index)``: the Graphics to draw on,
the cell side length, and the position of the cell within its render pass.
"""

from enum import Enum

from graphics import Graphics


class ShapeFamily(Enum):
    CENTER = "center"
    OUTER = "outer"


class Shape(Enum):
    """A shape variant, keyed by family and position in that family."""
    NOTCHED_SQUARE = (ShapeFamily.CENTER, 0)
    TRIANGLE = (ShapeFamily.CENTER, 1)
    INSET_SQUARE = (ShapeFamily.CENTER, 2)
    FRAMED_SQUARE = (ShapeFamily.CENTER, 3)
    OFFSET_CIRCLE = (ShapeFamily.CENTER, 4)
    TRIANGLE_CUTOUT = (ShapeFamily.CENTER, 5)
    NOTCHED_POLYGON = (ShapeFamily.CENTER, 6)
    CORNER_TRIANGLE = (ShapeFamily.CENTER, 7)
    L_SHAPE = (ShapeFamily.CENTER, 8)
    SQUARE_HOLE = (ShapeFamily.CENTER, 9)
    ROUND_HOLE = (ShapeFamily.CENTER, 10)
    CORNER_TRIANGLE_ALT = (ShapeFamily.CENTER, 11)
    RHOMBUS_HOLE = (ShapeFamily.CENTER, 12)
    LARGE_CIRCLE = (ShapeFamily.CENTER, 13)

    OUTER_TRIANGLE = (ShapeFamily.OUTER, 0)
    OUTER_HALF_TRIANGLE = (ShapeFamily.OUTER, 1)
    OUTER_RHOMBUS = (ShapeFamily.OUTER, 2)
    OUTER_CIRCLE = (ShapeFamily.OUTER, 3)

    @property
    def family(self) -> ShapeFamily:
        return self.value[0]

    @property
    def index(self) -> int:
        return self.value[1]


def shapes_in(family: ShapeFamily) -> tuple[Shape, ...]:
    """All shapes of *family*, in selection order."""
    return tuple(sorted((s for s in Shape if s.family is family), key=lambda s: s.index))


CENTER_SHAPES = shapes_in(ShapeFamily.CENTER)
OUTER_SHAPES = shapes_in(ShapeFamily.OUTER)


# ------------------------------------------------------------------ #
#  Center shapes                                                      #
# ------------------------------------------------------------------ #

def _notched_square(g, cell, index):
    k = cell * 0.42
    g.add_polygon([
        0, 0,
        cell, 0,
        cell, cell - k * 2,
        cell - k, cell,
        0, cell,
    ])


def _triangle(g, cell, index):
    w = cell * 0.5
    h = cell * 0.8
    g.add_triangle(cell - w, 0, w, h, 2)


def _inset_square(g, cell, index):
    s = cell / 3
    g.add_rectangle(s, s, cell - s, cell - s)


def _framed_square(g, cell, index):
    inner = cell * 0.1
    if inner > 1:
        inner = int(inner)
    elif inner > 0.5:
        inner = 1

    if cell < 6:
        outer = 1
    elif cell < 8:
        outer = 2
    else:
        outer = int(cell / 4)
    g.add_rectangle(outer, outer, cell - inner - outer, cell - inner - outer)


def _offset_circle(g, cell, index):
    m = cell * 0.15
    s = cell * 0.5
    g.add_circle(cell - s - m, cell - s - m, s)


def _triangle_cutout(g, cell, index):
    inner = int(cell * 0.1)
    outer = inner * 4

    g.add_rectangle(0, 0, cell, cell)
    g.add_polygon([
        outer, outer,
        cell - inner, outer,
        outer + (cell - outer - inner) / 2, cell - inner,
    ], True)


def _notched_polygon(g, cell, index):
    g.add_polygon([
        0, 0,
        cell, 0,
        cell, cell * 0.7,
        cell * 0.4, cell * 0.4,
        cell * 0.7, cell,
        0, cell,
    ])


def _corner_triangle(g, cell, index):
    g.add_triangle(cell / 2, cell / 2, cell / 2, cell / 2, 3)


def _l_shape(g, cell, index):
    g.add_rectangle(0, 0, cell, cell / 2)
    g.add_rectangle(0, cell / 2, cell / 2, cell / 2)
    g.add_triangle(cell / 2, cell / 2, cell / 2, cell / 2, 1)


def _square_hole(g, cell, index):
    inner = cell * 0.14
    if cell > 8:
        inner = int(inner)

    if cell < 4:
        outer = 1
    elif cell < 6:
        outer = 2
    else:
        outer = int(cell * 0.35)
    g.add_rectangle(0, 0, cell, cell)
    g.add_rectangle(outer, outer, cell - outer - inner, cell - outer - inner, True)


def _round_hole(g, cell, index):
    inner = cell * 0.12
    outer = inner * 3

    g.add_rectangle(0, 0, cell, cell)
    g.add_circle(outer, outer, cell - inner - outer, True)


def _rhombus_hole(g, cell, index):
    m = cell * 0.25
    g.add_rectangle(0, 0, cell, cell)
    g.add_rhombus(m, m, cell - m, cell - m, True)


def _large_circle(g, cell, index):
    # Spans the whole 2x2 center, so only the first cell draws it
    if index == 0:
        m = cell * 0.4
        s = cell * 1.2
        g.add_circle(m, m, s)


# ------------------------------------------------------------------ #
#  Outer shapes                                                       #
# ------------------------------------------------------------------ #

def _outer_triangle(g, cell, index):
    g.add_triangle(0, 0, cell, cell, 0)


def _outer_half_triangle(g, cell, index):
    g.add_triangle(0, cell / 2, cell, cell / 2, 0)


def _outer_rhombus(g, cell, index):
    g.add_rhombus(0, 0, cell, cell)


def _outer_circle(g, cell, index):
    m = cell / 6
    g.add_circle(m, m, cell - 2 * m)


_DRAWERS = {
    Shape.NOTCHED_SQUARE: _notched_square,
    Shape.TRIANGLE: _triangle,
    Shape.INSET_SQUARE: _inset_square,
    Shape.FRAMED_SQUARE: _framed_square,
    Shape.OFFSET_CIRCLE: _offset_circle,
    Shape.TRIANGLE_CUTOUT: _triangle_cutout,
    Shape.NOTCHED_POLYGON: _notched_polygon,
    Shape.CORNER_TRIANGLE: _corner_triangle,
    Shape.L_SHAPE: _l_shape,
    Shape.SQUARE_HOLE: _square_hole,
    Shape.ROUND_HOLE: _round_hole,
    Shape.CORNER_TRIANGLE_ALT: _corner_triangle,
    Shape.RHOMBUS_HOLE: _rhombus_hole,
    Shape.LARGE_CIRCLE: _large_circle,
    Shape.OUTER_TRIANGLE: _outer_triangle,
    Shape.OUTER_HALF_TRIANGLE: _outer_half_triangle,
    Shape.OUTER_RHOMBUS: _outer_rhombus,
    Shape.OUTER_CIRCLE: _outer_circle,
}


def draw(shape: Shape, g: Graphics, cell: float, index: int):
    """Draw *shape* into the cell currently set on *g*."""
    _DRAWERS[shape](g, cell, index)
