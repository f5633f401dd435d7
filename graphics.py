"""Shape-local drawing primitives mapped onto the canvas through a Transform."""

from models import NO_TRANSFORM, Transform
from renderer import SvgRenderer


class Graphics:
    """Draws polygons and circles in cell coordinates.

    The generator swaps ``transform`` before each cell; every primitive is
    placed relative to it.  ``invert`` reverses the winding so the shape
    cuts a hole out of whatever was drawn before it in the same path.
    """

    def __init__(self, renderer: SvgRenderer, transform: Transform = NO_TRANSFORM):
        self.renderer = renderer
        self.transform = transform

    def add_polygon(self, points, invert=False):
        pairs = [(points[i], points[i + 1]) for i in range(0, len(points) - 1, 2)]
        if invert:
            pairs.reverse()
        self.renderer.add_polygon([self.transform.transform_point(x, y) for x, y in pairs])

    def add_circle(self, x, y, size, invert=False):
        point = self.transform.transform_point(x, y, size, size)
        self.renderer.add_circle(point, size, invert)

    def add_rectangle(self, x, y, w, h, invert=False):
        self.add_polygon([
            x, y,
            x + w, y,
            x + w, y + h,
            x, y + h,
        ], invert)

    def add_triangle(self, x, y, w, h, r, invert=False):
        """Right triangle filling half of the box; *r* picks the missing corner."""
        points = [
            x + w, y,
            x + w, y + h,
            x, y + h,
            x, y,
        ]
        start = (int(r) % 4) * 2
        del points[start:start + 2]
        self.add_polygon(points, invert)

    def add_rhombus(self, x, y, w, h, invert=False):
        self.add_polygon([
            x + w / 2, y,
            x + w, y + h / 2,
            x + w / 2, y + h,
            x, y + h / 2,
        ], invert)
