"""SVG output: per-colour path accumulation and document serialization."""

import xml.etree.ElementTree as ET

from models import Point


SVG_NAMESPACE = "http://www.w3.org/2000/svg"


def _fmt(value):
    return f"{float(value):.1f}"


class SvgPath:
    """Accumulates SVG path data for one colour."""

    def __init__(self):
        self.data = ""

    def add_polygon(self, points: list[Point]):
        first, rest = points[0], points[1:]
        parts = [f"M{_fmt(first.x)} {_fmt(first.y)}"]
        parts.extend(f"L{_fmt(p.x)} {_fmt(p.y)}" for p in rest)
        self.data += "".join(parts) + "Z"

    def add_circle(self, point: Point, diameter: float, counter_clockwise: bool):
        """Full circle with *point* as the top-left of its bounding box.

        SVG cannot draw a closed circle with one arc, so this is two
        half-circle arcs sharing a sweep direction.
        """
        sweep = 0 if counter_clockwise else 1
        r = _fmt(diameter / 2)
        self.data += (
            f"M{_fmt(point.x)} {_fmt(point.y + diameter / 2)}"
            f"a{r},{r} 0 1,{sweep} {_fmt(diameter)},0"
            f"a{r},{r} 0 1,{sweep} {_fmt(-diameter)},0"
        )


class SvgRenderer:
    """Collects shapes grouped by fill colour and writes an SVG document.

    One renderer belongs to exactly one icon; nothing here is shared.
    """

    def __init__(self, size: float):
        self.size = size
        self._paths_by_color: dict[str, str] = {}
        self._path = SvgPath()

    @property
    def paths_by_color(self) -> dict[str, str]:
        return dict(self._paths_by_color)

    def begin_shape(self, color: str):
        self._path = SvgPath()

    def end_shape(self, color: str):
        self._paths_by_color[color] = self._paths_by_color.get(color, "") + self._path.data

    def add_polygon(self, points: list[Point]):
        self._path.add_polygon(points)

    def add_circle(self, point: Point, diameter: float, counter_clockwise: bool):
        self._path.add_circle(point, diameter, counter_clockwise)

    def to_element(self) -> ET.Element:
        size = str(int(self.size)) if float(self.size).is_integer() else str(self.size)
        root = ET.Element("svg", {
            "xmlns": SVG_NAMESPACE,
            "width": size,
            "height": size,
            "viewBox": f"0 0 {size} {size}",
            "preserveAspectRatio": "xMidYMid meet",
        })
        # dict order is first-use order, so output is reproducible
        for color, data in self._paths_by_color.items():
            ET.SubElement(root, "path", {"fill": color, "d": data})
        return root

    def to_svg(self) -> str:
        return ET.tostring(self.to_element(), encoding="unicode")
