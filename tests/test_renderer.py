"""Tests for SVG path data and document output."""
import xml.etree.ElementTree as ET

from models import Point
from renderer import SvgPath, SvgRenderer, SVG_NAMESPACE

NS = '{%s}' % SVG_NAMESPACE


class TestSvgPath:
    """Path command strings."""

    def test_polygon(self):
        path = SvgPath()
        path.add_polygon([Point(0, 0), Point(10, 0), Point(10, 10)])
        assert path.data == 'M0.0 0.0L10.0 0.0L10.0 10.0Z'

    def test_polygon_one_decimal(self):
        path = SvgPath()
        path.add_polygon([Point(1.04, 2.36), Point(3, 4)])
        assert path.data == 'M1.0 2.4L3.0 4.0Z'

    def test_circle_is_two_arcs(self):
        path = SvgPath()
        path.add_circle(Point(10, 20), 8, False)
        assert path.data == 'M10.0 24.0a4.0,4.0 0 1,1 8.0,0a4.0,4.0 0 1,1 -8.0,0'

    def test_counter_clockwise_circle_flips_sweep(self):
        path = SvgPath()
        path.add_circle(Point(10, 20), 8, True)
        assert path.data == 'M10.0 24.0a4.0,4.0 0 1,0 8.0,0a4.0,4.0 0 1,0 -8.0,0'

    def test_commands_accumulate(self):
        path = SvgPath()
        path.add_polygon([Point(0, 0), Point(1, 1)])
        path.add_polygon([Point(2, 2), Point(3, 3)])
        assert path.data == 'M0.0 0.0L1.0 1.0ZM2.0 2.0L3.0 3.0Z'


class TestSvgRenderer:
    """Colour grouping and document serialization."""

    def test_end_shape_appends_to_same_color(self):
        r = SvgRenderer(100)
        r.begin_shape('#111111')
        r.add_polygon([Point(0, 0), Point(1, 1)])
        r.end_shape('#111111')
        r.begin_shape('#111111')
        r.add_polygon([Point(2, 2), Point(3, 3)])
        r.end_shape('#111111')
        assert r.paths_by_color == {'#111111': 'M0.0 0.0L1.0 1.0ZM2.0 2.0L3.0 3.0Z'}

    def test_begin_shape_starts_fresh_buffer(self):
        r = SvgRenderer(100)
        r.begin_shape('#111111')
        r.add_polygon([Point(0, 0), Point(1, 1)])
        r.begin_shape('#222222')
        r.add_polygon([Point(5, 5), Point(6, 6)])
        r.end_shape('#222222')
        assert r.paths_by_color == {'#222222': 'M5.0 5.0L6.0 6.0Z'}

    def test_paths_by_color_is_a_copy(self):
        r = SvgRenderer(100)
        r.paths_by_color['#ffffff'] = 'M0 0Z'
        assert r.paths_by_color == {}

    def test_empty_document(self):
        root = ET.fromstring(SvgRenderer(64).to_svg())
        assert root.tag == NS + 'svg'
        assert root.get('width') == '64'
        assert root.get('height') == '64'
        assert root.get('viewBox') == '0 0 64 64'
        assert root.findall(NS + 'path') == []

    def test_one_path_per_color(self):
        r = SvgRenderer(256)
        for color in ('#aaaaaa', '#bbbbbb'):
            r.begin_shape(color)
            r.add_polygon([Point(0, 0), Point(1, 1)])
            r.end_shape(color)
        root = ET.fromstring(r.to_svg())
        paths = root.findall(NS + 'path')
        assert [p.get('fill') for p in paths] == ['#aaaaaa', '#bbbbbb']
        assert all(p.get('d') == 'M0.0 0.0L1.0 1.0Z' for p in paths)

    def test_fractional_size(self):
        root = ET.fromstring(SvgRenderer(50.5).to_svg())
        assert root.get('width') == '50.5'
