"""Shared pytest fixtures for Gdenticon tests."""
import pytest

from graphics import Graphics
from models import Config, Transform
from renderer import SvgRenderer
from shapes import draw


SAMPLE_HASH = '0123456789abcdef0123456789abcdef'


class RecordingRenderer:
    """Stand-in renderer that keeps the raw points it is given."""

    def __init__(self):
        self.polygons = []
        self.circles = []

    def add_polygon(self, points):
        self.polygons.append([(p.x, p.y) for p in points])

    def add_circle(self, point, diameter, counter_clockwise):
        self.circles.append((point, diameter, counter_clockwise))


@pytest.fixture
def recorder():
    return RecordingRenderer()


@pytest.fixture
def record_shape():
    """Factory fixture: record_shape(shape, cell, index) -> RecordingRenderer after drawing."""
    def _record(shape, cell, index=0):
        r = RecordingRenderer()
        draw(shape, Graphics(r), cell, index)
        return r
    return _record


@pytest.fixture
def default_config():
    return Config()


@pytest.fixture
def sample_hash():
    return SAMPLE_HASH


@pytest.fixture
def make_graphics():
    """Factory fixture: make_graphics(transform) -> (Graphics, SvgRenderer) with an open shape."""
    def _make(transform=None, size=256):
        renderer = SvgRenderer(size)
        renderer.begin_shape('#000000')
        g = Graphics(renderer) if transform is None else Graphics(renderer, transform)
        return g, renderer
    return _make


@pytest.fixture
def cell_transform():
    """Factory fixture: cell_transform(rotation) -> a 10x10 cell at (20, 20)."""
    def _make(rotation=0):
        return Transform(20, 20, 10, rotation)
    return _make
