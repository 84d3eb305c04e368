"""Pytest fixtures."""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from radarscope.blips import BlipField
from radarscope.rng import RandomSource


class RecordingCanvas:
    """Stand-in drawing surface that remembers every stroke."""

    def __init__(self, width=512, height=512):
        self.size = (width, height)
        self.calls = []
        self.strokes = []
        self.stroke_color = None
        self.line_width = 1
        self.line_cap = "butt"
        self._path = []
        self._depth = 0

    def __getattr__(self, name):
        # translate / rotate / set_fill_color / fill: recorded only
        def record(*args):
            self.calls.append((name,) + args)
        return record

    def save(self):
        self._depth += 1
        self.calls.append(("save",))

    def restore(self):
        self._depth -= 1
        self.calls.append(("restore",))

    def clear(self, *args):
        self.calls.append(("clear",))

    def set_stroke_color(self, rgba):
        self.stroke_color = tuple(rgba)

    def set_line_width(self, width):
        self.line_width = width

    def set_line_cap(self, cap):
        self.line_cap = cap

    def move_to(self, x, y):
        self._path.append(("move", x, y))

    def line_to(self, x, y):
        self._path.append(("line", x, y))

    def arc_to(self, cx, cy, rx, ry, start, sweep):
        self._path.append(("arc", cx, cy, rx, ry, start, sweep))

    def stroke(self):
        kind = "arc" if any(p[0] == "arc" for p in self._path) else "line"
        self.strokes.append(dict(kind=kind, color=self.stroke_color,
                                 width=self.line_width, path=self._path))
        self.calls.append(("stroke",))
        self._path = []


@pytest.fixture
def rng() -> RandomSource:
    return RandomSource(seed=1234)


@pytest.fixture
def field(rng) -> BlipField:
    """20 blips on a 512x512 surface."""
    f = BlipField(rng)
    f.initialize(512, 512)
    return f


@pytest.fixture
def canvas() -> RecordingCanvas:
    return RecordingCanvas()
