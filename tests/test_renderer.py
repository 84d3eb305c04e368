"""Smoke tests for the renderer against a recording canvas."""

import math

import pytest

from radarscope import constants as C
from radarscope.blips import Blip
from radarscope.renderer import RadarRenderer, ring_factors, scope_radius


def draw_frame(renderer, canvas, field, angle, size=(512, 512)):
    w, h = size
    canvas.clear()
    renderer.draw_scope(canvas, w, h)
    renderer.draw_sweep(canvas, w, h, angle)
    renderer.draw_blips(canvas, field)
    field.update(angle)
    renderer.draw_mask(canvas, w, h)


class TestHelpers:
    def test_scope_radius_uses_shorter_side(self):
        assert scope_radius(800, 600) == 300
        assert scope_radius(512, 1024) == 256

    def test_four_rings(self):
        assert [round(f, 6) for f in ring_factors()] == [1.0, 0.7, 0.4, 0.1]


class TestFrame:
    def test_stroke_sequence(self, canvas, field):
        draw_frame(RadarRenderer(), canvas, field, 0)
        kinds = [(s["kind"], s["width"]) for s in canvas.strokes]
        assert kinds == ([("line", C.SCOPE_LINE_W)] * 8 +
                         [("arc", C.SCOPE_LINE_W)] * 4 +
                         [("line", 1)] * 60 +
                         [("arc", C.BLIP_LINE_W)] * C.NUM_BLIPS +
                         [("arc", 256)])

    def test_mask_disabled(self, canvas, field):
        draw_frame(RadarRenderer(mask_ring=False), canvas, field, 0)
        assert len(canvas.strokes) == 8 + 4 + 60 + C.NUM_BLIPS

    def test_save_restore_balanced(self, canvas, field):
        draw_frame(RadarRenderer(), canvas, field, 90)
        assert canvas._depth == 0


class TestPieces:
    def test_spokes_every_45_degrees(self, canvas):
        RadarRenderer().draw_radials(canvas, 512, 512)
        rotations = [c[1] for c in canvas.calls if c[0] == "rotate"]
        assert rotations == pytest.approx([math.radians(d) for d in range(0, 360, 45)])
        assert all(s["path"][-1] == ("line", 256, 0) for s in canvas.strokes)

    def test_rings_radii(self, canvas):
        RadarRenderer().draw_rings(canvas, 400, 400)
        radii = [s["path"][1][3] for s in canvas.strokes]
        assert radii == pytest.approx([200, 140, 80, 20])
        assert canvas.line_cap == "butt"

    def test_sweep_fades_along_tail(self, canvas):
        RadarRenderer().draw_sweep(canvas, 512, 512, 30)
        greens = [s["color"][1] for s in canvas.strokes]
        assert greens[0] == 250
        assert greens[-1] == 250 - 3 * 59
        assert greens == sorted(greens, reverse=True)
        rotations = [c[1] for c in canvas.calls if c[0] == "rotate"]
        assert rotations[0] == pytest.approx(math.radians(30))
        assert rotations[1] == pytest.approx(math.radians(29.5))

    def test_blip_colour_tracks_brightness(self, canvas):
        RadarRenderer().draw_blip(canvas, Blip(x=5, y=6, dx=0, dy=0, radius=3, brightness=77))
        s = canvas.strokes[0]
        assert s["color"] == (0, 77, 0, 255)
        assert s["path"][1][1:5] == (5, 6, 3, 3)
        assert s["path"][1][6] == pytest.approx(2 * math.pi)

    def test_blip_colour_clamped(self, canvas):
        RadarRenderer().draw_blip(canvas, Blip(x=5, y=6, dx=0, dy=0, radius=3, brightness=-40))
        assert canvas.strokes[0]["color"] == (0, 0, 0, 255)

    def test_mask_geometry(self, canvas):
        RadarRenderer().draw_mask(canvas, 512, 512)
        s = canvas.strokes[0]
        assert s["color"] == C.BLACK
        assert s["width"] == 256
        assert s["path"][1][3] == 256 * 1.5 + 1
