"""
radarscope.renderer
===================

Turns the sweep angle and the blip field into stroke calls on a
`radarscope.canvas.Canvas` (or anything with the same methods).

Nothing is cached between frames: spokes and rings are re-stroked on
every step, exactly like the beam and the blips.
"""

from __future__ import annotations
import math
from typing import Iterable, Iterator

from radarscope import constants as C
from radarscope.blips import Blip

FULL_TURN = 2 * math.pi


def scope_radius(width: float, height: float) -> float:
    """Half of the shorter surface side: outer ring radius & spoke length."""
    return min(width, height) / 2


def ring_factors() -> Iterator[float]:
    """1.0, 0.7, 0.4, 0.1 – step down until the ring would vanish."""
    f = 1.0
    while f > 0:
        yield f
        f -= C.RING_STEP


class RadarRenderer:
    def __init__(self, mask_ring: bool = True) -> None:
        self.mask_ring = mask_ring

    # ───────────────────────────────────────── static scope
    def draw_radials(self, gc, width: float, height: float) -> None:
        length = scope_radius(width, height)
        gc.save()
        gc.translate(width / 2, height / 2)
        gc.set_line_width(C.SCOPE_LINE_W)
        gc.set_stroke_color(C.GREEN)
        for deg in range(0, C.DEGREES, C.SPOKE_STEP_DEG):
            gc.save()                           # keep rotations temporary
            gc.rotate(math.radians(deg))
            gc.move_to(0, 0)
            gc.line_to(length, 0)
            gc.stroke()
            gc.restore()
        gc.restore()

    def draw_rings(self, gc, width: float, height: float) -> None:
        radius = scope_radius(width, height)
        xc, yc = width / 2, height / 2
        gc.set_line_width(C.SCOPE_LINE_W)
        gc.set_stroke_color(C.GREEN)
        gc.set_line_cap("butt")
        for f in ring_factors():
            _circle(gc, xc, yc, radius * f)

    def draw_scope(self, gc, width: float, height: float) -> None:
        self.draw_radials(gc, width, height)
        self.draw_rings(gc, width, height)

    # ───────────────────────────────────────── sweep beam
    def draw_sweep(self, gc, width: float, height: float, angle: float) -> None:
        """Fan of thin segments trailing the beam, dimmer the further back."""
        length = scope_radius(width, height)
        for i in range(C.SWEEP_SEGMENTS):
            gc.save()
            gc.translate(width / 2, height / 2)
            gc.set_line_width(1)
            gc.set_stroke_color((0, max(0, C.SWEEP_GREEN - C.SWEEP_FADE * i), 0, 0xFF))
            gc.rotate(math.radians(angle - i * C.SWEEP_SPREAD))
            gc.move_to(0, 0)
            gc.line_to(length, 0)
            gc.stroke()
            gc.restore()

    # ───────────────────────────────────────── blips
    def draw_blip(self, gc, blip: Blip) -> None:
        gc.set_line_width(C.BLIP_LINE_W)
        gc.set_stroke_color((0, max(0, min(255, blip.brightness)), 0, 0xFF))
        gc.set_line_cap("butt")
        _circle(gc, blip.x, blip.y, blip.radius)

    def draw_blips(self, gc, blips: Iterable[Blip]) -> None:
        for b in blips:
            self.draw_blip(gc, b)

    # ───────────────────────────────────────── mask
    def draw_mask(self, gc, width: float, height: float) -> None:
        """Thick black ring just outside the scope hiding blips that wandered off."""
        if not self.mask_ring:
            return
        radius = scope_radius(width, height)
        gc.set_line_width(radius)
        gc.set_stroke_color(C.BLACK)
        gc.set_line_cap("butt")
        _circle(gc, width / 2, height / 2, radius + radius / 2 + 1)


def _circle(gc, xc: float, yc: float, r: float) -> None:
    gc.move_to(xc + r, yc)
    gc.arc_to(xc, yc, r, r, 0.0, FULL_TURN)
    gc.stroke()
