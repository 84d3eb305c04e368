"""
radarscope.canvas
=================

A small vector drawing surface on top of a ``pygame.Surface``.

The API mirrors the usual 2-D graphic-context shape: an affine
transform stack (``save`` / ``restore`` / ``translate`` / ``rotate``),
stroke & fill paint state, and a path built from ``move_to``,
``line_to`` and ``arc_to`` that is painted by ``stroke`` or ``fill``.

*   Angles are radians; the y-axis points down, so a positive rotation
    turns clockwise on screen.
*   Full circles are painted with ``pygame.draw.circle``; any other arc
    is flattened into short polyline segments.
"""

from __future__ import annotations
import math
from typing import List, Sequence, Tuple

import pygame

from radarscope import constants as C

Point  = Tuple[float, float]
Matrix = Tuple[float, float, float, float, float, float]
Color  = Tuple[int, int, int, int]

IDENTITY: Matrix = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)
LINE_CAPS = ("butt", "round", "square")
FULL_TURN = 2 * math.pi


def clamp_color(rgba: Sequence[float]) -> Color:
    """Clamp every channel into 0..255; a missing alpha means opaque."""
    chans = [max(0, min(255, int(c))) for c in rgba]
    if len(chans) == 3:
        chans.append(255)
    return tuple(chans)


def arc_points(cx: float, cy: float, rx: float, ry: float,
               start: float, sweep: float) -> List[Point]:
    """Polyline approximation of an elliptical arc (about 2 px per segment)."""
    n = max(8, min(720, math.ceil(abs(sweep) * max(rx, ry) / 2)))
    return [(cx + math.cos(start + sweep * i / n) * rx,
             cy + math.sin(start + sweep * i / n) * ry)
            for i in range(n + 1)]


class Canvas:
    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self.matrix: Matrix = IDENTITY
        self._stack: List[Matrix] = []
        self.stroke_color: Color = C.GREEN
        self.fill_color:   Color = C.GREEN
        self.line_width = 1.0
        self.line_cap   = "butt"
        self._paths: List[List[Point]] = []
        self._circles: List[Tuple[Point, float]] = []

    @property
    def size(self) -> Tuple[int, int]:
        return self.surface.get_size()

    # ───────────────────────────────────────────── transform stack
    def save(self) -> None:
        self._stack.append(self.matrix)

    def restore(self) -> None:
        if self._stack:
            self.matrix = self._stack.pop()

    def translate(self, dx: float, dy: float) -> None:
        a, b, c, d, e, f = self.matrix
        self.matrix = (a, b, c, d, e + a * dx + c * dy, f + b * dx + d * dy)

    def rotate(self, radians: float) -> None:
        a, b, c, d, e, f = self.matrix
        cs, sn = math.cos(radians), math.sin(radians)
        self.matrix = (a * cs + c * sn, b * cs + d * sn,
                       -a * sn + c * cs, -b * sn + d * cs, e, f)

    def apply(self, x: float, y: float) -> Point:
        """User space → device (pixel) space."""
        a, b, c, d, e, f = self.matrix
        return a * x + c * y + e, b * x + d * y + f

    # ───────────────────────────────────────────── paint state
    def set_stroke_color(self, rgba: Sequence[float]) -> None:
        self.stroke_color = clamp_color(rgba)

    def set_fill_color(self, rgba: Sequence[float]) -> None:
        self.fill_color = clamp_color(rgba)

    def set_line_width(self, width: float) -> None:
        self.line_width = float(width)

    def set_line_cap(self, cap: str) -> None:
        if cap not in LINE_CAPS:
            raise ValueError(f"unknown line cap {cap!r}")
        self.line_cap = cap

    # ───────────────────────────────────────────── path building
    def move_to(self, x: float, y: float) -> None:
        self._paths.append([self.apply(x, y)])

    def line_to(self, x: float, y: float) -> None:
        if not self._paths:
            self._paths.append([])
        self._paths[-1].append(self.apply(x, y))

    def arc_to(self, cx: float, cy: float, rx: float, ry: float,
               start: float, sweep: float) -> None:
        """Continue the path with a line to the arc start, then the arc.

        A full turn of a circle is kept as a circle and painted by
        ``pygame.draw.circle``; it also ends the current sub-path.
        """
        if rx == ry and abs(sweep) >= FULL_TURN - 1e-9:
            self._circles.append((self.apply(cx, cy), rx))
            self._paths.append([])
            return
        for x, y in arc_points(cx, cy, rx, ry, start, sweep):
            self.line_to(x, y)

    # ───────────────────────────────────────────── painting
    def clear(self, color: Sequence[float] = C.BLACK) -> None:
        self.surface.fill(clamp_color(color))
        self._new_path()

    def stroke(self) -> None:
        width = max(1, round(self.line_width))
        for pts in self._paths:
            pts = _dedupe(pts)
            if len(pts) < 2:
                continue
            pygame.draw.lines(self.surface, self.stroke_color, False, pts, width)
            if self.line_cap == "round" and width > 1:
                for p in (pts[0], pts[-1]):
                    pygame.draw.circle(self.surface, self.stroke_color, p, width / 2)
        for center, r in self._circles:
            # pygame grows a ring inwards from its radius
            pygame.draw.circle(self.surface, self.stroke_color, center,
                               r + width / 2, width)
        self._new_path()

    def fill(self) -> None:
        for pts in self._paths:
            if len(pts) >= 3:
                pygame.draw.polygon(self.surface, self.fill_color, pts)
        for center, r in self._circles:
            pygame.draw.circle(self.surface, self.fill_color, center, r)
        self._new_path()

    def _new_path(self) -> None:
        self._paths = []
        self._circles = []


def _dedupe(pts: List[Point]) -> List[Point]:
    out = pts[:1]
    for p in pts[1:]:
        if math.dist(p, out[-1]) > 1e-9:
            out.append(p)
    return out
