"""
radarscope.blips
================

Simulated radar targets ("blips") and the per-degree rules that move
and fade them.

Each sweep tick the field is handed the current integer sweep angle:

* every ``FADE_EVERY``-th degree all blips dim by ``FADE_STEP``;
* in **targeted** mode a blip hops by its velocity when the beam points
  at the spot it is heading for and its pause counter has run out;
* in **lockstep** mode the whole field hops once per rotation
  (``angle % 359 == 0``).

A hop restores full brightness; in targeted mode the fade is applied
before the hop, in lockstep mode after it.  Brightness never goes
below zero.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, List, Tuple

from radarscope import constants as C
from radarscope.rng import RandomSource


@dataclass
class Blip:
    x: float
    y: float
    dx: float
    dy: float
    radius: float
    brightness: int = C.FULL_BRIGHT
    pause: int = 0

    def next_position(self) -> Tuple[float, float]:
        return self.x + self.dx, self.y + self.dy

    def hop(self, pause: int = C.PAUSE_TICKS) -> None:
        self.x, self.y = self.next_position()
        self.brightness = C.FULL_BRIGHT
        self.pause = pause

    def fade(self, step: int = C.FADE_STEP) -> None:
        self.brightness = max(0, self.brightness - step)


def heading_degree(x: float, y: float, cx: float, cy: float) -> int:
    """Integer bearing 0..359 of (x, y) seen from (cx, cy), y-axis down."""
    deg = math.degrees(math.atan2(y - cy, x - cx)) % C.DEGREES
    return int(deg) % C.DEGREES     # -1e-15 % 360 rounds up to 360.0


class BlipField:
    """Fixed-size, ordered collection of blips for one surface size."""

    def __init__(self, rng: RandomSource, count: int = C.NUM_BLIPS,
                 mode: str = "targeted") -> None:
        if mode not in ("targeted", "lockstep"):
            raise ValueError(f"unknown motion mode {mode!r}")
        self.rng   = rng
        self.count = count
        self.mode  = mode
        self.width = self.height = 0.0
        self.blips: List[Blip] = []

    # ───────────────────────────────────────────────────── population
    def initialize(self, width: float, height: float) -> None:
        """Replace every blip with a fresh one keyed to the surface size."""
        self.width, self.height = float(width), float(height)
        w, h = self.width, self.height
        r = self.rng
        self.blips = [
            Blip(
                x=w / 2 + r.uniform() * r.sign() * w * 0.5,
                y=h / 2 + r.uniform() * r.sign() * h * 0.5,
                dx=r.uniform() * r.sign() * w * C.VELOCITY_SCALE,
                dy=r.uniform() * r.sign() * h * C.VELOCITY_SCALE,
                # (0, 1] keeps every radius positive
                radius=(1.0 - r.uniform()) * min(w, h) * C.RADIUS_SCALE,
            )
            for _ in range(self.count)
        ]

    @property
    def center(self) -> Tuple[float, float]:
        return self.width / 2, self.height / 2

    # ───────────────────────────────────────────────────── tick rules
    def target_degree(self, blip: Blip) -> int:
        """Bearing of the spot the blip will hop to next."""
        return heading_degree(*blip.next_position(), *self.center)

    def should_move(self, blip: Blip, angle: int) -> bool:
        return blip.pause < 1 and self.target_degree(blip) == angle

    def update(self, angle: int) -> None:
        """Advance every blip by one sweep tick at ``angle``."""
        angle = int(angle)
        fading = angle % C.FADE_EVERY == 0

        if self.mode == "lockstep":
            # hop first, so a hop on a fade degree still dims
            if angle % (C.DEGREES - 1) == 0:
                for b in self.blips:
                    b.hop(pause=b.pause)
            if fading:
                for b in self.blips:
                    b.fade()
            return

        if fading:
            for b in self.blips:
                b.fade()
        for b in self.blips:
            if self.should_move(b, angle):
                b.hop()
            else:
                b.pause -= 1

    # ───────────────────────────────────────────────────── sequence API
    def __len__(self) -> int:
        return len(self.blips)

    def __iter__(self) -> Iterator[Blip]:
        return iter(self.blips)

    def __getitem__(self, idx: int) -> Blip:
        return self.blips[idx]
