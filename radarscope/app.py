"""
radarscope.app
==============

The frame loop.  One *cycle* is a full rotation of the beam: 360 steps,
each one clearing the surface, stroking the scope, the beam and the
blips, ticking the blip field, masking, presenting and sleeping a few
milliseconds.  Window events are drained between cycles, so resize and
key handlers never run while a cycle is in progress.
"""

from __future__ import annotations
import logging
import time

import pygame

from radarscope import config
from radarscope.renderer import RadarRenderer
from radarscope.simulation import RadarSimulation
from radarscope.window import Window

logger = logging.getLogger(__name__)


class FrameLoop:
    def __init__(self, window: Window, sim: RadarSimulation,
                 renderer: RadarRenderer, frame_delay: float = 0.002) -> None:
        self.window   = window
        self.sim      = sim
        self.renderer = renderer
        self.frame_delay = frame_delay
        self.cycles = 0
        window.on_resize = self.reshape

    def reshape(self, width: int, height: int) -> None:
        self.sim.reshape(width, height)

    # ───────────────────────────────────────── one step / one rotation
    def step(self, angle: int) -> None:
        gc, r, sim = self.window.canvas, self.renderer, self.sim
        w, h = sim.width, sim.height

        gc.clear()
        r.draw_scope(gc, w, h)
        r.draw_sweep(gc, w, h, angle)
        r.draw_blips(gc, sim.field)     # pre-update state
        sim.tick(angle)
        r.draw_mask(gc, w, h)

        self.window.present()
        if self.frame_delay:
            time.sleep(self.frame_delay)

    def run_cycle(self) -> None:
        for angle in self.sim.clock.cycle():
            self.step(angle)
        self.cycles += 1
        logger.debug("sweep cycle %d done", self.cycles)

    def run(self) -> None:
        while not self.window.should_close():
            self.run_cycle()
            self.window.poll_events()


def main(config_path: str | None = None) -> None:
    cfg = config.load(config_path)
    logging.basicConfig(
        level=cfg["log_level"].upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    window = None
    try:
        window = Window(cfg["width"], cfg["height"], cfg["title"])
        sim  = RadarSimulation.from_config(cfg)
        loop = FrameLoop(window, sim, RadarRenderer(cfg["mask_ring"]),
                         cfg["frame_delay_ms"] / 1000)
        if window.size != (sim.width, sim.height):
            loop.reshape(*window.size)
        loop.run()
    finally:
        if window is not None:
            window.close()
        pygame.quit()
