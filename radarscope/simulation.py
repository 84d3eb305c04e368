"""
radarscope.simulation
=====================

`RadarSimulation` owns every piece of mutable state the scope needs:
surface size, random source, blip field and sweep clock.  The frame
loop holds exactly one and hands it to the renderer each step.
"""

from __future__ import annotations
import logging

from radarscope import constants as C
from radarscope.blips import BlipField
from radarscope.rng import RandomSource
from radarscope.sweep import SweepClock

logger = logging.getLogger(__name__)


class RadarSimulation:
    def __init__(self, width: int = C.DEFAULT_SIZE[0], height: int = C.DEFAULT_SIZE[1],
                 num_blips: int = C.NUM_BLIPS, motion_mode: str = "targeted",
                 seed: int | None = None) -> None:
        self.rng   = RandomSource(seed)
        self.field = BlipField(self.rng, num_blips, motion_mode)
        self.clock = SweepClock()
        self.width, self.height = width, height
        logger.debug("random source seeded with %s", self.rng.seed)
        self.reshape(width, height)

    @classmethod
    def from_config(cls, cfg: dict) -> "RadarSimulation":
        return cls(cfg["width"], cfg["height"], cfg["num_blips"],
                   cfg["motion_mode"], cfg["seed"])

    @property
    def angle(self) -> int:
        return self.clock.angle

    def reshape(self, width: int, height: int) -> None:
        """New surface size → brand-new blip field keyed to it."""
        self.width, self.height = width, height
        self.field.initialize(width, height)
        logger.info("surface %dx%d, %d blips reinitialised",
                    width, height, len(self.field))

    def tick(self, angle: int) -> None:
        self.field.update(angle)
