"""Seeded uniform floats and coin-flip directions for blip placement."""
from __future__ import annotations
import random
import time


class RandomSource:
    """
    Wraps one `random.Random` for the whole session.

    Seeded once, from the wall clock unless a seed is given; never
    reseeded afterwards.
    """

    def __init__(self, seed: int | None = None) -> None:
        self.seed = time.time_ns() if seed is None else seed
        self._rand = random.Random(self.seed)

    def uniform(self) -> float:
        """Float in [0, 1)."""
        return self._rand.random()

    def sign(self) -> int:
        """Random +1 or -1; usable as a left/right or up/down direction."""
        return 1 if self._rand.randrange(2) == 0 else -1
