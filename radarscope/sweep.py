"""The sweep clock: one integer degree per animation step, wrapping at 360."""
from __future__ import annotations
from typing import Iterator

from radarscope import constants as C


class SweepClock:
    def __init__(self, step: int = 1) -> None:
        if step <= 0 or C.DEGREES % step:
            raise ValueError(f"step must divide {C.DEGREES}, got {step}")
        self.step  = step
        self.angle = 0

    def advance(self) -> int:
        self.angle = (self.angle + self.step) % C.DEGREES
        return self.angle

    def reset(self) -> None:
        self.angle = 0

    def cycle(self) -> Iterator[int]:
        """Yield the angle for each step of one full rotation, advancing after each."""
        for _ in range(C.DEGREES // self.step):
            yield self.angle
            self.advance()
