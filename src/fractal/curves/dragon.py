from __future__ import annotations

import math
from collections.abc import Iterator

from fractal.curves import START
from fractal.programs.errors import check_iterations
from fractal.turtle.actions import (Forward, PenDown, PenUp, SetHeading,
                                    SetPosition, Turn, TurtleAction)
from fractal.turtle.base import TurtleProgram

MAX_ITERATIONS = 24
RIGHT_ANGLE = math.pi / 2
ROTATION_PER_ITERATION = math.pi / 4


def turn_direction(step: int) -> int:
    """Return +1 (left) or -1 (right) for the turn before segment ``step``.

    Paper-folding sequence: strip the trailing zero bits of ``step``; the
    curve turns right when what is left is 1 mod 4 and left when it is 3 mod 4.
    """

    if step <= 0:
        raise ValueError("step must be positive")
    while step % 2 == 0:
        step //= 2
    return -1 if step % 4 == 1 else 1


class DragonFractal(TurtleProgram):
    """Heighway dragon, generated directly from the bits of the segment index."""

    def __init__(self, iterations: int) -> None:
        self.iterations = check_iterations("dragon", iterations, MAX_ITERATIONS)
        self.distance = math.sqrt(2.0) ** -iterations

    @property
    def segment_count(self) -> int:
        return 2**self.iterations

    def init_turtle(self) -> list[TurtleAction]:
        return [
            PenUp(),
            SetPosition(START),
            SetHeading(ROTATION_PER_ITERATION * self.iterations),
            PenDown(),
        ]

    def turtle_program_iter(self) -> Iterator[TurtleAction]:
        yield Forward(self.distance)
        for step in range(1, self.segment_count):
            yield Turn(turn_direction(step) * RIGHT_ANGLE)
            yield Forward(self.distance)
        yield PenUp()


def build(iterations: int) -> DragonFractal:
    return DragonFractal(iterations)
