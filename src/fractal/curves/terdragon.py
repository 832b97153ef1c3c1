from __future__ import annotations

import math
from enum import Enum, auto

from fractal.curves import START
from fractal.lindenmayer import LindenmayerSystemTurtleProgram
from fractal.programs.errors import check_iterations
from fractal.turtle.actions import (Forward, SetHeading, SetPosition, Turn,
                                    TurtleAction)

MAX_ITERATIONS = 13
ANGLE = 2.0 * math.pi / 3.0
# Every generation rotates the chord by 30 degrees.
ROTATION_PER_ITERATION = math.pi / 6.0


class TerdragonSymbol(Enum):
    F = auto()
    PLUS = auto()
    MINUS = auto()


class TerdragonFractal(LindenmayerSystemTurtleProgram[TerdragonSymbol]):
    def __init__(self, iteration: int) -> None:
        super().__init__(check_iterations("terdragon", iteration, MAX_ITERATIONS))
        self.distance = math.sqrt(3.0) ** -iteration

    def initial(self) -> list[TerdragonSymbol]:
        return [TerdragonSymbol.F]

    def apply_rule(self, symbol: TerdragonSymbol) -> list[TerdragonSymbol]:
        match symbol:
            case TerdragonSymbol.F:
                return [
                    TerdragonSymbol.F,
                    TerdragonSymbol.PLUS,
                    TerdragonSymbol.F,
                    TerdragonSymbol.MINUS,
                    TerdragonSymbol.F,
                ]
            case _:
                return [symbol]

    def initialize_turtle(self) -> list[TurtleAction]:
        return [
            SetPosition(START),
            SetHeading(-ROTATION_PER_ITERATION * self.iteration),
        ]

    def interpret_symbol(self, symbol: TerdragonSymbol) -> list[TurtleAction]:
        match symbol:
            case TerdragonSymbol.F:
                return [Forward(self.distance)]
            case TerdragonSymbol.PLUS:
                return [Turn(ANGLE)]
            case TerdragonSymbol.MINUS:
                return [Turn(-ANGLE)]


def build(iterations: int) -> TerdragonFractal:
    return TerdragonFractal(iterations)
