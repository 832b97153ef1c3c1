from __future__ import annotations

import math
from enum import Enum, auto

from fractal.curves import START
from fractal.lindenmayer import LindenmayerSystemTurtleProgram
from fractal.programs.errors import check_iterations
from fractal.turtle.actions import Forward, SetPosition, Turn, TurtleAction

MAX_ITERATIONS = 10
ANGLE = math.radians(85.0)
# Four segments of this length span one segment of the previous generation.
SHRINK = 1.0 / (2.0 + 2.0 * math.cos(ANGLE))


class CesaroSymbol(Enum):
    F = auto()
    PLUS = auto()
    MINUS = auto()


class CesaroFractal(LindenmayerSystemTurtleProgram[CesaroSymbol]):
    def __init__(self, iteration: int) -> None:
        super().__init__(check_iterations("cesaro", iteration, MAX_ITERATIONS))
        self.distance = SHRINK**iteration

    def initial(self) -> list[CesaroSymbol]:
        return [CesaroSymbol.F]

    def apply_rule(self, symbol: CesaroSymbol) -> list[CesaroSymbol]:
        match symbol:
            case CesaroSymbol.F:
                f = CesaroSymbol.F
                plus, minus = CesaroSymbol.PLUS, CesaroSymbol.MINUS
                return [f, plus, f, minus, minus, f, plus, f]
            case _:
                return [symbol]

    def initialize_turtle(self) -> list[TurtleAction]:
        return [SetPosition(START)]

    def interpret_symbol(self, symbol: CesaroSymbol) -> list[TurtleAction]:
        match symbol:
            case CesaroSymbol.F:
                return [Forward(self.distance)]
            case CesaroSymbol.PLUS:
                return [Turn(ANGLE)]
            case CesaroSymbol.MINUS:
                return [Turn(-ANGLE)]


def build(iterations: int) -> CesaroFractal:
    return CesaroFractal(iterations)
