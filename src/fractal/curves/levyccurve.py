from __future__ import annotations

import math
from enum import Enum, auto

from fractal.curves import START
from fractal.lindenmayer import LindenmayerSystemTurtleProgram
from fractal.programs.errors import check_iterations
from fractal.turtle.actions import Forward, SetPosition, Turn, TurtleAction

MAX_ITERATIONS = 20
ANGLE = math.pi / 4


class LevySymbol(Enum):
    F = auto()
    PLUS = auto()
    MINUS = auto()


class LevyCCurve(LindenmayerSystemTurtleProgram[LevySymbol]):
    def __init__(self, iteration: int) -> None:
        super().__init__(check_iterations("levyccurve", iteration, MAX_ITERATIONS))
        self.distance = math.sqrt(2.0) ** -iteration

    def initial(self) -> list[LevySymbol]:
        return [LevySymbol.F]

    def apply_rule(self, symbol: LevySymbol) -> list[LevySymbol]:
        match symbol:
            case LevySymbol.F:
                return [
                    LevySymbol.PLUS,
                    LevySymbol.F,
                    LevySymbol.MINUS,
                    LevySymbol.MINUS,
                    LevySymbol.F,
                    LevySymbol.PLUS,
                ]
            case _:
                return [symbol]

    def initialize_turtle(self) -> list[TurtleAction]:
        return [SetPosition(START)]

    def interpret_symbol(self, symbol: LevySymbol) -> list[TurtleAction]:
        match symbol:
            case LevySymbol.F:
                return [Forward(self.distance)]
            case LevySymbol.PLUS:
                return [Turn(ANGLE)]
            case LevySymbol.MINUS:
                return [Turn(-ANGLE)]


def build(iterations: int) -> LevyCCurve:
    return LevyCCurve(iterations)
