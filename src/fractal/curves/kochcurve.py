from __future__ import annotations

import math
from enum import Enum, auto

from fractal.curves import START
from fractal.lindenmayer import LindenmayerSystemTurtleProgram
from fractal.programs.errors import check_iterations
from fractal.turtle.actions import Forward, SetPosition, Turn, TurtleAction

MAX_ITERATIONS = 10
ANGLE = math.pi / 3


class KochSymbol(Enum):
    F = auto()
    PLUS = auto()
    MINUS = auto()


class KochCurve(LindenmayerSystemTurtleProgram[KochSymbol]):
    def __init__(self, iteration: int) -> None:
        super().__init__(check_iterations("kochcurve", iteration, MAX_ITERATIONS))
        self.distance = 3.0 ** -iteration

    def initial(self) -> list[KochSymbol]:
        return [KochSymbol.F]

    def apply_rule(self, symbol: KochSymbol) -> list[KochSymbol]:
        match symbol:
            case KochSymbol.F:
                return [
                    KochSymbol.F,
                    KochSymbol.PLUS,
                    KochSymbol.F,
                    KochSymbol.MINUS,
                    KochSymbol.MINUS,
                    KochSymbol.F,
                    KochSymbol.PLUS,
                    KochSymbol.F,
                ]
            case _:
                return [symbol]

    def initialize_turtle(self) -> list[TurtleAction]:
        return [SetPosition(START)]

    def interpret_symbol(self, symbol: KochSymbol) -> list[TurtleAction]:
        match symbol:
            case KochSymbol.F:
                return [Forward(self.distance)]
            case KochSymbol.PLUS:
                return [Turn(ANGLE)]
            case KochSymbol.MINUS:
                return [Turn(-ANGLE)]


def build(iterations: int) -> KochCurve:
    return KochCurve(iterations)
