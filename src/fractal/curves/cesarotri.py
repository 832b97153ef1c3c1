from __future__ import annotations

import math
from enum import Enum, auto

from fractal.geometry import Point
from fractal.lindenmayer import LindenmayerSystemTurtleProgram
from fractal.programs.errors import check_iterations
from fractal.turtle.actions import Forward, SetPosition, Turn, TurtleAction

MAX_ITERATIONS = 9
ANGLE = math.radians(85.0)
CORNER_ANGLE = 2.0 * math.pi / 3.0
SHRINK = 1.0 / (2.0 + 2.0 * math.cos(ANGLE))
# Bottom-left corner of a unit triangle whose centroid is the origin.
TRIANGLE_START = Point(-0.5, -math.sqrt(3.0) / 6.0)


class CesaroTriSymbol(Enum):
    F = auto()
    PLUS = auto()
    MINUS = auto()
    CORNER = auto()


class CesaroTriFractal(LindenmayerSystemTurtleProgram[CesaroTriSymbol]):
    """Cesaro tears on the three sides of a triangle, pointing inward."""

    def __init__(self, iteration: int) -> None:
        super().__init__(check_iterations("cesarotri", iteration, MAX_ITERATIONS))
        self.distance = SHRINK**iteration

    def initial(self) -> list[CesaroTriSymbol]:
        f, corner = CesaroTriSymbol.F, CesaroTriSymbol.CORNER
        return [f, corner, f, corner, f]

    def apply_rule(self, symbol: CesaroTriSymbol) -> list[CesaroTriSymbol]:
        match symbol:
            case CesaroTriSymbol.F:
                f = CesaroTriSymbol.F
                plus, minus = CesaroTriSymbol.PLUS, CesaroTriSymbol.MINUS
                return [f, plus, f, minus, minus, f, plus, f]
            case _:
                return [symbol]

    def initialize_turtle(self) -> list[TurtleAction]:
        return [SetPosition(TRIANGLE_START)]

    def interpret_symbol(self, symbol: CesaroTriSymbol) -> list[TurtleAction]:
        match symbol:
            case CesaroTriSymbol.F:
                return [Forward(self.distance)]
            case CesaroTriSymbol.PLUS:
                return [Turn(ANGLE)]
            case CesaroTriSymbol.MINUS:
                return [Turn(-ANGLE)]
            case CesaroTriSymbol.CORNER:
                return [Turn(CORNER_ANGLE)]


def build(iterations: int) -> CesaroTriFractal:
    return CesaroTriFractal(iterations)
