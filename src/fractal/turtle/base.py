from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Iterator

from fractal.geometry import Point, Vector, point_at
from fractal.turtle.actions import (Forward, PenDown, PenUp, SetHeading,
                                    SetPosition, Turn, TurtleAction)
from fractal.turtle.chunks import TurtleCollectToNextForwardIterator
from fractal.turtle.state import TurtleState

FULL_TURN = 2.0 * math.pi


class Turtle(ABC):
    """Capability set every drawing backend implements."""

    @abstractmethod
    def forward(self, distance: float) -> None: ...

    @abstractmethod
    def set_position(self, point: Point) -> None: ...

    @abstractmethod
    def set_heading(self, radians: float) -> None: ...

    @abstractmethod
    def turn(self, radians: float) -> None: ...

    @abstractmethod
    def pen_down(self) -> None: ...

    @abstractmethod
    def pen_up(self) -> None: ...

    def perform(self, action: TurtleAction) -> None:
        match action:
            case Forward(distance=distance):
                self.forward(distance)
            case SetPosition(point=point):
                self.set_position(point)
            case SetHeading(radians=radians):
                self.set_heading(radians)
            case Turn(radians=radians):
                self.turn(radians)
            case PenDown():
                self.pen_down()
            case PenUp():
                self.pen_up()
            case _:
                raise TypeError(f"Unknown turtle action: {action!r}")


class StateTurtle(Turtle):
    """Turtle that keeps its pose in a ``TurtleState`` and hands visible segments to ``_draw_line``."""

    def __init__(self, state: TurtleState | None = None) -> None:
        self.state = state if state is not None else TurtleState.initial()

    def _draw_line(self, start: Point, end: Point) -> None:
        pass

    def forward(self, distance: float) -> None:
        start = self.state.position
        end = point_at(start, Vector(direction=self.state.heading, magnitude=distance))
        if self.state.pen_down:
            self._draw_line(start, end)
        # The turtle moves even when nothing is drawn.
        self.state.position = end

    def set_position(self, point: Point) -> None:
        self.state.position = point

    def set_heading(self, radians: float) -> None:
        self.state.heading = radians

    def turn(self, radians: float) -> None:
        heading = (self.state.heading + radians) % FULL_TURN
        # A tiny negative sum rounds up to exactly FULL_TURN.
        self.state.heading = 0.0 if heading >= FULL_TURN else heading

    def pen_down(self) -> None:
        self.state.pen_down = True

    def pen_up(self) -> None:
        self.state.pen_down = False


class TurtleProgram(ABC):
    """Something that can drive a turtle: a pose setup plus a restartable action stream."""

    @abstractmethod
    def init_turtle(self) -> list[TurtleAction]:
        """Actions that put the turtle in its starting pose."""

    @abstractmethod
    def turtle_program_iter(self) -> Iterator[TurtleAction]:
        """Return a fresh iterator over the program, starting from the beginning."""

    def collect_to_next_forward(self) -> TurtleCollectToNextForwardIterator:
        return TurtleCollectToNextForwardIterator(self.turtle_program_iter())

    @property
    def name(self) -> str:
        return self.__class__.__name__
