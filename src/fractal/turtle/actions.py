from __future__ import annotations

from dataclasses import dataclass

from fractal.geometry import Point


@dataclass(frozen=True)
class Forward:
    distance: float


@dataclass(frozen=True)
class SetPosition:
    point: Point


@dataclass(frozen=True)
class SetHeading:
    radians: float


@dataclass(frozen=True)
class Turn:
    radians: float


@dataclass(frozen=True)
class PenDown:
    pass


@dataclass(frozen=True)
class PenUp:
    pass


TurtleAction = Forward | SetPosition | SetHeading | Turn | PenDown | PenUp
