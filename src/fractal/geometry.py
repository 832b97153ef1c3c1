from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def point_at(self, vector: "Vector") -> "Point":
        return point_at(self, vector)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True)
class Vector:
    """A direction in radians and a distance, relative to some origin."""

    direction: float
    magnitude: float


def point_at(origin: Point, vector: Vector) -> Point:
    """Return the point ``vector.magnitude`` away from ``origin`` along ``vector.direction``."""

    return Point(
        x=origin.x + vector.magnitude * math.cos(vector.direction),
        y=origin.y + vector.magnitude * math.sin(vector.direction),
    )
