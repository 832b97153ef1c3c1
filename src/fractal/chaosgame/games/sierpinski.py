from __future__ import annotations

import math

from fractal.chaosgame.base import AffineChaosGame, AffineTransform
from fractal.geometry import Point

HALF = ((0.5, 0.0), (0.0, 0.5))
HEIGHT = math.sqrt(3.0) / 2.0
VERTICES = (
    Point(-1.0, -HEIGHT),
    Point(1.0, -HEIGHT),
    Point(0.0, HEIGHT),
)


def build() -> AffineChaosGame:
    """Move halfway towards a random corner of the triangle."""

    return AffineChaosGame(
        [AffineTransform(HALF, (vertex.x / 2.0, vertex.y / 2.0)) for vertex in VERTICES]
    )
