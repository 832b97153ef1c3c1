"""Curve programs. Every public module exposes ``build(iterations)``."""

from fractal.geometry import Point

# Open curves are drawn from START to END whatever the iteration.
START = Point(-0.5, 0.0)
END = Point(0.5, 0.0)
