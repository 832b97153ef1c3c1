from __future__ import annotations

from dataclasses import dataclass, field

from fractal.geometry import Point


@dataclass
class TurtleState:
    """Mutable pen context. A new turtle sits at the origin facing +x with the pen down."""

    position: Point = field(default_factory=lambda: Point(0.0, 0.0))
    heading: float = 0.0
    pen_down: bool = True

    @classmethod
    def initial(cls) -> "TurtleState":
        return cls()
