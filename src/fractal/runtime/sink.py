from __future__ import annotations

from typing import Protocol

import pygame

from fractal.geometry import Point

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)


class RenderSink(Protocol):
    """Drawing surface the frame handlers render into."""

    def clear(self) -> None: ...

    def draw_line(self, start: Point, end: Point) -> None: ...

    def draw_dot(self, point: Point, radius: float) -> None: ...

    def get_size(self) -> tuple[int, int]: ...


def _pixels_per_unit(size: tuple[int, int]) -> float:
    width, height = size
    # The shorter side spans [-1, 1] so shapes keep their aspect ratio.
    return min(width, height) / 2.0


def turtle_to_screen(point: Point, size: tuple[int, int]) -> tuple[float, float]:
    """Map turtle coordinates (origin at the center, y up) to screen pixels."""

    width, height = size
    unit = _pixels_per_unit(size)
    return width / 2.0 + point.x * unit, height / 2.0 - point.y * unit


def screen_to_turtle(x: float, y: float, size: tuple[int, int]) -> Point:
    width, height = size
    unit = _pixels_per_unit(size)
    return Point((x - width / 2.0) / unit, (height / 2.0 - y) / unit)


class PygameSink:
    def __init__(
        self,
        surface: pygame.Surface,
        *,
        foreground: tuple[int, int, int] = BLACK,
        background: tuple[int, int, int] = WHITE,
        line_width: int = 1,
    ) -> None:
        self.surface = surface
        self.foreground = foreground
        self.background = background
        self.line_width = line_width

    def get_size(self) -> tuple[int, int]:
        return self.surface.get_size()

    def clear(self) -> None:
        self.surface.fill(self.background)

    def draw_line(self, start: Point, end: Point) -> None:
        size = self.get_size()
        pygame.draw.line(
            self.surface,
            self.foreground,
            turtle_to_screen(start, size),
            turtle_to_screen(end, size),
            self.line_width,
        )

    def draw_dot(self, point: Point, radius: float) -> None:
        x, y = turtle_to_screen(point, self.get_size())
        if radius < 1.0:
            pixel = (int(x), int(y))
            if self.surface.get_rect().collidepoint(pixel):
                self.surface.set_at(pixel, self.foreground)
            return
        pygame.draw.circle(self.surface, self.foreground, (x, y), radius)
