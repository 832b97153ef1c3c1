from __future__ import annotations

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame

from fractal.runtime.event_pump import EventPump
from fractal.runtime.handlers.base import WindowHandler
from fractal.runtime.sink import PygameSink
from fractal.utilities.env import Configuration
from fractal.utilities.logging import get_logger

logger = get_logger(__name__)

DEFAULT_TITLE = "fractal"


class GameLoop:
    """Drive a window handler: one ``render_frame`` call per displayed frame."""

    def __init__(
        self,
        handler: WindowHandler,
        *,
        size: tuple[int, int] | None = None,
        max_fps: int | None = None,
        title: str = DEFAULT_TITLE,
        event_pump: EventPump | None = None,
    ) -> None:
        self.handler = handler
        self.size = size if size is not None else Configuration.window_size()
        self.max_fps = max_fps if max_fps is not None else Configuration.max_fps()
        self.title = title
        self.event_pump = event_pump if event_pump is not None else EventPump()
        self.frame_number = 0
        self.running = False
        self.clock: pygame.time.Clock | None = None

    def start(self, max_frames: int | None = None) -> None:
        logger.info("Starting GameLoop for %s", self.handler.name)
        pygame.init()
        pygame.display.set_caption(self.title)
        pygame.display.set_mode(self.size, pygame.RESIZABLE | pygame.DOUBLEBUF)
        self.clock = pygame.time.Clock()

        subscription = self.event_pump.resized.subscribe(
            on_next=lambda _size: self.handler.window_resized()
        )
        self.running = True
        logger.info("Entering main loop.")
        try:
            self._run_main_loop(max_frames)
        finally:
            subscription.dispose()
            self.event_pump.dispose()
            pygame.quit()
            logger.info("GameLoop stopped after %d frames", self.frame_number)

    def render_once(self, screen: pygame.Surface) -> None:
        self.handler.render_frame(PygameSink(screen), self.frame_number)
        self.frame_number += 1

    def _run_main_loop(self, max_frames: int | None) -> None:
        assert self.clock is not None
        while self.running:
            self.running = self.event_pump.pump(self.running)
            if not self.running:
                break

            screen = pygame.display.get_surface()
            if screen is None:
                raise RuntimeError("GameLoop screen is not initialized")
            self.render_once(screen)
            pygame.display.flip()
            self.clock.tick(self.max_fps)

            if max_frames is not None and self.frame_number >= max_frames:
                self.running = False
