from __future__ import annotations

import pygame
import reactivex
from reactivex.subject import Subject

from fractal.utilities.logging import get_logger

logger = get_logger(__name__)

QUIT_KEYS = {pygame.K_ESCAPE, pygame.K_q}


class EventPump:
    """Process pygame events, publishing window resizes on ``resized``."""

    def __init__(self) -> None:
        self._resized: Subject[tuple[int, int]] = Subject()

    @property
    def resized(self) -> reactivex.Observable[tuple[int, int]]:
        return self._resized

    def pump(self, running: bool) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key in QUIT_KEYS:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                logger.info("Window resized to %dx%d", event.w, event.h)
                self._resized.on_next((event.w, event.h))
        return running

    def dispose(self) -> None:
        self._resized.on_completed()
