from __future__ import annotations

from functools import cached_property
from pathlib import Path
from typing import TYPE_CHECKING, Callable

from fractal.programs.errors import UnknownProgramError
from fractal.utilities.logging import get_logger
from fractal.utilities.module_registry import discover_registry

if TYPE_CHECKING:
    from fractal.chaosgame.base import ChaosGame
    from fractal.turtle.base import TurtleProgram

logger = get_logger(__name__)

PACKAGE_ROOT = Path(__file__).resolve().parent.parent


class CurveRegistry:
    @cached_property
    def registry(self) -> dict[str, Callable[[int], "TurtleProgram"]]:
        return discover_registry(PACKAGE_ROOT / "curves", "fractal.curves")

    def names(self) -> list[str]:
        return sorted(self.registry)

    def get(self, name: str) -> Callable[[int], "TurtleProgram"] | None:
        return self.registry.get(name)

    def build(self, name: str, iterations: int) -> "TurtleProgram":
        factory = self.get(name)
        if factory is None:
            raise UnknownProgramError("curve", name, self.names())
        program = factory(iterations)
        logger.info("Constructed curve %s at iteration %d", name, iterations)
        return program


class ChaosGameRegistry:
    @cached_property
    def registry(self) -> dict[str, Callable[[], "ChaosGame"]]:
        return discover_registry(
            PACKAGE_ROOT / "chaosgame" / "games", "fractal.chaosgame.games"
        )

    def names(self) -> list[str]:
        return sorted(self.registry)

    def get(self, name: str) -> Callable[[], "ChaosGame"] | None:
        return self.registry.get(name)

    def build(self, name: str) -> "ChaosGame":
        factory = self.get(name)
        if factory is None:
            raise UnknownProgramError("chaos game", name, self.names())
        game = factory()
        logger.info("Constructed chaos game %s", name)
        return game
