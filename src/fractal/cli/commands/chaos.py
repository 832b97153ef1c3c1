from typing import Annotated

import typer

from fractal.programs.errors import ConstructionError
from fractal.programs.registry import ChaosGameRegistry
from fractal.runtime.game_loop import GameLoop
from fractal.runtime.handlers.chaos import ChaosGameWindowHandler
from fractal.utilities.env import Configuration
from fractal.utilities.logging import get_logger

logger = get_logger(__name__)


def chaos_command(
    name: Annotated[str, typer.Argument(help="Which chaos game to play. See `fractal list`.")],
    dots_per_frame: Annotated[
        int | None,
        typer.Option("--dots-per-frame", min=1, help="Points plotted per frame."),
    ] = None,
    seed: Annotated[
        int | None,
        typer.Option("--seed", min=0, help="Seed for the random transform choices."),
    ] = None,
) -> None:
    registry = ChaosGameRegistry()
    try:
        game = registry.build(name)
    except ConstructionError as exc:
        logger.error("%s", exc)
        raise typer.Exit(code=1) from exc

    handler = ChaosGameWindowHandler(
        game,
        dots_per_frame if dots_per_frame is not None else Configuration.dots_per_frame(),
        seed=seed if seed is not None else Configuration.chaos_seed(),
        dot_radius=Configuration.dot_radius(),
    )
    GameLoop(handler, title=name).start()
