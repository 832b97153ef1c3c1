from typing import Annotated

import typer

from fractal.programs.errors import ConstructionError
from fractal.programs.registry import CurveRegistry
from fractal.runtime.game_loop import GameLoop
from fractal.runtime.handlers.turtle import construct_turtle_window_handler
from fractal.utilities.env import Configuration, RenderMode
from fractal.utilities.logging import get_logger

logger = get_logger(__name__)


def curve_command(
    name: Annotated[str, typer.Argument(help="Which curve to draw. See `fractal list`.")],
    iterations: Annotated[
        int, typer.Argument(help="The iteration of the curve to draw.", min=0)
    ],
    animate: Annotated[
        bool | None,
        typer.Option(
            "--animate/--no-animate",
            help="Animate the drawing instead of drawing it all at once.",
        ),
    ] = None,
    lines_per_frame: Annotated[
        int | None,
        typer.Option("--lines-per-frame", min=1, help="Line segments added per frame."),
    ] = None,
) -> None:
    registry = CurveRegistry()
    try:
        program = registry.build(name, iterations)
    except ConstructionError as exc:
        logger.error("%s", exc)
        raise typer.Exit(code=1) from exc

    if animate is None:
        animate = Configuration.render_mode() == RenderMode.ANIMATED
    pace = 0
    if animate:
        pace = lines_per_frame if lines_per_frame is not None else Configuration.lines_per_frame()

    handler = construct_turtle_window_handler(program, pace)
    GameLoop(handler, title=f"{name} ({iterations})").start()
