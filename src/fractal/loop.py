import os

os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"

from typing import Annotated

import typer

from fractal.cli.commands.chaos import chaos_command
from fractal.cli.commands.curve import curve_command
from fractal.cli.commands.list_programs import list_programs_command
from fractal.utilities.logging import set_log_level

app = typer.Typer(help="Renders fractals in a window.")


@app.callback()
def configure(
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="Override LOG_LEVEL, e.g. DEBUG."),
    ] = None,
) -> None:
    if log_level is not None:
        set_log_level(log_level)


app.command(name="curve")(curve_command)
app.command(name="chaos")(chaos_command)
app.command(name="list")(list_programs_command)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
