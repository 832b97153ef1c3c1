import typer

from fractal.programs.registry import ChaosGameRegistry, CurveRegistry


def list_programs_command() -> None:
    """Print the available curves and chaos games."""

    typer.echo("Curves:")
    for name in CurveRegistry().names():
        typer.echo(f"  {name}")
    typer.echo("Chaos games:")
    for name in ChaosGameRegistry().names():
        typer.echo(f"  {name}")
