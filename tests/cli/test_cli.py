"""Tests for the ``fractal`` command line."""

from __future__ import annotations

import logging

import pytest
from typer.testing import CliRunner

from fractal.cli.commands import chaos as chaos_module
from fractal.cli.commands import curve as curve_module
from fractal.loop import app
from fractal.runtime.handlers.base import WindowHandler
from fractal.runtime.handlers.chaos import ChaosGameWindowHandler
from fractal.runtime.handlers.turtle import (
    DoubleBufferedAnimatedWindowHandler, DoubleBufferedWindowHandler)
from fractal.utilities.logging import set_log_level

runner = CliRunner()


class FakeGameLoop:
    """Stand-in for the pygame loop that records what it was asked to run."""

    started: list["FakeGameLoop"] = []

    def __init__(self, handler: WindowHandler, *, title: str) -> None:
        self.handler = handler
        self.title = title

    def start(self) -> None:
        FakeGameLoop.started.append(self)


@pytest.fixture
def fake_game_loop(monkeypatch: pytest.MonkeyPatch) -> type[FakeGameLoop]:
    FakeGameLoop.started = []
    monkeypatch.setattr(curve_module, "GameLoop", FakeGameLoop)
    monkeypatch.setattr(chaos_module, "GameLoop", FakeGameLoop)
    monkeypatch.delenv("FRACTAL_RENDER_MODE", raising=False)
    monkeypatch.delenv("FRACTAL_LINES_PER_FRAME", raising=False)
    return FakeGameLoop


class TestListCommand:
    def test_lists_every_program(self) -> None:
        result = runner.invoke(app, ["list"])

        assert result.exit_code == 0
        for name in [
            "cesaro",
            "cesarotri",
            "dragon",
            "kochcurve",
            "levyccurve",
            "terdragon",
            "barnsleyfern",
            "sierpinski",
        ]:
            assert f"  {name}" in result.output


class TestCurveCommand:
    def test_animated_by_default(self, fake_game_loop: type[FakeGameLoop]) -> None:
        result = runner.invoke(app, ["curve", "kochcurve", "3", "--lines-per-frame", "5"])

        assert result.exit_code == 0, result.output
        (loop,) = fake_game_loop.started
        assert isinstance(loop.handler, DoubleBufferedAnimatedWindowHandler)
        assert loop.handler.lines_per_frame == 5
        assert loop.title == "kochcurve (3)"

    def test_no_animate_draws_everything_at_once(
        self, fake_game_loop: type[FakeGameLoop]
    ) -> None:
        result = runner.invoke(app, ["curve", "dragon", "4", "--no-animate"])

        assert result.exit_code == 0, result.output
        (loop,) = fake_game_loop.started
        assert type(loop.handler) is DoubleBufferedWindowHandler

    def test_render_mode_from_environment(
        self, fake_game_loop: type[FakeGameLoop], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("FRACTAL_RENDER_MODE", "static")

        result = runner.invoke(app, ["curve", "levyccurve", "2"])

        assert result.exit_code == 0, result.output
        assert type(fake_game_loop.started[0].handler) is DoubleBufferedWindowHandler

    @pytest.mark.parametrize(
        "args",
        [
            ["curve", "snowflake", "3"],
            ["curve", "kochcurve", "11"],
            ["curve", "dragon", "25"],
        ],
    )
    def test_construction_errors_exit_nonzero(
        self, fake_game_loop: type[FakeGameLoop], args: list[str]
    ) -> None:
        result = runner.invoke(app, args)

        assert result.exit_code == 1
        assert fake_game_loop.started == []

    def test_negative_iterations_rejected_by_parser(
        self, fake_game_loop: type[FakeGameLoop]
    ) -> None:
        result = runner.invoke(app, ["curve", "kochcurve", "--", "-1"])

        assert result.exit_code != 0
        assert fake_game_loop.started == []


class TestChaosCommand:
    def test_builds_seeded_handler(
        self, fake_game_loop: type[FakeGameLoop], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("FRACTAL_CHAOS_SEED", raising=False)

        result = runner.invoke(
            app, ["chaos", "sierpinski", "--dots-per-frame", "25", "--seed", "3"]
        )

        assert result.exit_code == 0, result.output
        (loop,) = fake_game_loop.started
        assert isinstance(loop.handler, ChaosGameWindowHandler)
        assert loop.handler.dots_per_frame == 25
        assert loop.handler.seed == 3
        assert loop.title == "sierpinski"

    def test_unknown_game_exits_nonzero(self, fake_game_loop: type[FakeGameLoop]) -> None:
        result = runner.invoke(app, ["chaos", "mandelbrot"])

        assert result.exit_code == 1
        assert fake_game_loop.started == []


class TestLogLevelOption:
    def test_log_level_applies_before_command(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "INFO")

        try:
            result = runner.invoke(app, ["--log-level", "DEBUG", "list"])

            assert result.exit_code == 0
            assert logging.getLogger("fractal.programs.registry").level == logging.DEBUG
        finally:
            set_log_level(logging.INFO)
