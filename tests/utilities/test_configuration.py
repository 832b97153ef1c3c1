"""Tests for the environment-backed configuration."""

from __future__ import annotations

import pytest

from fractal.utilities.env import Configuration, RenderMode
from fractal.utilities.env.chaosgame import DEFAULT_DOTS_PER_FRAME
from fractal.utilities.env.rendering import (DEFAULT_LINES_PER_FRAME,
                                             DEFAULT_MAX_FPS,
                                             DEFAULT_WINDOW_HEIGHT,
                                             DEFAULT_WINDOW_WIDTH)

FRACTAL_ENV_VARS = [
    "FRACTAL_MAX_FPS",
    "FRACTAL_WINDOW_WIDTH",
    "FRACTAL_WINDOW_HEIGHT",
    "FRACTAL_LINES_PER_FRAME",
    "FRACTAL_DOTS_PER_FRAME",
    "FRACTAL_DOT_RADIUS",
    "FRACTAL_CHAOS_SEED",
    "FRACTAL_RENDER_MODE",
]


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in FRACTAL_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestConfiguration:
    def test_defaults(self, clean_env: pytest.MonkeyPatch) -> None:
        assert Configuration.max_fps() == DEFAULT_MAX_FPS
        assert Configuration.window_size() == (DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT)
        assert Configuration.lines_per_frame() == DEFAULT_LINES_PER_FRAME
        assert Configuration.dots_per_frame() == DEFAULT_DOTS_PER_FRAME
        assert Configuration.chaos_seed() is None
        assert Configuration.render_mode() == RenderMode.ANIMATED

    def test_overrides(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("FRACTAL_WINDOW_WIDTH", "1024")
        clean_env.setenv("FRACTAL_WINDOW_HEIGHT", "768")
        clean_env.setenv("FRACTAL_LINES_PER_FRAME", "16")
        clean_env.setenv("FRACTAL_DOTS_PER_FRAME", "50")
        clean_env.setenv("FRACTAL_DOT_RADIUS", "2.5")
        clean_env.setenv("FRACTAL_CHAOS_SEED", "7")
        clean_env.setenv("FRACTAL_RENDER_MODE", " Static ")

        assert Configuration.window_size() == (1024, 768)
        assert Configuration.lines_per_frame() == 16
        assert Configuration.dots_per_frame() == 50
        assert Configuration.dot_radius() == 2.5
        assert Configuration.chaos_seed() == 7
        assert Configuration.render_mode() == RenderMode.STATIC

    @pytest.mark.parametrize(
        ("name", "value", "accessor"),
        [
            ("FRACTAL_MAX_FPS", "0", "max_fps"),
            ("FRACTAL_WINDOW_WIDTH", "wide", "window_size"),
            ("FRACTAL_LINES_PER_FRAME", "0", "lines_per_frame"),
            ("FRACTAL_DOTS_PER_FRAME", "-3", "dots_per_frame"),
            ("FRACTAL_DOT_RADIUS", "-1.0", "dot_radius"),
            ("FRACTAL_CHAOS_SEED", "-1", "chaos_seed"),
            ("FRACTAL_RENDER_MODE", "sometimes", "render_mode"),
        ],
    )
    def test_invalid_values_raise(
        self, clean_env: pytest.MonkeyPatch, name: str, value: str, accessor: str
    ) -> None:
        clean_env.setenv(name, value)

        with pytest.raises(ValueError, match=name):
            getattr(Configuration, accessor)()
