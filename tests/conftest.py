from collections.abc import Iterator

import pygame
import pytest
from hypothesis import HealthCheck, settings

from helpers.recording import RecordingSink

settings.register_profile(
    "default",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("default")


@pytest.fixture(autouse=True, scope="session")
def configure_sdl_video_driver() -> Iterator[None]:
    """Force pygame to use the dummy SDL driver so headless tests remain stable."""

    patcher = pytest.MonkeyPatch()
    patcher.setenv("SDL_VIDEODRIVER", "dummy")
    try:
        yield
    finally:
        patcher.undo()


@pytest.fixture(autouse=True)
def isolated_log_dir(monkeypatch: pytest.MonkeyPatch, tmp_path_factory) -> None:
    """Keep rotating log files out of the user's home directory."""

    monkeypatch.setenv("FRACTAL_LOG_DIR", str(tmp_path_factory.getbasetemp() / "logs"))


@pytest.fixture
def init_pygame() -> Iterator[None]:
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def recording_sink() -> RecordingSink:
    return RecordingSink()
