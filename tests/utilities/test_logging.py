"""Tests for the shared fractal logger setup."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from fractal.utilities.logging import LOG_FILENAME, get_logger, set_log_level


class TestGetLogger:
    def test_loggers_share_one_rotating_file(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        monkeypatch.setenv("FRACTAL_LOG_DIR", str(tmp_path))

        first = get_logger("fractal.tests.logging.first")
        second = get_logger("fractal.tests.logging.second")
        first.warning("from first")
        second.warning("from second")
        for handler in first.handlers:
            handler.flush()

        contents = (tmp_path / LOG_FILENAME).read_text()
        assert "fractal.tests.logging.first - WARNING - from first" in contents
        assert "fractal.tests.logging.second - WARNING - from second" in contents
        assert first.handlers[-1] is second.handlers[-1]
        assert not first.propagate

    def test_repeated_calls_do_not_stack_handlers(self) -> None:
        logger = get_logger("fractal.tests.logging.repeat")
        handler_count = len(logger.handlers)

        assert get_logger("fractal.tests.logging.repeat") is logger
        assert len(logger.handlers) == handler_count

    def test_log_level_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "debug")

        assert get_logger("fractal.tests.logging.env").level == logging.DEBUG


class TestSetLogLevel:
    def test_updates_existing_and_future_loggers(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("LOG_LEVEL", "INFO")
        existing = get_logger("fractal.tests.logging.existing")

        try:
            assert set_log_level("warning") == logging.WARNING
            assert existing.level == logging.WARNING
            assert get_logger("fractal.tests.logging.later").level == logging.WARNING
        finally:
            set_log_level(logging.INFO)

    def test_unknown_level_falls_back_to_info(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("LOG_LEVEL", "INFO")

        assert set_log_level("chatty") == logging.INFO
