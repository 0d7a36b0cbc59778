"""Unit tests for core.logger module.

Tests the structlog configuration:
- configure_logging() installs one root handler at the requested level
- JSON rendering when LOG_FORMAT=json
- Noisy third-party loggers are quieted
"""

import json
import logging

import pytest

from core.logger import (
    _get_log_level,
    _is_json_format,
    configure_logging,
    get_logger,
)


@pytest.fixture(autouse=True)
def _clean_root_logger():
    """Save and restore root logger state around each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)


@pytest.mark.unit
class TestLevelAndFormat:
    def test_explicit_level_wins(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("LOG_LEVEL", "ERROR")

        assert _get_log_level("debug") == logging.DEBUG

    def test_level_from_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("LOG_LEVEL", "WARNING")

        assert _get_log_level() == logging.WARNING

    def test_unknown_level_falls_back_to_info(self):
        assert _get_log_level("chatty") == logging.INFO

    def test_json_format(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("LOG_FORMAT", raising=False)

        assert _is_json_format("JSON") is True
        assert _is_json_format("console") is False
        assert _is_json_format() is False


@pytest.mark.unit
class TestConfigureLogging:
    def test_single_root_handler_at_level(self):
        configure_logging(level="WARNING", log_format="console")

        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.level == logging.WARNING

    def test_noisy_loggers_quieted(self):
        configure_logging(level="DEBUG")

        assert logging.getLogger("uvicorn.access").level == logging.WARNING
        assert logging.getLogger("aiosqlite").level == logging.WARNING

    def test_json_output_carries_event_and_fields(
        self, capsys: pytest.CaptureFixture[str]
    ):
        configure_logging(level="INFO", log_format="json")

        get_logger("tests.logger").info("race.created", race_id="abc")

        line = capsys.readouterr().out.strip().splitlines()[-1]
        parsed = json.loads(line)
        assert parsed["event"] == "race.created"
        assert parsed["race_id"] == "abc"
        assert parsed["level"] == "info"
