"""Tests for toolscout/utils/logging.py."""

from __future__ import annotations

import json
import logging
import sys

import pytest

from toolscout.config import LoggingConfig
from toolscout.utils.logging import _JsonFormatter, configure_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestConfigureLogging:
    def test_level_applied(self, restore_root_logger):
        configure_logging(LoggingConfig(level="DEBUG"))
        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_file_handler_creates_parent(self, tmp_path, restore_root_logger):
        log_file = tmp_path / "logs" / "toolscout.log"
        configure_logging(LoggingConfig(log_file=str(log_file)))
        logging.getLogger("toolscout.test").warning("hello file")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert log_file.exists()
        assert "hello file" in log_file.read_text(encoding="utf-8")

    def test_json_format_applies_to_every_handler(self, tmp_path, restore_root_logger):
        configure_logging(LoggingConfig(json_format=True, log_file=str(tmp_path / "a.log")))
        handlers = logging.getLogger().handlers
        assert len(handlers) == 2
        assert all(isinstance(h.formatter, _JsonFormatter) for h in handlers)


class TestJsonFormatter:
    def test_record_is_one_json_object(self):
        record = logging.makeLogRecord({
            "name": "toolscout.quiz.matcher",
            "levelno": logging.DEBUG,
            "levelname": "DEBUG",
            "msg": "Scored %d tools",
            "args": (4,),
        })
        line = _JsonFormatter().format(record)
        assert "\n" not in line
        payload = json.loads(line)
        assert payload == {
            "ts": payload["ts"],
            "level": "DEBUG",
            "logger": "toolscout.quiz.matcher",
            "msg": "Scored 4 tools",
        }
        assert payload["ts"].endswith("Z")

    def test_exception_included(self):
        try:
            raise ValueError("boom")
        except ValueError:
            exc_info = sys.exc_info()
        record = logging.makeLogRecord({"msg": "failed", "exc_info": exc_info})
        payload = json.loads(_JsonFormatter().format(record))
        assert "ValueError: boom" in payload["exc"]
