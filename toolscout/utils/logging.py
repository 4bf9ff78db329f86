"""
Logging setup for toolscout.

``configure_logging(config)`` runs once per CLI command, before any scoring.
Library modules only ever do ``logger = logging.getLogger(__name__)``.

``[logging] json_format = true`` switches every handler to one JSON object
per line::

    {"ts": "2026-03-01T09:30:00Z", "level": "WARNING",
     "logger": "toolscout.quiz.subscription", "msg": "Quiz subscription failed: ..."}
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from toolscout.config import LoggingConfig

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

# Third-party loggers that are chatty at INFO.
_QUIET_LOGGERS = ("httpx", "httpcore")


class _JsonFormatter(logging.Formatter):
    """``ts``, ``level``, ``logger`` and ``msg``, plus ``exc`` when present."""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload = {
            "ts": created.strftime(LOG_DATE_FORMAT),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def _make_formatter(json_format: bool) -> logging.Formatter:
    if json_format:
        return _JsonFormatter()
    return logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)


def configure_logging(config: "LoggingConfig") -> None:
    """Point the root logger at stdout and, optionally, a log file.

    Replaces any handlers installed by an earlier call.

    Args:
        config: ``AppConfig.logging``. ``log_file`` parent directories are
            created on demand.
    """
    level = getattr(logging, config.level.upper(), logging.INFO)
    formatter = _make_formatter(config.json_format)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)

    logging.basicConfig(level=level, handlers=handlers, force=True)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
