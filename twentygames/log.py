"""Engine-wide logging set-up: one named logger with a rotating file sink."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOGGER_NAME = "engine"

#: Severity below DEBUG, for very chatty diagnostics.
TRACE = 5
logging.addLevelName(TRACE, "TRACE")

_PATTERN = "[%(asctime)s.%(msecs)03d] [%(level)s] %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass
class LogConfig:
    """Where and how much the engine logs."""

    # Relative paths resolve against the current working directory.
    file_path: Path = Path("engine.log")
    # Rotation happens when a write would push the active file past this size.
    max_file_bytes: int = 5 * 1024 * 1024
    max_files: int = 3
    level: int = logging.INFO


class _EngineFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        record.level = record.levelname.lower()
        return super().format(record)


def _drop_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.flush()
        handler.close()


def init(cfg: LogConfig | None = None) -> logging.Logger:
    """Configure the engine logger and return it.

    Calling again replaces the previous configuration. A missing parent
    directory for the log file raises rather than being silently ignored.
    """
    cfg = cfg if cfg is not None else LogConfig()

    handler = RotatingFileHandler(
        Path(cfg.file_path),
        maxBytes=cfg.max_file_bytes,
        backupCount=cfg.max_files,
        encoding="utf-8",
    )
    handler.setFormatter(_EngineFormatter(_PATTERN, _DATE_FORMAT))

    logger = logging.getLogger(LOGGER_NAME)
    _drop_handlers(logger)
    logger.addHandler(handler)
    logger.setLevel(cfg.level)
    logger.propagate = False
    return logger


def shutdown() -> None:
    """Flush and close every sink of the engine logger."""
    _drop_handlers(logging.getLogger(LOGGER_NAME))