"""Unified logging configuration.

Engine modules only ever call ``logging.getLogger(__name__)`` and never
attach handlers themselves. Applications (scripts, services embedding the
engine) call :func:`setup_logging` once to get console and/or file output.

Usage:
    from tictactoe_engine.logging_config import setup_logging, LogContext

    logger = setup_logging("tictactoe_engine", level="DEBUG")

    with LogContext(logger, logging.WARNING):
        run_quiet_section()
"""

from __future__ import annotations

import logging
from pathlib import Path

from . import config

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
COMPACT_FORMAT = "%(levelname)s: %(message)s"
DETAILED_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(filename)s:%(lineno)d - %(funcName)s - %(message)s"
)
STRUCTURED_FORMAT = (
    "time=%(asctime)s logger=%(name)s level=%(levelname)s msg=%(message)s"
)

_FORMATS = {
    "default": DEFAULT_FORMAT,
    "compact": COMPACT_FORMAT,
    "detailed": DETAILED_FORMAT,
    "structured": STRUCTURED_FORMAT,
}


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        level = config.LOG_LEVEL
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        # getLevelName returns "Level X" for unknown names
        return resolved if isinstance(resolved, int) else logging.INFO
    return level


def setup_logging(
    name: str = "tictactoe_engine",
    level: int | str | None = None,
    format_style: str | None = None,
    console: bool = True,
    log_file: str | Path | None = None,
    log_dir: str | Path | None = None,
    propagate: bool = False,
) -> logging.Logger:
    """Configure and return a named logger.

    Calling this twice for the same name does not stack handlers.

    Args:
        name: Logger name (usually the package or script name)
        level: Level as int or name; defaults to ``TICTACTOE_LOG_LEVEL``
        format_style: One of default/compact/detailed/structured; unknown
            values fall back to default
        console: Attach a stream handler
        log_file: Explicit file to log to
        log_dir: Directory to create ``<name>.log`` in
        propagate: Whether records also reach ancestor loggers

    Returns:
        The configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(_resolve_level(level))
    logger.propagate = propagate

    style = format_style if format_style is not None else config.LOG_FORMAT
    formatter = logging.Formatter(_FORMATS.get(style, DEFAULT_FORMAT))

    if console and not any(
        type(h) is logging.StreamHandler for h in logger.handlers
    ):
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    target: Path | None = None
    if log_file is not None:
        target = Path(log_file)
    elif log_dir is not None:
        target = Path(log_dir) / f"{name}.log"

    if target is not None:
        target.parent.mkdir(parents=True, exist_ok=True)
        already_attached = any(
            isinstance(h, logging.FileHandler)
            and Path(h.baseFilename) == target.resolve()
            for h in logger.handlers
        )
        if not already_attached:
            file_handler = logging.FileHandler(target)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` without configuring it."""
    return logging.getLogger(name)


class LogContext:
    """Temporarily change a logger's level."""

    def __init__(self, logger: logging.Logger, level: int | str):
        self.logger = logger
        self.level = _resolve_level(level)
        self._previous = logger.level

    def __enter__(self) -> logging.Logger:
        self._previous = self.logger.level
        self.logger.setLevel(self.level)
        return self.logger

    def __exit__(self, exc_type, exc, tb) -> None:
        self.logger.setLevel(self._previous)
