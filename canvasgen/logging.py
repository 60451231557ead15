"""Logging setup shared by the canvasgen CLI and service."""

from __future__ import annotations

import logging
from pathlib import Path

ROOT_LOGGER = "canvasgen"
CONSOLE_FORMAT = "[canvasgen] %(levelname)s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``canvasgen.<name>``, or the package root logger when no name is given."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}" if name else ROOT_LOGGER)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Route canvasgen records to stderr and, when requested, append them to ``log_file``.

    Calling this again replaces the previous handlers, so one process can run
    several commands without duplicating output.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        # File sink always records debug detail, whatever the console level.
        sink = logging.FileHandler(log_file, encoding="utf-8")
        sink.setLevel(logging.DEBUG)
        sink.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(sink)
        logger.setLevel(logging.DEBUG)
        console.setLevel(level)

    return logger


__all__ = ["configure_logging", "get_logger"]
