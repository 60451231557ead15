"""Tests for canvasgen.logging."""

from __future__ import annotations

import logging
from pathlib import Path

from canvasgen.logging import configure_logging, get_logger


def test_get_logger_nests_under_package_logger() -> None:
    assert get_logger().name == "canvasgen"
    assert get_logger("remover").name == "canvasgen.remover"


def test_configure_logging_does_not_stack_handlers() -> None:
    configure_logging()
    logger = configure_logging(verbose=True)

    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG


def test_log_file_records_debug_detail_while_console_stays_at_info(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "canvasgen.log"
    logger = configure_logging(log_file=log_file)

    get_logger("extraction").debug("located card")
    get_logger("orchestrator").info("generated card")

    console, sink = logger.handlers
    assert console.level == logging.INFO
    assert sink.level == logging.DEBUG
    text = log_file.read_text(encoding="utf-8")
    assert "DEBUG canvasgen.extraction: located card" in text
    assert "INFO canvasgen.orchestrator: generated card" in text
