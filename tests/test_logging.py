"""Tests for structlog configuration (utils/logging.py)."""

from __future__ import annotations

import importlib
import io
import json
import logging

import pytest
import structlog

from days_between.utils import logging as logging_module
from days_between.utils.logging import PACKAGE_LOGGER, configure_logging, get_logger


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.DEBUG

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False)
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.WARNING

    def test_json_mode_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        get_logger("days_between.test").info("json test", answer=42)
        parsed = json.loads(capsys.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "info"
        assert parsed["logger"] == "days_between.test"
        assert "timestamp" in parsed

    def test_stdlib_records_get_structured_fields(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("days_between.plain").debug("plain record")
        parsed = json.loads(capsys.readouterr().err.strip())
        assert parsed["event"] == "plain record"
        assert parsed["level"] == "debug"

    def test_debug_suppressed_when_not_verbose(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        configure_logging(verbose=False, log_json=True)
        get_logger("days_between.test").debug("hidden")
        assert capsys.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        configure_logging(verbose=True)
        configure_logging(verbose=True)
        handlers = logging.getLogger(PACKAGE_LOGGER).handlers
        assert len([h for h in handlers if h.get_name() == "days_between.stderr"]) == 1


class TestHostConfiguration:
    def test_import_leaves_host_structlog_config_alone(self) -> None:
        stream = io.StringIO()
        factory = structlog.PrintLoggerFactory(stream)
        structlog.configure(
            processors=[structlog.processors.KeyValueRenderer()],
            logger_factory=factory,
        )

        importlib.reload(logging_module)
        parser_module = importlib.reload(importlib.import_module("days_between.core.parser"))

        assert structlog.get_config()["logger_factory"] is factory

        parser_module.parse_date("2020-01-01")
        structlog.get_logger("host").warning("host_event", k=1)
        lines = stream.getvalue().splitlines()
        assert len(lines) == 1
        assert "event='host_event'" in lines[0]
        assert "k=1" in lines[0]

    def test_package_loggers_ignore_host_processors(self) -> None:
        stream = io.StringIO()
        structlog.configure(
            processors=[structlog.processors.KeyValueRenderer()],
            logger_factory=structlog.PrintLoggerFactory(stream),
        )
        logger = get_logger("days_between.test")
        logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG)
        logging.getLogger(PACKAGE_LOGGER).propagate = False

        logger.debug("hidden_from_host")

        assert stream.getvalue() == ""
