"""Tests for structlog wiring of the shapecast logger tree."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from shapecast.config.logging import LOGGER_NAME, configure_logging
from shapecast.domain.primitives import number
from shapecast.domain.records import record


def _json_lines(err: str) -> list[dict[str, object]]:
    return [json.loads(line) for line in err.splitlines() if line.strip()]


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        logger = configure_logging(verbose=True)
        assert logger.name == LOGGER_NAME
        assert logger.level == logging.DEBUG

    def test_non_verbose_sets_warning(self) -> None:
        assert configure_logging(verbose=False).level == logging.WARNING

    def test_leaves_root_logger_alone(self) -> None:
        root = logging.getLogger()
        handlers = root.handlers[:]
        level = root.level
        configure_logging(verbose=True, log_json=True)
        assert root.handlers == handlers
        assert root.level == level
        assert logging.getLogger(LOGGER_NAME).propagate is False

    def test_repeated_calls_replace_handler(self) -> None:
        configure_logging(verbose=True, log_json=False)
        logger = configure_logging(verbose=True, log_json=True)
        assert len(logger.handlers) == 1

    def test_console_mode_smoke(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=False)
        structlog.get_logger("shapecast.test").warning("hello world", key="val")
        assert "hello world" in capfd.readouterr().err


class TestJsonRecords:
    def test_structlog_event(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("shapecast.test").warning("json test", answer=42)
        (parsed,) = _json_lines(capfd.readouterr().err)
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "shapecast.test"
        assert "timestamp" in parsed

    def test_bound_context_reaches_stdlib_records(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)

        with structlog.contextvars.bound_contextvars(target="pkg.schemas:user"):
            record({"a": number(0)})

        (parsed,) = _json_lines(capfd.readouterr().err)
        assert parsed["event"] == "Built record validator: fields=['a']"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "shapecast.domain.records"
        assert parsed["target"] == "pkg.schemas:user"

    def test_validation_never_logs(self, capfd: pytest.CaptureFixture[str]) -> None:
        validate = record({"a": number(0)})
        configure_logging(verbose=True, log_json=True)

        validate({"a": "not a number"})
        validate(None)

        assert capfd.readouterr().err == ""

    def test_other_loggers_not_captured(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("someapp").debug("host noise")
        assert capfd.readouterr().err == ""
