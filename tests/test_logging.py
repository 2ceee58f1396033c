"""Tests for structured logging configuration."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest
import structlog
from structlog.testing import capture_logs

from outcome.errors import UnwrapError
from outcome.logging import configure_logging, get_logger
from outcome.result import Err, attempt

if TYPE_CHECKING:
    from collections.abc import Iterator


def _fail() -> None:
    raise RuntimeError("boom")


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_configure_logging_default(self) -> None:
        """configure_logging should work with defaults."""
        configure_logging()

        logger = structlog.get_logger()
        assert logger is not None

    def test_configure_logging_json_format(self, capsys: pytest.CaptureFixture[str]) -> None:
        """configure_logging should render JSON when asked to."""
        configure_logging(json_format=True, log_level="INFO")

        get_logger("json.test").info("json_event", key="value")

        line = capsys.readouterr().err.strip()
        payload = json.loads(line)
        assert payload["event"] == "json_event"
        assert payload["key"] == "value"
        assert payload["level"] == "info"

    def test_log_level_filters(self, capsys: pytest.CaptureFixture[str]) -> None:
        """configure_logging should drop events below the level."""
        configure_logging(log_level="WARNING")
        logger = get_logger("test")

        logger.info("hidden")
        logger.warning("shown")

        output = capsys.readouterr().err
        assert "hidden" not in output
        assert "shown" in output

    def test_defaults_come_from_settings(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Unset arguments should fall back to OutcomeSettings."""
        monkeypatch.setenv("OUTCOME_JSON_LOGS", "true")
        monkeypatch.setenv("OUTCOME_LOG_LEVEL", "debug")

        configure_logging()
        get_logger().debug("from_settings")

        payload = json.loads(capsys.readouterr().err.strip())
        assert payload["event"] == "from_settings"


class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_logger_with_name(self) -> None:
        """get_logger should accept a name."""
        configure_logging()

        logger = get_logger("test.module")

        assert logger is not None

    def test_logger_can_log_error(self) -> None:
        """Logger should be able to log error messages."""
        configure_logging()
        logger = get_logger("test")

        # Should not raise
        logger.error("error message", error_code=500)


class TestContextVars:
    """Tests for merging structlog context variables."""

    @pytest.fixture(autouse=True)
    def _clean_context(self) -> Iterator[None]:
        structlog.contextvars.clear_contextvars()
        yield
        structlog.contextvars.clear_contextvars()

    def test_bound_fields_are_merged(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Bound context variables should appear in subsequent events."""
        configure_logging(json_format=True, log_level="INFO")

        structlog.contextvars.bind_contextvars(request_id="123")
        get_logger().info("bound")

        payload = json.loads(capsys.readouterr().err.strip())
        assert payload["request_id"] == "123"

    def test_cleared_fields_are_dropped(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Cleared context variables should not appear."""
        configure_logging(json_format=True, log_level="INFO")

        structlog.contextvars.bind_contextvars(request_id="123")
        structlog.contextvars.clear_contextvars()
        get_logger().info("cleared")

        payload = json.loads(capsys.readouterr().err.strip())
        assert "request_id" not in payload


class TestPackageEvents:
    """Tests for the debug events emitted by the containers."""

    def test_silent_by_default(self) -> None:
        """No events are emitted unless OUTCOME_LOG_EVENTS is set."""
        with capture_logs() as logs:
            attempt(_fail)
            with pytest.raises(ValueError):
                Err("bad").unwrap()

        assert logs == []

    def test_exception_captured_event(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """attempt() reports captured exceptions when enabled."""
        monkeypatch.setenv("OUTCOME_LOG_EVENTS", "true")

        with capture_logs() as logs:
            attempt(_fail)

        assert logs == [
            {
                "event": "exception_captured",
                "func": "_fail",
                "error": "RuntimeError('boom')",
                "log_level": "debug",
            }
        ]

    def test_unwrap_failed_event(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Failed unwraps are reported when enabled."""
        monkeypatch.setenv("OUTCOME_LOG_EVENTS", "true")

        with capture_logs() as logs, pytest.raises(ValueError):
            Err("bad").expect("needed a value")

        assert logs[0]["event"] == "unwrap_failed"
        assert logs[0]["error"] == "needed a value"

    def test_invalid_settings_do_not_mask_captured_exception(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """A malformed OUTCOME_LOG_EVENTS still lets attempt() return Err."""
        monkeypatch.setenv("OUTCOME_LOG_EVENTS", "maybe")

        with capture_logs() as logs:
            result = attempt(_fail)

        assert result.is_err()
        assert isinstance(result.unwrap_err(), RuntimeError)
        assert logs == []

    def test_invalid_settings_do_not_mask_unwrap_error(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """A malformed setting still lets unwrap() and expect() raise UnwrapError."""
        monkeypatch.setenv("OUTCOME_LOG_LEVEL", "LOUD")

        with pytest.raises(UnwrapError, match="^bad$"):
            Err("bad").unwrap()
        with pytest.raises(UnwrapError, match="needed a value"):
            Err("bad").expect("needed a value")
