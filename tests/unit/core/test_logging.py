"""Unit tests for the logging helpers."""

import json
import logging
from datetime import UTC, datetime
from typing import Any

import pytest
from pytest_mock import MockerFixture

from src.core import logging as logging_module
from src.core.error_context import REDACTED
from src.core.logging import (
    InterceptHandler,
    format_console_with_context,
    redact_extra,
    serialize_for_json,
    setup_logging,
)


def _record(**overrides: Any) -> dict[str, Any]:
    level = type("Level", (), {"name": "INFO"})()
    record: dict[str, Any] = {
        "time": datetime(2026, 1, 1, tzinfo=UTC),
        "level": level,
        "message": "Account created",
        "name": "src.api.controllers.signup",
        "function": "handle",
        "line": 42,
        "extra": {},
        "exception": None,
    }
    record.update(overrides)
    return record


@pytest.mark.unit
class TestRedactExtra:
    """Test cases for redact_extra."""

    def test_redacts_sensitive_and_drops_internal(self) -> None:
        """Sensitive keys are redacted; private and empty keys are dropped."""
        extra = {
            "account_id": "1",
            "password": "secret",
            "_internal": "x",
            "param_name": None,
        }

        assert redact_extra(extra) == {"account_id": "1", "password": REDACTED}


@pytest.mark.unit
class TestFormatters:
    """Test cases for the console and JSON formatters."""

    def test_console_puts_priority_fields_first(self) -> None:
        """correlation_id leads and is shortened."""
        record = _record(
            extra={"account_id": "7", "correlation_id": "0123456789abcdef"}
        )

        line = format_console_with_context(record)

        assert line.index("correlation_id=01234567") < line.index("account_id=7")
        assert "0123456789abcdef" not in line

    def test_console_escapes_braces(self) -> None:
        """Braces in messages are escaped for Loguru."""
        line = format_console_with_context(_record(message="body {x}"))

        assert "body {{x}}" in line

    def test_console_never_shows_password(self) -> None:
        """Password values never reach a console line."""
        line = format_console_with_context(_record(extra={"password": "hunter2"}))

        assert "hunter2" not in line

    def test_json_line(self) -> None:
        """Records serialize as one JSON object with redacted extras."""
        record = _record(extra={"request_id": "req-1", "passwordConfirmation": "p"})

        entry = json.loads(serialize_for_json(record))

        assert entry["message"] == "Account created"
        assert entry["level"] == "INFO"
        assert entry["request_id"] == "req-1"
        assert entry["passwordConfirmation"] == REDACTED


@pytest.mark.unit
class TestSetupLogging:
    """Test cases for setup_logging."""

    def test_configures_once(self, mocker: MockerFixture, mock_settings: Any) -> None:
        """Only the first call replaces the sinks."""
        mocker.patch.object(logging_module._state, "configured", False)
        mock_remove = mocker.patch.object(logging_module.logger, "remove")
        mocker.patch.object(logging_module.logger, "add")
        mocker.patch.object(logging_module.logging, "basicConfig")

        setup_logging(mock_settings)
        setup_logging(mock_settings)

        mock_remove.assert_called_once()

    def test_intercepts_uvicorn(
        self, mocker: MockerFixture, mock_settings: Any
    ) -> None:
        """uvicorn loggers are routed through the intercept handler."""
        mocker.patch.object(logging_module._state, "configured", False)
        mocker.patch.object(logging_module.logger, "remove")
        mocker.patch.object(logging_module.logger, "add")
        mocker.patch.object(logging_module.logging, "basicConfig")

        setup_logging(mock_settings)

        handlers = logging.getLogger("uvicorn.access").handlers
        assert any(isinstance(h, InterceptHandler) for h in handlers)
