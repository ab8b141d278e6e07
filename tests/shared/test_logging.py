"""Tests for structured logging configuration and context propagation."""

from __future__ import annotations

import json
import logging
from typing import Iterator

import pytest

from packages.response_envelope.errors import ErrorDetail
from packages.response_envelope.logging import (
    ContextFilter,
    bind_context,
    clear_context,
    configure_logging,
    get_context,
    get_logger,
    log_context,
)
from packages.response_envelope.responses import DataResponse


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Drop handlers installed by tests and reset level and bound context."""
    root = logging.getLogger()
    level = root.level
    clear_context()
    yield
    clear_context()
    for handler in list(root.handlers):
        if any(isinstance(item, ContextFilter) for item in handler.filters):
            root.removeHandler(handler)
    root.setLevel(level)


def test_bind_context_skips_none_and_stringifies_values() -> None:
    """None values are ignored and other values become strings."""
    bind_context(correlation_id="c", attempt=2, skipped=None)

    assert get_context() == {"correlation_id": "c", "attempt": "2"}


def test_clear_context_removes_selected_keys() -> None:
    """clear_context drops only the named keys when given any."""
    bind_context(a="1", b="2")

    clear_context("a")

    assert get_context() == {"b": "2"}


def test_log_context_restores_previous_bindings() -> None:
    """log_context bindings disappear when the block exits."""
    bind_context(service="outer")

    with log_context({"correlation_id": "inner"}):
        assert get_context() == {"service": "outer", "correlation_id": "inner"}

    assert get_context() == {"service": "outer"}


def test_json_output_includes_bound_context(capsys: pytest.CaptureFixture[str]) -> None:
    """JSON records carry core fields plus the bound context."""
    configure_logging(level="INFO", json_output=True, service="svc", environment="test")

    with log_context({"correlation_id": "c"}):
        get_logger("envelope.test").info("hello")

    record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert record["message"] == "hello"
    assert record["level"] == "INFO"
    assert record["logger"] == "envelope.test"
    assert record["service"] == "svc"
    assert record["environment"] == "test"
    assert record["correlation_id"] == "c"


def test_plain_output_appends_context(capsys: pytest.CaptureFixture[str]) -> None:
    """Plain records end with sorted key=value pairs."""
    configure_logging(level="INFO", json_output=False)

    with log_context({"correlation_id": "c"}):
        get_logger("envelope.test").warning("plain")

    line = capsys.readouterr().out.strip().splitlines()[-1]
    assert "WARNING envelope.test plain" in line
    assert line.endswith("correlation_id=c")


def test_escape_hatch_warning_carries_correlation_id(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Failures built without error info log their correlation id."""
    configure_logging(level="WARNING", json_output=True)

    DataResponse[int].fail_without_error_info(correlation_id="corr-9")

    record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert record["correlation_id"] == "corr-9"
    assert record["event"] == "failure_without_error_info"


def test_configure_logging_replaces_existing_handlers() -> None:
    """Repeated configuration keeps a single stdout handler."""
    configure_logging()
    configure_logging()

    assert len(logging.getLogger().handlers) == 1


def test_error_details_are_not_logged_on_regular_failures(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Only the escape hatch logs; ordinary failures stay silent."""
    configure_logging(level="DEBUG", json_output=True)

    DataResponse[int].fail(ErrorDetail(code="X", message="x"))

    assert capsys.readouterr().out == ""
