"""Tests for envelope query, metadata, and mapping helpers."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from packages.response_envelope.errors import (
    ErrorDetail,
    InvalidArgumentError,
    NullArgumentError,
    not_found_error,
    validation_error,
)
from packages.response_envelope.responses import (
    DataResponse,
    Response,
    is_failure,
    map_data,
    try_get_metadata,
    with_metadata,
)

_TIMESTAMP = datetime(2026, 1, 1, 12, 0, 0, tzinfo=UTC)


def _error(code: str) -> ErrorDetail:
    """Return a validation error with the given code."""
    return validation_error("Invalid input", code=code)


def test_is_failure_reflects_success_flag() -> None:
    """is_failure is the negation of success."""
    assert is_failure(Response.ok()) is False
    assert is_failure(Response.fail(_error("X"))) is True
    assert is_failure(DataResponse.fail_without_error_info()) is True


def test_with_metadata_adds_entry_without_mutating_source() -> None:
    """with_metadata should leave the original metadata untouched."""
    original = Response.ok(metadata={"a": 1})

    updated = with_metadata(original, "k", 123)

    assert original.metadata == {"a": 1}
    assert updated.metadata == {"a": 1, "k": 123}
    assert updated.metadata is not original.metadata

    with pytest.raises(TypeError):
        updated.metadata["k"] = 0  # type: ignore[index]


def test_with_metadata_creates_mapping_when_absent() -> None:
    """A response without metadata gains a single-entry mapping."""
    original = DataResponse[str].ok("data")

    updated = with_metadata(original, "k", "v")

    assert original.metadata is None
    assert updated.metadata == {"k": "v"}
    assert updated.data == "data"


def test_with_metadata_overwrites_existing_key() -> None:
    """Setting an existing key replaces its value in the copy only."""
    original = Response.ok(metadata={"k": "old"})

    updated = with_metadata(original, "k", "new")

    assert original.metadata == {"k": "old"}
    assert updated.metadata == {"k": "new"}


def test_with_metadata_carries_every_other_field() -> None:
    """The copy differs from its source only in metadata."""
    original = Response.fail_with_errors(
        [_error("A"), _error("B")],
        correlation_id="c",
        timestamp=_TIMESTAMP,
    )

    updated = with_metadata(original, "k", 1)

    assert updated.success is False
    assert updated.errors == original.errors
    assert updated.primary_error == original.primary_error
    assert updated.correlation_id == "c"
    assert updated.timestamp == _TIMESTAMP
    assert type(updated) is Response


@pytest.mark.parametrize("key", [None, "", "   "])
def test_with_metadata_rejects_blank_keys(key: str | None) -> None:
    """Metadata keys must be non-blank."""
    with pytest.raises(InvalidArgumentError):
        with_metadata(Response.ok(), key, 1)  # type: ignore[arg-type]


def test_with_metadata_rejects_missing_response() -> None:
    """with_metadata requires a response."""
    with pytest.raises(NullArgumentError):
        with_metadata(None, "k", 1)  # type: ignore[arg-type]


def test_try_get_metadata_returns_typed_value() -> None:
    """A present key with a matching type is found."""
    response = Response.ok(metadata={"count": 3})

    assert try_get_metadata(response, "count", int) == (True, 3)


def test_try_get_metadata_defaults_to_any_type() -> None:
    """Without an expected type any stored value is found."""
    response = Response.ok(metadata={"count": 3})

    assert try_get_metadata(response, "count") == (True, 3)


def test_try_get_metadata_does_not_treat_bool_as_int() -> None:
    """A stored bool is only found as a bool or under the default type."""
    response = Response.ok(metadata={"flag": True})

    assert try_get_metadata(response, "flag", int) == (False, None)
    assert try_get_metadata(response, "flag", bool) == (True, True)
    assert try_get_metadata(response, "flag") == (True, True)


@pytest.mark.parametrize(
    ("metadata", "key", "expected_type"),
    [
        (None, "count", int),
        ({"other": 1}, "count", int),
        ({"count": "3"}, "count", int),
        ({"count": 3}, "", int),
    ],
)
def test_try_get_metadata_misses_without_raising(
    metadata: dict[str, object] | None,
    key: str,
    expected_type: type,
) -> None:
    """Absent metadata, absent keys, and type mismatches are all plain misses."""
    response = Response.ok(metadata=metadata)

    assert try_get_metadata(response, key, expected_type) == (False, None)


def test_map_data_applies_mapper_on_success() -> None:
    """The mapped envelope carries mapper(data) and the source's context."""
    source = DataResponse[int].ok(
        21,
        correlation_id="c",
        metadata={"k": "v"},
        timestamp=_TIMESTAMP,
    )

    mapped = map_data(source, lambda value: str(value * 2))

    assert mapped.success is True
    assert mapped.data == "42"
    assert mapped.correlation_id == "c"
    assert mapped.metadata == {"k": "v"}
    assert mapped.timestamp == _TIMESTAMP


def test_map_data_passes_absent_payload_to_mapper() -> None:
    """The mapper receives None when the source has no data."""
    seen: list[object] = []

    def mapper(value: object) -> str:
        seen.append(value)
        return "filled"

    mapped = map_data(DataResponse.ok(), mapper)

    assert seen == [None]
    assert mapped.data == "filled"


def test_map_data_keeps_none_mapper_result_as_absent_data() -> None:
    """A None mapper result yields an envelope with no data."""
    mapped = map_data(DataResponse[int].ok(0), lambda _: None)

    assert mapped.success is True
    assert mapped.data is None


def test_map_data_preserves_error_list_on_failure() -> None:
    """Failures keep their full error list and context."""
    errors = [_error("A"), not_found_error("missing")]
    source = DataResponse[int].fail_with_errors(
        errors,
        correlation_id="c",
        metadata={"k": "v"},
        timestamp=_TIMESTAMP,
    )
    calls: list[object] = []

    mapped = map_data(source, calls.append)

    assert calls == []
    assert mapped.success is False
    assert mapped.errors == tuple(errors)
    assert mapped.primary_error == errors[0]
    assert mapped.correlation_id == "c"
    assert mapped.metadata == {"k": "v"}
    assert mapped.timestamp == _TIMESTAMP


def test_map_data_preserves_single_error_on_failure() -> None:
    """A single-error failure maps to a single-error failure."""
    error = _error("ONLY")
    source = DataResponse[str].fail(error, correlation_id="c", timestamp=_TIMESTAMP)

    mapped = map_data(source, lambda _: 42)

    assert mapped.success is False
    assert mapped.correlation_id == "c"
    assert mapped.errors == ()
    assert mapped.primary_error == error
    assert mapped.timestamp == _TIMESTAMP


def test_map_data_falls_back_to_failure_without_error_info() -> None:
    """A failure with no error detail stays a failure with no error detail."""
    source = DataResponse[str].fail_without_error_info(
        correlation_id="c",
        metadata={"k": "v"},
        timestamp=_TIMESTAMP,
    )

    mapped = map_data(source, lambda _: 42)

    assert mapped.success is False
    assert mapped.primary_error is None
    assert mapped.correlation_id == "c"
    assert mapped.metadata == {"k": "v"}
    assert mapped.timestamp == _TIMESTAMP


@pytest.mark.parametrize(
    ("response", "mapper"),
    [(None, str), (DataResponse.ok(1), None)],
)
def test_map_data_rejects_missing_arguments(response: object, mapper: object) -> None:
    """map_data requires both a response and a mapper."""
    with pytest.raises(NullArgumentError):
        map_data(response, mapper)  # type: ignore[arg-type]
