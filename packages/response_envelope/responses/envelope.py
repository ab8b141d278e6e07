"""Immutable response envelopes describing the outcome of one operation.

``Response`` carries no payload; ``DataResponse[T]`` adds an optional ``data``
value. Both are frozen pydantic models built through named classmethod
factories. Attached metadata is held in a read-only mapping. Derived copies are
produced with ``model_copy(update=...)`` so every field not named in the update
carries over from the source instance.
"""

from __future__ import annotations

from datetime import UTC, datetime
from types import MappingProxyType
from typing import Any, Generic, Iterable, Mapping, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_serializer,
    field_validator,
    model_validator,
)

from packages.response_envelope.errors import (
    ErrorDetail,
    InvalidArgumentError,
    require_not_none,
)
from packages.response_envelope.logging import (
    correlation_context,
    fields,
    get_logger,
    log_context,
)
from packages.response_envelope.results import ResultLike


T = TypeVar("T")
ResponseT = TypeVar("ResponseT", bound="BaseResponse")

_LOGGER = get_logger(__name__)


def utc_now() -> datetime:
    """Return the current UTC timestamp."""
    return datetime.now(UTC)


def normalize_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def freeze_metadata(metadata: Mapping[str, Any] | None) -> Mapping[str, Any] | None:
    """Return a read-only copy of ``metadata``, or ``None`` when absent."""
    if metadata is None:
        return None
    return MappingProxyType(dict(metadata))


class BaseResponse(BaseModel):
    """Fields, invariants, and failure factories shared by every envelope."""

    model_config = ConfigDict(frozen=True)

    success: bool
    error: ErrorDetail | None = None
    errors: tuple[ErrorDetail, ...] = ()
    timestamp: datetime = Field(default_factory=utc_now)
    correlation_id: str | None = None
    metadata: Mapping[str, Any] | None = None

    @field_validator("timestamp")
    @classmethod
    def _normalize_timestamp(cls, value: datetime) -> datetime:
        return normalize_utc(value)

    @field_validator("metadata")
    @classmethod
    def _freeze_metadata(cls, value: Mapping[str, Any] | None) -> Mapping[str, Any] | None:
        return freeze_metadata(value)

    @field_serializer("metadata")
    def _serialize_metadata(self, value: Mapping[str, Any] | None) -> dict[str, Any] | None:
        return None if value is None else dict(value)

    @model_validator(mode="after")
    def _reject_errors_on_success(self) -> "BaseResponse":
        """Successful envelopes never carry errors."""
        if self.success and (self.errors or self.error is not None):
            raise ValueError("successful responses cannot carry errors")
        return self

    @property
    def primary_error(self) -> ErrorDetail | None:
        """Return the first listed error, else the single stored error."""
        if self.errors:
            return self.errors[0]
        return self.error

    @classmethod
    def fail(
        cls: type[ResponseT],
        error: ErrorDetail,
        *,
        correlation_id: str | None = None,
        metadata: Mapping[str, Any] | None = None,
        timestamp: datetime | None = None,
    ) -> ResponseT:
        """Build a failed envelope carrying one error."""
        require_not_none(error, "error")
        return cls(
            success=False,
            error=error,
            correlation_id=correlation_id,
            metadata=metadata,
            **_timestamp_field(timestamp),
        )

    @classmethod
    def fail_with_errors(
        cls: type[ResponseT],
        errors: Iterable[ErrorDetail],
        *,
        correlation_id: str | None = None,
        metadata: Mapping[str, Any] | None = None,
        timestamp: datetime | None = None,
    ) -> ResponseT:
        """Build a failed envelope carrying every error in order.

        Raises ``InvalidArgumentError`` when ``errors`` is empty.
        """
        require_not_none(errors, "errors")
        collected = tuple(errors)
        if not collected:
            raise InvalidArgumentError(
                message="At least one error must be provided",
                argument="errors",
            )
        return cls(
            success=False,
            error=collected[0],
            errors=collected,
            correlation_id=correlation_id,
            metadata=metadata,
            **_timestamp_field(timestamp),
        )

    @classmethod
    def fail_without_error_info(
        cls: type[ResponseT],
        *,
        correlation_id: str | None = None,
        metadata: Mapping[str, Any] | None = None,
        timestamp: datetime | None = None,
    ) -> ResponseT:
        """Build a failed envelope with no error at all.

        Reserved for rebuilding failed state from external data that lost its
        error detail, for example a deserialized envelope or a mapped failure
        with nothing to carry. Every other failure path requires an error.
        """
        with log_context(
            {
                **correlation_context(correlation_id),
                fields.EVENT: fields.FAILURE_WITHOUT_ERROR_EVENT,
            }
        ):
            _LOGGER.warning("Building failed response without error info")
        return cls(
            success=False,
            correlation_id=correlation_id,
            metadata=metadata,
            **_timestamp_field(timestamp),
        )

    @classmethod
    def _failure_from_result(
        cls: type[ResponseT],
        result: ResultLike[Any],
        correlation_id: str | None,
    ) -> ResponseT:
        if result.errors:
            return cls.fail_with_errors(result.errors, correlation_id=correlation_id)
        if result.error is not None:
            return cls.fail(result.error, correlation_id=correlation_id)
        return cls.fail_without_error_info(correlation_id=correlation_id)


class Response(BaseResponse):
    """Envelope for operations that return no payload."""

    @classmethod
    def ok(
        cls,
        *,
        correlation_id: str | None = None,
        metadata: Mapping[str, Any] | None = None,
        timestamp: datetime | None = None,
    ) -> Response:
        """Build a successful envelope."""
        return cls(
            success=True,
            correlation_id=correlation_id,
            metadata=metadata,
            **_timestamp_field(timestamp),
        )

    @classmethod
    def from_result(
        cls,
        result: ResultLike[Any],
        *,
        correlation_id: str | None = None,
    ) -> Response:
        """Convert an operation result, ignoring any success value."""
        require_not_none(result, "result")
        if result.is_success:
            return cls.ok(correlation_id=correlation_id)
        return cls._failure_from_result(result, correlation_id)


class DataResponse(BaseResponse, Generic[T]):
    """Envelope for operations that return a payload.

    ``data`` is only ever set on success, and may be ``None`` there too.
    """

    data: T | None = None

    @model_validator(mode="after")
    def _reject_data_on_failure(self) -> "DataResponse[T]":
        """Failed envelopes never carry a payload."""
        if not self.success and self.data is not None:
            raise ValueError("failed responses cannot carry data")
        return self

    @classmethod
    def ok(
        cls,
        data: T | None = None,
        *,
        correlation_id: str | None = None,
        metadata: Mapping[str, Any] | None = None,
        timestamp: datetime | None = None,
    ) -> DataResponse[T]:
        """Build a successful envelope around ``data``."""
        return cls(
            success=True,
            data=data,
            correlation_id=correlation_id,
            metadata=metadata,
            **_timestamp_field(timestamp),
        )

    @classmethod
    def from_result(
        cls,
        result: ResultLike[T],
        *,
        correlation_id: str | None = None,
    ) -> DataResponse[T]:
        """Convert an operation result, carrying its value on success."""
        require_not_none(result, "result")
        if result.is_success:
            return cls.ok(result.value, correlation_id=correlation_id)
        return cls._failure_from_result(result, correlation_id)


def _timestamp_field(timestamp: datetime | None) -> dict[str, datetime]:
    """Return the ``timestamp`` override, or nothing so the default applies."""
    if timestamp is None:
        return {}
    return {"timestamp": timestamp}
