"""Typed operation result consumed by ``from_result`` envelope factories."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Iterable, Protocol, Sequence, TypeVar

from packages.response_envelope.errors import (
    ErrorDetail,
    InvalidArgumentError,
    require_not_none,
)


T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class ResultLike(Protocol[T_co]):
    """Read-only view of an operation outcome.

    Envelope factories only read these four attributes, so any object exposing
    them can be converted.
    """

    @property
    def is_success(self) -> bool:
        """Return ``True`` when the operation succeeded."""

    @property
    def value(self) -> T_co | None:
        """Return the success value, if any."""

    @property
    def error(self) -> ErrorDetail | None:
        """Return the single failure error, if any."""

    @property
    def errors(self) -> Sequence[ErrorDetail]:
        """Return every failure error in order."""


@dataclass(frozen=True)
class Result(Generic[T]):
    """In-process outcome of one operation."""

    is_success: bool
    value: T | None = None
    error: ErrorDetail | None = None
    errors: tuple[ErrorDetail, ...] = field(default_factory=tuple)

    @property
    def is_failure(self) -> bool:
        """Return ``True`` when the operation failed."""
        return not self.is_success

    @classmethod
    def ok(cls, value: T | None = None) -> Result[T]:
        """Build a successful result."""
        return cls(is_success=True, value=value)

    @classmethod
    def fail(cls, error: ErrorDetail) -> Result[Any]:
        """Build a failed result carrying one error."""
        require_not_none(error, "error")
        return cls(is_success=False, error=error)

    @classmethod
    def fail_with_errors(cls, errors: Iterable[ErrorDetail]) -> Result[Any]:
        """Build a failed result carrying every error, first one as ``error``."""
        require_not_none(errors, "errors")
        collected = tuple(errors)
        if not collected:
            raise InvalidArgumentError(
                message="At least one error must be provided",
                argument="errors",
            )
        return cls(is_success=False, error=collected[0], errors=collected)
