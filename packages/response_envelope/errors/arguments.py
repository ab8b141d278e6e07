"""Exceptions raised when envelope helpers receive unusable arguments.

These are programming errors at the call site and are orthogonal to a failed
envelope, which describes a failed domain operation.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class ArgumentError(Exception):
    """Base error for rejected envelope, result, and paging arguments."""

    message: str
    argument: str

    def __str__(self) -> str:
        """Return the human-readable error message."""
        return f"{self.message} (argument: {self.argument})"


@dataclass(eq=False)
class InvalidArgumentError(ArgumentError, ValueError):
    """Argument is present but outside the accepted range or shape."""


@dataclass(eq=False)
class NullArgumentError(ArgumentError, TypeError):
    """Required argument is ``None``."""


def require_not_none(value: object, argument: str) -> None:
    """Raise ``NullArgumentError`` when ``value`` is ``None``."""
    if value is None:
        raise NullArgumentError(message="Value cannot be None", argument=argument)


def require_key(key: str | None, argument: str = "key") -> str:
    """Return ``key`` unchanged, rejecting ``None`` and blank strings."""
    if key is None or not key.strip():
        raise InvalidArgumentError(
            message="Value cannot be None, empty, or whitespace",
            argument=argument,
        )
    return key
