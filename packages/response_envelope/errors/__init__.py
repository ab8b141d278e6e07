"""Public error API for response envelopes."""

from . import codes
from .arguments import (
    ArgumentError,
    InvalidArgumentError,
    NullArgumentError,
    require_key,
    require_not_none,
)
from .factories import (
    dependency_error,
    internal_error,
    not_found_error,
    policy_error,
    validation_error,
)
from .normalize import exception_to_error
from .types import ErrorCategory, ErrorDetail

__all__ = [
    "ArgumentError",
    "ErrorCategory",
    "ErrorDetail",
    "InvalidArgumentError",
    "NullArgumentError",
    "codes",
    "dependency_error",
    "exception_to_error",
    "internal_error",
    "not_found_error",
    "policy_error",
    "require_key",
    "require_not_none",
    "validation_error",
]
