"""Canonical error detail carried inside response envelopes.

Envelopes treat an ``ErrorDetail`` as an opaque value: they store, order, and
compare it, but never inspect its fields. The shape below is the one producers
in this package build and the one problem-detail payloads expose.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping


class ErrorCategory(str, Enum):
    """High-level categories for operation failures."""

    UNSPECIFIED = "unspecified"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    POLICY = "policy"
    DEPENDENCY = "dependency"
    INTERNAL = "internal"


@dataclass(frozen=True)
class ErrorDetail:
    """Structured error value stored on failed envelopes."""

    code: str
    message: str
    category: ErrorCategory = ErrorCategory.UNSPECIFIED
    retryable: bool = False
    metadata: Mapping[str, str] = field(default_factory=dict)
