"""RFC 7807-style problem details built from response envelopes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from packages.response_envelope.config import ProblemDetailsSettings
from packages.response_envelope.errors import require_not_none

from .envelope import BaseResponse

_DEFAULT_SETTINGS = ProblemDetailsSettings()


@dataclass(frozen=True)
class ProblemDetails:
    """Minimal problem-details object, independent of any web framework."""

    title: str | None
    detail: str | None
    status: int | None
    type: str | None = None
    instance: str | None = None
    extensions: Mapping[str, Any] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        """Flatten into one mapping: set standard members, then extensions."""
        members = {
            "type": self.type,
            "title": self.title,
            "status": self.status,
            "detail": self.detail,
            "instance": self.instance,
        }
        output = {key: value for key, value in members.items() if value is not None}
        output.update(self.extensions)
        return output


def to_problem_details(
    response: BaseResponse,
    status: int | None = None,
    title: str | None = None,
    *,
    settings: ProblemDetailsSettings | None = None,
) -> ProblemDetails:
    """Describe ``response`` as problem details.

    Without an explicit ``status``, successful envelopes map to the configured
    success status (200 by default) and failed ones to the configured failure
    status (400 by default).
    """
    require_not_none(response, "response")
    resolved = settings or _DEFAULT_SETTINGS

    if status is None:
        status = resolved.success_status if response.success else resolved.failure_status

    extensions: dict[str, Any] = {
        "success": response.success,
        "correlation_id": response.correlation_id,
        "error": response.primary_error,
        "errors": response.errors,
        "timestamp": response.timestamp,
    }
    if response.metadata is not None:
        extensions["metadata"] = dict(response.metadata)

    return ProblemDetails(
        title=title,
        detail=None,
        status=status,
        extensions=extensions,
    )
