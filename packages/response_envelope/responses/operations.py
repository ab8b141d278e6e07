"""Pure query and transform helpers over response envelopes.

None of these functions mutate their input. Helpers that "change" an envelope
return a new instance and leave the source, including its metadata mapping,
untouched.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from packages.response_envelope.errors import require_key, require_not_none

from .envelope import BaseResponse, DataResponse, freeze_metadata


TIn = TypeVar("TIn")
TOut = TypeVar("TOut")
V = TypeVar("V")
ResponseT = TypeVar("ResponseT", bound=BaseResponse)


def is_failure(response: BaseResponse) -> bool:
    """Return ``True`` when the envelope describes a failed operation."""
    return not response.success


def with_metadata(response: ResponseT, key: str, value: Any) -> ResponseT:
    """Return a copy of ``response`` with ``key`` set in a fresh metadata mapping."""
    require_not_none(response, "response")
    require_key(key)

    metadata = dict(response.metadata) if response.metadata is not None else {}
    metadata[key] = value
    return response.model_copy(update={"metadata": freeze_metadata(metadata)})


def try_get_metadata(
    response: BaseResponse,
    key: str,
    expected_type: type[V] = object,
) -> tuple[bool, V | None]:
    """Look up one metadata value without raising.

    Returns ``(False, None)`` when metadata is absent, the key is missing or
    empty, or the stored value is not an instance of ``expected_type``. A stored
    ``bool`` does not satisfy ``int`` even though ``bool`` subclasses it.
    """
    if response is None or response.metadata is None or not key:
        return False, None
    if key not in response.metadata:
        return False, None

    raw = response.metadata[key]
    if isinstance(raw, bool) and expected_type is int:
        return False, None
    if isinstance(raw, expected_type):
        return True, raw
    return False, None


def map_data(
    response: DataResponse[TIn],
    mapper: Callable[[TIn | None], TOut | None],
) -> DataResponse[TOut]:
    """Transform the payload of a successful envelope.

    Failed envelopes are rebuilt as failures of the new payload type, keeping
    their errors, correlation id, metadata, and timestamp. Successful envelopes
    pass ``data`` (possibly ``None``) through ``mapper``; a ``None`` result
    yields an envelope whose ``data`` is ``None``.
    """
    require_not_none(response, "response")
    require_not_none(mapper, "mapper")

    carried = {
        "correlation_id": response.correlation_id,
        "metadata": response.metadata,
        "timestamp": response.timestamp,
    }

    if not response.success:
        if response.errors:
            return DataResponse.fail_with_errors(response.errors, **carried)
        if response.error is not None:
            return DataResponse.fail(response.error, **carried)
        return DataResponse.fail_without_error_info(**carried)

    return DataResponse.ok(mapper(response.data), **carried)
