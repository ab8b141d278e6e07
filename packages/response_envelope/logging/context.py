"""Structured logging context backed by ``contextvars``.

Fields bound here are attached to every record emitted through a handler that
carries ``ContextFilter``. The context is copied on every write, so threads and
asyncio tasks never observe each other's bindings.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Mapping

from . import fields

_LOG_CONTEXT: ContextVar[dict[str, str]] = ContextVar(
    "response_envelope_log_context", default={}
)


def get_context() -> dict[str, str]:
    """Return a shallow copy of the current logging context."""
    return dict(_LOG_CONTEXT.get())


def bind_context(**values: object) -> None:
    """Bind values into the current context, skipping ``None``.

    Values are stringified so the emitted record shape stays stable.
    """
    bound = {str(key): str(value) for key, value in values.items() if value is not None}
    if not bound:
        return
    _LOG_CONTEXT.set({**_LOG_CONTEXT.get(), **bound})


def clear_context(*keys: str) -> None:
    """Clear the given keys, or the whole context when none are given."""
    if not keys:
        _LOG_CONTEXT.set({})
        return
    _LOG_CONTEXT.set(
        {key: value for key, value in _LOG_CONTEXT.get().items() if key not in keys}
    )


@contextmanager
def log_context(values: Mapping[str, object]) -> Iterator[None]:
    """Bind ``values`` for the duration of a block, then restore the prior context."""
    token = _LOG_CONTEXT.set(dict(_LOG_CONTEXT.get()))
    try:
        bind_context(**dict(values))
        yield
    finally:
        _LOG_CONTEXT.reset(token)


def correlation_context(correlation_id: str | None) -> Mapping[str, object]:
    """Return the context fields identifying one envelope's correlation id."""
    return {fields.CORRELATION_ID: correlation_id}
