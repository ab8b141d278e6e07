"""Public result API consumed by envelope factories."""

from .result import Result, ResultLike

__all__ = ["Result", "ResultLike"]
