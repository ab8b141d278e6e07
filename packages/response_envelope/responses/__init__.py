"""Public response envelope API."""

from .envelope import BaseResponse, DataResponse, Response, normalize_utc, utc_now
from .operations import is_failure, map_data, try_get_metadata, with_metadata
from .problem import ProblemDetails, to_problem_details

__all__ = [
    "BaseResponse",
    "DataResponse",
    "ProblemDetails",
    "Response",
    "is_failure",
    "map_data",
    "normalize_utc",
    "to_problem_details",
    "try_get_metadata",
    "utc_now",
    "with_metadata",
]
