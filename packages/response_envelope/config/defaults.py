"""Built-in configuration values for response envelope helpers.

These values are the last step of the cascade:
CLI params > ENV vars > config file > built-in defaults.
"""

from __future__ import annotations

from http import HTTPStatus
from typing import Any

BUILTIN_DEFAULTS: dict[str, Any] = {
    "logging": {
        "level": "INFO",
        "json_output": True,
        "service": "response-envelope",
        "environment": "dev",
    },
    "problem_details": {
        "success_status": int(HTTPStatus.OK),
        "failure_status": int(HTTPStatus.BAD_REQUEST),
    },
}
