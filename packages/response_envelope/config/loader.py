"""Settings loading with deterministic precedence.

The cascade is always:
1) CLI params
2) Environment variables
3) YAML config file (``~/.config/response-envelope/envelope.yaml`` by default)
4) Built-in defaults

Environment variable format:
- Prefix: ``ENVELOPE_``
- Nested keys: ``__`` separator
- Example: ``ENVELOPE_LOGGING__LEVEL=DEBUG`` -> ``logging.level = "DEBUG"``
"""

from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from packages.response_envelope.logging import configure_logging

from .defaults import BUILTIN_DEFAULTS
from .models import DEFAULT_CONFIG_PATH, ENV_PREFIX, EnvelopeSettings


def load_settings(
    *,
    cli_params: Mapping[str, Any] | None = None,
    environ: Mapping[str, str] | None = None,
    config_path: str | Path | None = None,
) -> EnvelopeSettings:
    """Resolve and validate settings from every configured source."""
    merged = load_config(
        cli_params=cli_params,
        environ=environ,
        config_path=config_path,
    )
    return EnvelopeSettings(**merged)


def configure_logging_from_settings(settings: EnvelopeSettings) -> None:
    """Apply the ``logging`` subtree of ``settings`` to the root logger."""
    configure_logging(
        level=settings.logging.level,
        json_output=settings.logging.json_output,
        service=settings.logging.service,
        environment=settings.logging.environment,
    )


def load_config(
    *,
    cli_params: Mapping[str, Any] | None = None,
    environ: Mapping[str, str] | None = None,
    config_path: str | Path | None = None,
    defaults: Mapping[str, Any] | None = None,
    env_prefix: str = ENV_PREFIX,
) -> dict[str, Any]:
    """Merge raw config mappings in precedence order without validating them."""
    merged = _as_plain_dict(BUILTIN_DEFAULTS if defaults is None else defaults)
    for layer in (
        _load_file_config(path=config_path),
        _load_env_config(environ=environ, prefix=env_prefix),
        _as_plain_dict(cli_params) if cli_params is not None else {},
    ):
        merged = _merge_dicts(merged, layer)
    return merged


def _load_file_config(*, path: str | Path | None) -> dict[str, Any]:
    """Load YAML config from disk; return an empty dict when the file is absent."""
    resolved = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    if not resolved.exists():
        return {}

    with resolved.open("r", encoding="utf-8") as handle:
        parsed = yaml.safe_load(handle)

    if parsed is None:
        return {}
    if not isinstance(parsed, dict):
        raise ValueError(f"Config file must contain a top-level mapping: {resolved}")
    return _as_plain_dict(parsed)


def _load_env_config(
    *, environ: Mapping[str, str] | None, prefix: str
) -> dict[str, Any]:
    """Map prefixed environment variables onto a nested config dict."""
    env = os.environ if environ is None else environ
    output: dict[str, Any] = {}

    for key, raw_value in env.items():
        if not key.startswith(prefix):
            continue

        path = [
            segment.strip().lower()
            for segment in key[len(prefix) :].split("__")
            if segment.strip()
        ]
        if path:
            _set_nested(output, path, _coerce_scalar(raw_value))

    return output


def _set_nested(target: dict[str, Any], path: list[str], value: Any) -> None:
    """Set a nested value by path, creating intermediate dicts."""
    cursor = target
    for segment in path[:-1]:
        child = cursor.get(segment)
        if not isinstance(child, dict):
            child = {}
            cursor[segment] = child
        cursor = child
    cursor[path[-1]] = value


def _merge_dicts(
    base: Mapping[str, Any], override: Mapping[str, Any]
) -> dict[str, Any]:
    """Recursively merge mappings, with ``override`` winning."""
    result = _as_plain_dict(base)
    for key, override_value in override.items():
        base_value = result.get(key)
        if isinstance(base_value, dict) and isinstance(override_value, Mapping):
            result[key] = _merge_dicts(base_value, override_value)
        else:
            result[key] = copy.deepcopy(override_value)
    return result


def _coerce_scalar(raw: str) -> Any:
    """Coerce env strings into bool/None/int/float/JSON when unambiguous."""
    value = raw.strip()
    lowered = value.lower()

    if lowered in {"true", "false"}:
        return lowered == "true"
    if lowered in {"null", "none"}:
        return None
    if value.startswith(("{", "[")):
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            return raw

    for cast in (int, float):
        try:
            return cast(value)
        except ValueError:
            continue
    return raw


def _as_plain_dict(value: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-copy a mapping into plain nested dicts."""
    return {
        str(key): _as_plain_dict(subvalue)
        if isinstance(subvalue, Mapping)
        else copy.deepcopy(subvalue)
        for key, subvalue in value.items()
    }
