"""Typed settings models for response envelope helpers."""

from __future__ import annotations

from http import HTTPStatus
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "response-envelope" / "envelope.yaml"
ENV_PREFIX = "ENVELOPE_"


class LoggingSettings(BaseModel):
    """Structured logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    json_output: bool = True
    service: str = "response-envelope"
    environment: str = "dev"


class ProblemDetailsSettings(BaseModel):
    """Default statuses used when converting envelopes to problem details."""

    model_config = ConfigDict(frozen=True)

    success_status: int = Field(default=int(HTTPStatus.OK), ge=100, le=599)
    failure_status: int = Field(default=int(HTTPStatus.BAD_REQUEST), ge=100, le=599)


class EnvelopeSettings(BaseSettings):
    """Root settings resolved by ``load_settings``.

    Environment and YAML sources are merged by the loader before validation so
    callers can inject both in tests. Only init values reach the model.
    """

    model_config = SettingsConfigDict(extra="ignore")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    problem_details: ProblemDetailsSettings = Field(
        default_factory=ProblemDetailsSettings
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Accept init values only; the loader owns the cascade."""
        return (init_settings,)
