"""Pydantic configuration models with validation."""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import AliasChoices, AliasPath, BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .defaults import API_URL

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
LogFormat = Literal["json", "console"]


class TmdbSettings(BaseModel):
    """
    Canonical client configuration (validated, final).

    Note:
    - YAML is expected to be sectioned (http/logging), flat keys are accepted too.
    - Environment variables are handled by EnvOverrides(BaseSettings) to allow strict
      precedence control (defaults < YAML < ENV < overrides) in load.py.
    """

    api_key: Optional[str] = Field(
        default=None,
        description="TMDB v3 API key, sent as the api_key query parameter.",
    )
    debug: bool = Field(
        default=False,
        description="Log full request/response bodies of every API call.",
    )

    # HTTP (YAML section: http.*)
    base_url: str = Field(
        default=API_URL,
        validation_alias=AliasChoices("base_url", AliasPath("http", "base_url")),
        description="API root all endpoint paths are resolved against.",
    )
    timeout_seconds: float = Field(
        default=30.0,
        validation_alias=AliasChoices(
            "timeout_seconds",
            AliasPath("http", "timeout_seconds"),
        ),
        description="HTTP timeout in seconds.",
    )
    user_agent: str = Field(
        default="tmdbkit/0.1.0",
        validation_alias=AliasChoices("user_agent", AliasPath("http", "user_agent")),
        description="User-Agent for outgoing HTTP requests.",
    )

    # Logging (YAML section: logging.*)
    log_level: LogLevel = Field(
        default="INFO",
        validation_alias=AliasChoices("log_level", AliasPath("logging", "level")),
        description="Log level.",
    )
    log_format: LogFormat = Field(
        default="console",
        validation_alias=AliasChoices("log_format", AliasPath("logging", "format")),
        description="Log renderer format (console/json).",
    )

    @field_validator("timeout_seconds")
    @classmethod
    def _validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("timeout_seconds must be > 0")
        return v

    @field_validator("base_url")
    @classmethod
    def _validate_base_url(cls, v: str) -> str:
        # Relative endpoint paths are joined onto the base URL.
        return v if v.endswith("/") else f"{v}/"

    def to_sectioned_dict(self) -> dict[str, Any]:
        """
        Dump configuration in the sectioned shape used by config.yaml.
        """
        return {
            "api_key": self.api_key,
            "debug": self.debug,
            "http": {
                "base_url": self.base_url,
                "timeout_seconds": self.timeout_seconds,
                "user_agent": self.user_agent,
            },
            "logging": {"level": self.log_level, "format": self.log_format},
        }


class EnvOverrides(BaseSettings):
    """
    Environment-variable overrides (all optional).

    Supported env vars:
    - TMDB_API_KEY
    - TMDB_DEBUG
    - TMDB_BASE_URL
    - TMDB_TIMEOUT_SECONDS
    - TMDB_USER_AGENT
    - TMDB_LOG_LEVEL
    - TMDB_LOG_FORMAT
    """

    model_config = SettingsConfigDict(
        env_prefix="TMDB_",
        extra="ignore",
        case_sensitive=False,
    )

    api_key: Optional[str] = None
    debug: Optional[bool] = None

    base_url: Optional[str] = None
    timeout_seconds: Optional[float] = None
    user_agent: Optional[str] = None

    log_level: Optional[LogLevel] = None
    log_format: Optional[LogFormat] = None

    def to_update_dict(self) -> dict[str, Any]:
        """
        Return only values that were actually provided (non-None), for merging.
        """
        return self.model_dump(exclude_none=True)
