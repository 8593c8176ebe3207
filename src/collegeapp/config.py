"""
Central application configuration from environment variables.

Every setting can be set with a ``COLLEGEAPP_``-prefixed variable or from a
``.env`` file; CLI flags are passed as overrides on top.
"""

from typing import Any, Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ConfigError(Exception):
    """Raised when configuration is invalid."""


class Settings(BaseSettings):
    # Server
    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=1, le=65535)

    # Logging
    log_level: LogLevel = "INFO"
    log_dir: str = "logs"

    # Load the two sample students on startup
    seed: bool = True

    model_config = SettingsConfigDict(
        env_prefix="COLLEGEAPP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v


def load_settings(**overrides: Any) -> Settings:
    """Build settings from the environment, applying non-None overrides.

    Raises:
        ConfigError: If any value, from the environment or an override, is invalid.
    """
    values = {key: value for key, value in overrides.items() if value is not None}
    try:
        return Settings(**values)
    except ValidationError as e:
        problems = "; ".join(
            f"COLLEGEAPP_{'.'.join(str(p) for p in err['loc']).upper()}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigError(f"Invalid configuration: {problems}") from e
