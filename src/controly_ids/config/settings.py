"""Settings configuration for identifier generation."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from controly_ids.core.generator import (
    DEFAULT_ALPHABET,
    DEFAULT_LENGTH,
    DEFAULT_MAX_ATTEMPTS,
)


__all__ = [
    "GeneratorSettings",
    "get_settings",
]


class GeneratorSettings(BaseSettings):
    """Identifier generator configuration.

    Values are loaded from environment variables prefixed with
    ``CONTROLY_IDS_`` and from a ``.env`` file. Explicit keyword arguments
    take precedence over both.
    """

    model_config = SettingsConfigDict(
        env_prefix="CONTROLY_IDS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    alphabet: str = Field(
        default=DEFAULT_ALPHABET,
        description="Distinct symbols identifiers are composed of",
    )

    length: int = Field(
        default=DEFAULT_LENGTH,
        ge=1,
        description="Number of symbols per identifier",
    )

    max_attempts: int = Field(
        default=DEFAULT_MAX_ATTEMPTS,
        ge=0,
        description="Upper bound on draws per generate call",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )

    json_logs: bool = Field(
        default=False,
        description="Render log events as JSON instead of console output",
    )

    @field_validator("alphabet")
    @classmethod
    def validate_alphabet(cls, v: str) -> str:
        """Reject empty alphabets and repeated symbols."""
        if not v:
            raise ValueError("alphabet must not be empty")
        if len(set(v)) != len(v):
            raise ValueError("alphabet symbols must be distinct")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        level = v.upper()
        if level not in valid_levels:
            raise ValueError(f"log_level must be one of {sorted(valid_levels)}")
        return level


def get_settings() -> GeneratorSettings:
    """Load generator settings from the environment.

    Returns:
        GeneratorSettings: Freshly loaded settings instance
    """
    return GeneratorSettings()
