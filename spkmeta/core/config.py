"""Codec configuration with validation."""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class Settings(BaseSettings):
    """
    Codec settings with validation.

    Values are read from ``SPKMETA_*`` environment variables or a ``.env``
    file. None of them change the wire format; they only bound what the
    encoder accepts and how the package logs.
    """

    # Payload limit
    # Hive custom_json operations cap the payload size. 0 disables the check so
    # callers that embed the string elsewhere are not constrained.
    max_payload_bytes: int = Field(
        default=0,
        ge=0,
        description="Reject encoded batches larger than this many UTF-8 bytes (0 = no limit)"
    )

    # Logging Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_format: str = Field(
        default="json",
        description="Log output format: 'json' for structured, 'text' for human-readable"
    )

    model_config = SettingsConfigDict(
        env_prefix="SPKMETA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard Python logging levels."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level. Must be one of: {valid_levels}")
        return v_upper

    @field_validator('log_format')
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        v_lower = v.lower()
        if v_lower not in ('json', 'text'):
            raise ValueError("Invalid log format. Must be 'json' or 'text'")
        return v_lower


# Global settings instance
settings = Settings()
