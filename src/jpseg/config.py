"""Configuration management using Pydantic Settings."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SUPPORTED_LANGUAGES = frozenset({"japanese", "english", "auto"})
LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR"})


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="JPSEG_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    language: str = "japanese"
    default_window_size: int = 5
    csv_filename: str = "morphological_analysis.csv"
    log_level: str = "WARNING"

    @field_validator("language")
    @classmethod
    def validate_language(cls, v: str) -> str:
        """Validate language is one the tokenizer factory understands."""
        v = v.lower()
        if v not in SUPPORTED_LANGUAGES:
            raise ValueError(f"language must be one of {sorted(SUPPORTED_LANGUAGES)}")
        return v

    @field_validator("default_window_size")
    @classmethod
    def validate_default_window_size(cls, v: int) -> int:
        """Validate default_window_size is at least 1."""
        if v < 1:
            raise ValueError("default_window_size must be at least 1")
        return v

    @field_validator("csv_filename")
    @classmethod
    def validate_csv_filename(cls, v: str) -> str:
        """Validate csv_filename is not blank."""
        if not v.strip():
            raise ValueError("csv_filename must not be empty")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log_level is a known level name."""
        v = v.upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(LOG_LEVELS)}")
        return v


settings = Settings()
