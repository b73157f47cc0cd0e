from pathlib import Path

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = Field(default="INFO", validation_alias="FITTRAIN_LOG_LEVEL")
    log_file: str | None = Field(default=None, validation_alias="FITTRAIN_LOG_FILE")
    exercise_library_path: Path | None = Field(
        default=None,
        validation_alias="FITTRAIN_EXERCISE_LIBRARY",
        description="JSON exercise library read by the CLI when --exercises is not given",
    )
    default_recommendation_count: int = Field(
        default=8,
        validation_alias="FITTRAIN_RECOMMENDATION_COUNT",
        description="Number of recommendations returned when the caller does not ask for a count",
    )
    ui_recommendation_count: int = Field(
        default=12,
        validation_alias="FITTRAIN_UI_RECOMMENDATION_COUNT",
        description="Number of recommendations shown on the client recommendations view",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="FITTRAIN_",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid LOG_LEVEL '{value}'. Valid levels are: {', '.join(sorted(valid_levels))}. Defaulting to INFO.")
            return "INFO"
        return upper_value

    @field_validator("default_recommendation_count", "ui_recommendation_count")
    @classmethod
    def validate_recommendation_count(cls, value: int) -> int:
        if value < 1:
            raise ValueError("Recommendation counts must be at least 1")
        return value


settings = Settings()
