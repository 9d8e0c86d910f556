from pathlib import Path

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_default_plan_store_path() -> str:
    """Default JSON plan store, next to the project root."""
    store_path = Path(__file__).parent.parent.parent / "training_plan.json"
    return str(store_path.resolve())


class Settings(BaseSettings):
    log_level: str = Field(default="INFO", validation_alias="MARATHON_LOG_LEVEL")
    log_file: str | None = Field(default=None, validation_alias="MARATHON_LOG_FILE")
    log_rotation: str = Field(
        default="10 MB",
        validation_alias="MARATHON_LOG_ROTATION",
        description="Size or age at which the log file is rotated",
    )
    log_retention: str = Field(
        default="7 days",
        validation_alias="MARATHON_LOG_RETENTION",
        description="How long rotated log files are kept",
    )
    plan_store_path: str = Field(
        default_factory=get_default_plan_store_path,
        validation_alias="MARATHON_PLAN_STORE_PATH",
        description="JSON file holding the last generated plan",
    )
    host: str = Field(default="127.0.0.1", validation_alias="MARATHON_HOST")
    port: int = Field(default=8000, validation_alias="MARATHON_PORT")

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

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
