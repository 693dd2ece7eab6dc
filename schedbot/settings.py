import logging
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    data_file: Path = Path("data/data.json")
    backup_dir: Path = Path("backups")
    export_dir: Path = Path("exports")

    log_level: str = "INFO"
    log_file: Optional[str] = None

    mode: Literal["cli", "telegram"] = "cli"
    telegram_bot_token: Optional[str] = None

    reminder_check_minutes: int = Field(default=30, ge=1)
    default_reminder_minutes: int = Field(default=60, ge=1)

    search_threshold: float = Field(default=0.6, ge=0.0, le=1.0)
    match_threshold: float = Field(default=0.3, ge=0.0, le=1.0)

    max_message_length: int = Field(default=4000, ge=1)

    model_config = SettingsConfigDict(
        env_prefix="SCHEDBOT_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        level = str(v).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @model_validator(mode="after")
    def validate_telegram_token(self):
        if self.mode == "telegram":
            token = (self.telegram_bot_token or "").strip()
            if not token or token == "your_telegram_bot_token_here":
                raise ValueError("SCHEDBOT_TELEGRAM_BOT_TOKEN must be provided in telegram mode")
        return self


def get_settings(**overrides) -> Settings:
    return Settings(**overrides)
