from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True)

    app_name: str = Field(default="timecalc", alias="APP_NAME")
    environment: str = Field(default="dev", alias="ENVIRONMENT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Telegram (optional; the bot stays off without a token)
    telegram_bot_token: str | None = Field(default=None, alias="TELEGRAM_BOT_TOKEN")
    webhook_secret: str | None = Field(default=None, alias="TELEGRAM_WEBHOOK_SECRET")
    public_base_url: str | None = Field(default=None, alias="PUBLIC_BASE_URL")

    # Calculators
    date_layout: str = Field(default="YYYY-MM-DD", alias="DATE_LAYOUT")
    default_source_zone: str = Field(default="America/New_York", alias="DEFAULT_SOURCE_ZONE")
    default_target_zone: str = Field(default="Asia/Kolkata", alias="DEFAULT_TARGET_ZONE")
    restrict_to_catalog: bool = Field(default=True, alias="RESTRICT_TO_CATALOG")


settings = Settings()
