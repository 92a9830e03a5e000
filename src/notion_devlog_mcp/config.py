"""Configuration management for the Notion dev logger."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ErrorKind, SessionLogError


class DevLoggerSettings(BaseSettings):
    """Runtime configuration sourced from environment variables and optional .env file."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    notion_api_key: str | None = Field(default=None, validation_alias="NOTION_API_KEY")
    notion_database_id: str | None = Field(default=None, validation_alias="NOTION_DATABASE_ID")
    log_level: str = Field(default="INFO", validation_alias="DEVLOGGER_LOG_LEVEL")
    server_name: str = Field(default="Notion Dev Logger", validation_alias="DEVLOGGER_SERVER_NAME")

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(
                "DEVLOGGER_LOG_LEVEL must be one of CRITICAL, ERROR, WARNING, INFO, DEBUG"
            )
        return normalized

    @field_validator("notion_api_key", "notion_database_id", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value.strip() if isinstance(value, str) else value

    def missing_credentials(self) -> list[str]:
        missing = []
        if not self.notion_api_key:
            missing.append("NOTION_API_KEY")
        if not self.notion_database_id:
            missing.append("NOTION_DATABASE_ID")
        return missing


def require_credentials(settings: DevLoggerSettings) -> None:
    """Fail with a configuration error naming every missing Notion setting."""

    missing = settings.missing_credentials()
    if missing:
        raise SessionLogError(
            ErrorKind.CONFIGURATION,
            f"{' and '.join(missing)} {'is' if len(missing) == 1 else 'are'} required; "
            "check the environment or the .env file",
        )


@lru_cache(maxsize=1)
def get_settings() -> DevLoggerSettings:
    """Return cached settings instance."""

    return DevLoggerSettings()


__all__ = ["DevLoggerSettings", "get_settings", "require_credentials"]
