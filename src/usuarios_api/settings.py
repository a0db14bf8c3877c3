"""Application-wide configuration loaded from the environment."""

from __future__ import annotations

from functools import cache

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class BackendSettings(BaseSettings):
    """Centralized settings for the users API service."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    database_url: str | None = None
    db_driver: str = "postgresql+psycopg"
    db_host: str = "localhost"
    db_user: str = "root"
    db_password: str = ""
    db_name: str = "DesarrolloAPI"
    db_port: int = 5432
    database_fail_fast: bool = False

    api_host: str = "0.0.0.0"
    api_port: int = 8000
    public_url: str = "http://localhost:8000"
    log_level: str = "INFO"

    @property
    def sqlalchemy_url(self) -> str | URL:
        """Return ``database_url`` when set, otherwise build one from the parts."""

        if self.database_url:
            return self.database_url
        return URL.create(
            self.db_driver,
            username=self.db_user,
            password=self.db_password or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )


@cache
def get_settings() -> BackendSettings:
    """Return the cached settings instance."""

    return BackendSettings()


settings = get_settings()

__all__ = ["BackendSettings", "get_settings", "settings"]
