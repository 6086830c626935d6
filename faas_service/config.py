"""Application configuration loading via Pydantic settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings(BaseSettings):
    """Runtime configuration sourced from environment variables."""

    port: int = Field(default=8080, ge=1, le=65535, alias="PORT")
    host: str = Field(default="0.0.0.0", alias="HOST")
    instance_id: str = Field(default="0", alias="INSTANCE_ID")
    service_name: str = Field(default="faas-service", alias="SERVICE_NAME")
    version: str = Field(default="1.0.0", alias="SERVICE_VERSION")
    default_page_limit: int = Field(default=10, ge=0, alias="DEFAULT_PAGE_LIMIT")
    max_page_limit: int | None = Field(default=None, ge=0, alias="MAX_PAGE_LIMIT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "populate_by_name": True,
    }

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Any) -> str:
        level = str(value).strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}")
        return level

    @property
    def listen_address(self) -> str:
        return f"{self.host}:{self.port}"


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()
