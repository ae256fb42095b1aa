# shortlinks/config/settings.py

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Application ---
    app_name: str = "shortlinks"
    environment: Literal["dev", "test", "prod"] = "dev"
    debug: bool = False
    version: str = "0.1.0"
    base_url: str = "http://localhost:8000"

    # --- Storage ---
    storage_backend: Literal["memory", "redis"] = "memory"
    redis_url: str = "redis://localhost:6379/0"

    # --- Links ---
    default_validity_mins: int = Field(30, gt=0)
    code_length: int = Field(6, ge=3, le=20)
    # None keeps every access in the stored history
    access_history_limit: Optional[int] = Field(None, gt=0)
    history_display_limit: int = Field(50, gt=0)

    # --- Observability ---
    audit_log_limit: int = Field(1000, gt=0)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


@lru_cache
def get_settings() -> AppSettings:
    return AppSettings()


# Singleton for direct import (e.g. in infrastructure clients)
settings = get_settings()
