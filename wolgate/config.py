"""wolgate configuration — Pydantic BaseSettings loaded from .env."""

from __future__ import annotations

import shlex
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    app_name: str = "wolgate"
    debug: bool = False
    log_level: str = "INFO"

    # HTTP service address and port
    http_addr: str = "localhost:8080"

    # Wake defaults
    default_remote: str = "255.255.255.255:9"

    # Route discovery, the device name is appended as the last argument
    route_command: str = "ip route show proto kernel dev"
    route_timeout_seconds: float = 5.0

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="WOLGATE_",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.upper()

    @property
    def route_argv(self) -> list[str]:
        return shlex.split(self.route_command)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
