"""Centralised application configuration using pydantic-settings.

All environment variables are read through the Settings class.
Consumers call ``get_settings()`` to obtain a cached, validated instance.
Tests construct ``Settings(_env_file=None, ...)`` directly for isolation.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# src/codebytes/config.py  ->  parent x3  ->  project root
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


# ---------------------------------------------------------------------------
# Sub-models (one per configuration domain)
# ---------------------------------------------------------------------------
class CodebytesConfig(BaseModel):
    """Codebyte composer integration."""

    enabled: bool = True
    editor_url: str = "https://www.codecademy.com/codebyte-editor"
    client_name: str = "forum"
    frame_height: int = 400
    frame_max_width: int = 712

    @field_validator("editor_url")
    @classmethod
    def editor_url_is_http(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            msg = f"CODEBYTES__EDITOR_URL must be an http(s) URL, got {value!r}"
            raise ValueError(msg)
        return value.rstrip("?")

    @field_validator("frame_height", "frame_max_width")
    @classmethod
    def dimension_is_positive(cls, value: int) -> int:
        if value <= 0:
            msg = f"Codebyte frame dimensions must be positive, got {value}"
            raise ValueError(msg)
        return value


class AppConfig(BaseModel):
    """Application runtime configuration."""

    base_url: str = "http://localhost:8080"
    port: int = 8080
    storage_secret: SecretStr = SecretStr("dev-secret-change-me")
    log_dir: Path = Path("logs")


class DevConfig(BaseModel):
    """Development toggles."""

    reload: bool = True


# ---------------------------------------------------------------------------
# Root settings
# ---------------------------------------------------------------------------
class Settings(BaseSettings):
    """Application settings with automatic .env loading and type validation.

    Environment variables use double-underscore delimiter for nesting:
    ``CODEBYTES__ENABLED``, ``CODEBYTES__EDITOR_URL``, ``APP__PORT``, etc.
    """

    model_config = SettingsConfigDict(
        env_file=_PROJECT_ROOT / ".env",
        env_nested_delimiter="__",
        extra="ignore",
    )

    codebytes: CodebytesConfig = CodebytesConfig()
    app: AppConfig = AppConfig()
    dev: DevConfig = DevConfig()


# ---------------------------------------------------------------------------
# Singleton access
# ---------------------------------------------------------------------------
@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance.

    Call ``get_settings.cache_clear()`` in tests to reset.
    """
    settings = Settings()

    env_file = settings.model_config.get("env_file")
    if env_file is not None and Path(str(env_file)).is_file():
        logger.info("Settings loaded .env from: %s", env_file)
    else:
        logger.info("Settings: no .env file found, using env vars and defaults")

    return settings
