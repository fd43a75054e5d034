# Copyright 2025 KTTC AI (https://github.com/kttc-ai)
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


"""Configuration management for polyglotflow.

Language defaults, low-confidence threshold, cache bounds and logging level,
loaded with Pydantic Settings from environment variables or a .env file.
"""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from polyglotflow.core.models import SupportedLanguage


class Settings(BaseSettings):
    """Application settings.

    All settings can be overridden via environment variables with POLYGLOT_ prefix.

    Example .env file:
        POLYGLOT_PRIMARY_LANGUAGE=ru
        POLYGLOT_LOW_CONFIDENCE_THRESHOLD=0.6
        POLYGLOT_DETECTION_CACHE_MAX_ENTRIES=10000
        POLYGLOT_LOG_LEVEL=DEBUG

    Example usage:
        >>> settings = Settings()
        >>> settings.primary_language
        <SupportedLanguage.EN: 'en'>
    """

    # Languages
    default_language: SupportedLanguage = Field(
        default=SupportedLanguage.EN,
        description="Language whose intent table is used when a language has none",
        json_schema_extra={"env": "POLYGLOT_DEFAULT_LANGUAGE"},
    )

    primary_language: SupportedLanguage = Field(
        default=SupportedLanguage.EN,
        description="Language of base responses in multilingual fan-out",
        json_schema_extra={"env": "POLYGLOT_PRIMARY_LANGUAGE"},
    )

    # Detection
    low_confidence_threshold: float = Field(
        default=0.7,
        description="Detection confidence below which a warning is logged",
        ge=0.0,
        le=1.0,
        json_schema_extra={"env": "POLYGLOT_LOW_CONFIDENCE_THRESHOLD"},
    )

    # Caches (unset means unbounded / never expires)
    detection_cache_max_entries: int | None = Field(
        default=None,
        description="Maximum cached detection results",
        gt=0,
        json_schema_extra={"env": "POLYGLOT_DETECTION_CACHE_MAX_ENTRIES"},
    )

    translation_cache_max_entries: int | None = Field(
        default=None,
        description="Maximum cached translations",
        gt=0,
        json_schema_extra={"env": "POLYGLOT_TRANSLATION_CACHE_MAX_ENTRIES"},
    )

    cache_ttl_seconds: float | None = Field(
        default=None,
        description="Lifetime of cache entries (seconds)",
        gt=0,
        json_schema_extra={"env": "POLYGLOT_CACHE_TTL_SECONDS"},
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        json_schema_extra={"env": "POLYGLOT_LOG_LEVEL"},
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="POLYGLOT_",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("default_language", "primary_language", mode="before")
    @classmethod
    def _parse_language(cls, value: object) -> object:
        if isinstance(value, str):
            return SupportedLanguage.parse(value)
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{value}'")
        return level


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance.

    Returns:
        Settings instance
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def configure_logging(settings: Settings | None = None) -> None:
    """Configure root logging from settings.

    Meant for applications embedding the pipeline; library code only ever
    creates module loggers.

    Args:
        settings: Settings to use (default: global settings)
    """
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )
