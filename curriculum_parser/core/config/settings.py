# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Parser configuration settings using Pydantic Settings.

Settings are loaded from environment variables with sensible defaults.
The Settings class is the main entry point and aggregates all subsettings.
A singleton instance is provided via get_settings().

Example:
    >>> from curriculum_parser.core.config.settings import get_settings
    >>> settings = get_settings()
    >>> settings.thumbnail.width
    395
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ParserSettings(BaseSettings):
    """README parsing configuration.

    Attributes:
        readme_basename: File stem of the project README.
        supported_languages: Base languages a project can be parsed in.
    """

    model_config = SettingsConfigDict(
        env_prefix="PARSER_",
        extra="ignore",
    )

    readme_basename: str = "README"
    supported_languages: list[str] = ["es", "pt"]

    @field_validator("supported_languages")
    @classmethod
    def normalize_languages(cls, value: list[str]) -> list[str]:
        """Lower-case and strip configured language codes."""
        return [lang.strip().lower() for lang in value if lang.strip()]

    def readme_filename(self, suffix: str | None = None) -> str:
        """Build the README filename for an optional locale suffix.

        Args:
            suffix: Locale suffix (e.g. "pt"), or None for the default README.

        Returns:
            "README.md" or "README.<suffix>.md".
        """
        if suffix:
            return f"{self.readme_basename}.{suffix}.md"
        return f"{self.readme_basename}.md"


class ThumbnailSettings(BaseSettings):
    """Thumbnail generation configuration.

    Attributes:
        filename: Name of the cached thumbnail inside the project directory.
        width: Target width in pixels; height keeps the aspect ratio.
        http_timeout: Timeout for the cover image download. None disables it.
        user_agent: User-Agent header sent when downloading cover images.
    """

    model_config = SettingsConfigDict(
        env_prefix="THUMBNAIL_",
        extra="ignore",
    )

    filename: str = "thumb.png"
    width: int = Field(default=395, gt=0)
    http_timeout: float | None = None
    user_agent: str = "curriculum-parser"


class Settings(BaseSettings):
    """Main settings aggregating all subsettings.

    Use get_settings() to obtain a cached singleton instance.

    Attributes:
        environment: Current environment (development, staging, production).
        debug: Enable debug mode.
        log_level: Logging level.
        parser: README parsing settings.
        thumbnail: Thumbnail generation settings.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    parser: ParserSettings = Field(default_factory=ParserSettings)
    thumbnail: ThumbnailSettings = Field(default_factory=ThumbnailSettings)

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    Call clear_settings_cache() if you need to reload settings.

    Returns:
        Cached Settings instance.
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache.

    Useful for testing or when the environment changes.
    """
    get_settings.cache_clear()
