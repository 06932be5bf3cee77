# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for parser settings."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from curriculum_parser.core.config.settings import (
    ParserSettings,
    Settings,
    ThumbnailSettings,
    clear_settings_cache,
    get_settings,
)


class TestParserSettings:
    """Tests for ParserSettings."""

    def test_default_values(self) -> None:
        settings = ParserSettings()

        assert settings.readme_basename == "README"
        assert settings.supported_languages == ["es", "pt"]

    @pytest.mark.parametrize(
        ("suffix", "expected"),
        [(None, "README.md"), ("", "README.md"), ("pt", "README.pt.md")],
    )
    def test_readme_filename(self, suffix: str | None, expected: str) -> None:
        assert ParserSettings().readme_filename(suffix) == expected

    def test_loads_languages_from_environment(self) -> None:
        with patch.dict(os.environ, {"PARSER_SUPPORTED_LANGUAGES": '["ES", "pt", "en"]'}):
            settings = ParserSettings()

        assert settings.supported_languages == ["es", "pt", "en"]


class TestThumbnailSettings:
    """Tests for ThumbnailSettings."""

    def test_default_values(self) -> None:
        settings = ThumbnailSettings()

        assert settings.filename == "thumb.png"
        assert settings.width == 395
        assert settings.http_timeout is None

    def test_loads_from_environment(self) -> None:
        env = {"THUMBNAIL_WIDTH": "200", "THUMBNAIL_HTTP_TIMEOUT": "2.5"}

        with patch.dict(os.environ, env, clear=False):
            settings = ThumbnailSettings()

        assert settings.width == 200
        assert settings.http_timeout == 2.5

    def test_width_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            ThumbnailSettings(width=0)


class TestSettings:
    """Tests for the aggregated Settings."""

    def test_default_values(self) -> None:
        settings = Settings()

        assert settings.environment == "development"
        assert settings.is_development
        assert not settings.is_production
        assert settings.thumbnail.width == 395

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()

    def test_clear_settings_cache_reloads(self) -> None:
        first = get_settings()

        with patch.dict(os.environ, {"ENVIRONMENT": "production", "LOG_LEVEL": "WARNING"}):
            clear_settings_cache()
            second = get_settings()

        assert second is not first
        assert second.is_production
        assert second.log_level == "WARNING"
