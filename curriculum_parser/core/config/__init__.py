# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Configuration package for the curriculum parser.

- Settings: Pydantic-based settings loaded from environment variables
- YAML loader: Utilities for loading YAML files (learning objective catalogs)

Example:
    >>> from curriculum_parser.core.config import get_settings
    >>> get_settings().parser.readme_filename("pt")
    'README.pt.md'
"""

from curriculum_parser.core.config.settings import (
    ParserSettings,
    Settings,
    ThumbnailSettings,
    clear_settings_cache,
    get_settings,
)
from curriculum_parser.core.config.yaml_loader import (
    YAMLLoadError,
    find_yaml_file,
    load_yaml,
)

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    "clear_settings_cache",
    # Subsettings
    "ParserSettings",
    "ThumbnailSettings",
    # YAML utilities
    "load_yaml",
    "find_yaml_file",
    "YAMLLoadError",
]
