# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Locale resolution for project READMEs."""

import re
from collections.abc import Iterable
from dataclasses import dataclass

from curriculum_parser.core.config.settings import ParserSettings
from curriculum_parser.domains.project.exceptions import UnsupportedLanguageError

LOCALE_SEPARATOR = re.compile(r"[-_]")


@dataclass(frozen=True)
class ResolvedLocale:
    """A locale tag resolved to a supported base language.

    Attributes:
        locale: Original locale tag, e.g. "pt-BR".
        language: Base language, e.g. "pt".
        suffix: Optional README/slug suffix.
        readme_filename: README file to load for this locale.
    """

    locale: str
    language: str
    suffix: str | None
    readme_filename: str


def base_language(locale: str) -> str:
    """Return the lower-cased language subtag ("es-ES" -> "es")."""
    return LOCALE_SEPARATOR.split(locale.strip(), maxsplit=1)[0].lower()


def resolve_locale(
    locale: str,
    suffix: str | None = None,
    supported: Iterable[str] | None = None,
    settings: ParserSettings | None = None,
) -> ResolvedLocale:
    """Resolve a locale tag and pick the README to load.

    Args:
        locale: Locale tag, e.g. "es-ES".
        suffix: Optional suffix selecting README.<suffix>.md.
        supported: Supported base languages. Defaults to the settings value.
        settings: Parser settings. Defaults to ParserSettings().

    Returns:
        The resolved locale.

    Raises:
        UnsupportedLanguageError: If the base language is not supported.
    """
    settings = settings or ParserSettings()
    supported_languages = set(supported if supported is not None else settings.supported_languages)

    language = base_language(locale)
    if language not in supported_languages:
        raise UnsupportedLanguageError(language)

    return ResolvedLocale(
        locale=locale,
        language=language,
        suffix=suffix,
        readme_filename=settings.readme_filename(suffix),
    )
