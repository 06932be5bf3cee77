# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Project parsing pipeline.

ProjectParser runs the stages strictly in order and stops at the first
error, never returning a partial record:

1. Directory name    (NameFormatError)
2. Locale            (UnsupportedLanguageError)
3. README load       (FileNotFoundError, EmptyDocumentError)
4. Title             (TitleFormatError)
5. Summary           (never fails)
6. Learning objectives (UnknownLearningObjectiveError)
7. Thumbnail         (HttpError)

Example:
    >>> parser = ProjectParser()
    >>> record = await parser.parse(
    ...     "projects/01-cipher",
    ...     ProjectOptions(locale="es-ES", track="js", repo="org/bootcamp", version="1.0.0"),
    ... )
    >>> record.slug
    'cipher'
"""

import asyncio
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from curriculum_parser.core.config.settings import Settings, get_settings
from curriculum_parser.domains.project.directory import parse_directory_name
from curriculum_parser.domains.project.document import load_document
from curriculum_parser.domains.project.exceptions import ProjectParseError
from curriculum_parser.domains.project.extractors import extract_summary, extract_title
from curriculum_parser.domains.project.learning_objectives import (
    LearningObjectiveCatalog,
    load_catalog,
    resolve_learning_objectives,
)
from curriculum_parser.domains.project.locale import resolve_locale
from curriculum_parser.domains.project.models import (
    ParserContext,
    ParseResult,
    ProjectOptions,
    ProjectRecord,
)
from curriculum_parser.domains.project.thumbnail import ThumbnailGenerator
from curriculum_parser.utils.logging import bound_context, get_logger

logger = get_logger(__name__)


class ProjectParser:
    """Extracts a ProjectRecord from a project directory.

    Instances hold no per-project state and can parse several directories
    concurrently.

    Attributes:
        settings: Parser settings.
        context: Parser version and clock stamped on records.
        thumbnails: Thumbnail generator.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        context: ParserContext | None = None,
        thumbnails: ThumbnailGenerator | None = None,
    ) -> None:
        """Initialize the parser.

        Args:
            settings: Settings. Defaults to get_settings().
            context: Injected version and clock. Defaults to the package
                version and the current UTC time.
            thumbnails: Thumbnail generator. Defaults to one built from
                the thumbnail settings.
        """
        self.settings = settings or get_settings()
        self.context = context or ParserContext()
        self.thumbnails = thumbnails or ThumbnailGenerator(self.settings.thumbnail)

    async def parse(
        self,
        directory: Path | str,
        options: ProjectOptions | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> ProjectRecord:
        """Parse a project directory.

        The directory name is checked before the options are validated, so
        a badly named directory is reported even without options.

        Args:
            directory: Project directory path.
            options: Parsing options, as a model or a mapping.
            **overrides: Option fields overriding those in options.

        Returns:
            The extracted record.

        Raises:
            ProjectParseError: Subclass for the stage that failed.
            FileNotFoundError: If the README does not exist.
            pydantic.ValidationError: If the options are invalid.
        """
        directory = Path(directory)

        with bound_context(project_dir=str(directory)):
            name = parse_directory_name(directory)
            opts = self._validate_options(options, overrides)

            locale = resolve_locale(opts.locale, opts.suffix, settings=self.settings.parser)
            logger.debug("project_parse_started", locale=opts.locale, readme=locale.readme_filename)

            document = await load_document(directory, locale.readme_filename)
            title = extract_title(document)
            summary = extract_summary(document, locale.language)

            catalog = await self._load_catalog(opts.lo)
            learning_objectives = resolve_learning_objectives(document, catalog)

            thumb = await self.thumbnails.generate(directory, document)

            slug = f"{name.slug}-{opts.suffix}" if opts.suffix else name.slug
            record = ProjectRecord(
                slug=slug,
                locale=opts.locale,
                track=opts.track,
                repo=opts.repo,
                version=opts.version,
                title=title,
                summary=summary,
                learning_objectives=learning_objectives,
                thumb=thumb,
                parser_version=self.context.parser_version,
                created_at=self.context.clock(),
            )

            logger.info(
                "project_parsed",
                slug=record.slug,
                learning_objectives=len(record.learning_objectives),
                has_thumb=record.thumb is not None,
            )
            return record

    async def parse_result(
        self,
        directory: Path | str,
        options: ProjectOptions | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> ParseResult:
        """Parse a project directory, returning errors instead of raising.

        Only pipeline errors (ProjectParseError and a missing README) are
        captured; anything else still propagates.
        """
        try:
            record = await self.parse(directory, options, **overrides)
        except (ProjectParseError, FileNotFoundError) as e:
            logger.info("project_parse_failed", project_dir=str(directory), error=str(e))
            return ParseResult(error=e)
        return ParseResult(record=record)

    @staticmethod
    def _validate_options(
        options: ProjectOptions | Mapping[str, Any] | None,
        overrides: Mapping[str, Any],
    ) -> ProjectOptions:
        if isinstance(options, ProjectOptions):
            if not overrides:
                return options
            options = options.model_dump()
        return ProjectOptions.model_validate({**(options or {}), **overrides})

    @staticmethod
    async def _load_catalog(
        lo: Path | LearningObjectiveCatalog | None,
    ) -> LearningObjectiveCatalog | None:
        if lo is None or isinstance(lo, LearningObjectiveCatalog):
            return lo
        return await asyncio.to_thread(load_catalog, lo)


async def parse_project(
    directory: Path | str,
    options: ProjectOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> ProjectRecord:
    """Parse a project directory with a default ProjectParser.

    Example:
        >>> record = await parse_project("projects/01-cipher", locale="es-ES")
    """
    return await ProjectParser().parse(directory, options, **overrides)
