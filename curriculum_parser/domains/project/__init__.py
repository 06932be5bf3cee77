# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Project domain.

This package extracts metadata from a curriculum project directory:
- ProjectParser / parse_project: The fail-fast parsing pipeline
- ProjectOptions / ProjectRecord: Pipeline input and output
- LearningObjectiveCatalog: Indexed learning objective hierarchy
- ThumbnailGenerator: Cached cover thumbnails
- Exceptions: One error type per pipeline stage
"""

from curriculum_parser.domains.project.assembler import ProjectParser, parse_project
from curriculum_parser.domains.project.directory import (
    ProjectDirectoryName,
    parse_directory_name,
)
from curriculum_parser.domains.project.document import (
    Node,
    ParsedDocument,
    load_document,
    parse_markdown,
)
from curriculum_parser.domains.project.exceptions import (
    EmptyDocumentError,
    HttpError,
    ImageFormatError,
    NameFormatError,
    ProjectParseError,
    TitleFormatError,
    UnknownLearningObjectiveError,
    UnsupportedLanguageError,
)
from curriculum_parser.domains.project.extractors import extract_summary, extract_title
from curriculum_parser.domains.project.learning_objectives import (
    LearningObjectiveCatalog,
    LearningObjectiveNode,
    load_catalog,
    resolve_learning_objectives,
)
from curriculum_parser.domains.project.locale import ResolvedLocale, resolve_locale
from curriculum_parser.domains.project.models import (
    ParserContext,
    ParseResult,
    ProjectOptions,
    ProjectRecord,
)
from curriculum_parser.domains.project.thumbnail import ThumbnailGenerator, resize_png

__all__ = [
    # Pipeline
    "ProjectParser",
    "parse_project",
    "ProjectOptions",
    "ProjectRecord",
    "ParserContext",
    "ParseResult",
    # Stages
    "ProjectDirectoryName",
    "parse_directory_name",
    "ResolvedLocale",
    "resolve_locale",
    "Node",
    "ParsedDocument",
    "load_document",
    "parse_markdown",
    "extract_title",
    "extract_summary",
    "LearningObjectiveCatalog",
    "LearningObjectiveNode",
    "load_catalog",
    "resolve_learning_objectives",
    "ThumbnailGenerator",
    "resize_png",
    # Exceptions
    "ProjectParseError",
    "NameFormatError",
    "UnsupportedLanguageError",
    "EmptyDocumentError",
    "TitleFormatError",
    "UnknownLearningObjectiveError",
    "HttpError",
    "ImageFormatError",
]
