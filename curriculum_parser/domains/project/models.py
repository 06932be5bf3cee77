# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Project parsing models.

- ProjectOptions: Invocation options, validated once at pipeline entry
- ProjectRecord: Immutable pipeline output
- ParserContext: Injected parser version and clock
- ParseResult: Explicit success/error result of a parse
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel

from curriculum_parser import __version__
from curriculum_parser.domains.project.exceptions import ProjectParseError
from curriculum_parser.domains.project.learning_objectives import (
    LearningObjectiveCatalog,
)
from curriculum_parser.utils.datetime import utc_now


class ProjectOptions(BaseModel):
    """Options for parsing a single project directory.

    Attributes:
        locale: Full locale tag, e.g. "es-ES" or "pt-BR". Required.
        suffix: Optional locale suffix. Selects README.<suffix>.md and is
            appended to the slug.
        track: Curriculum track, copied verbatim into the record.
        repo: Source repository, copied verbatim into the record.
        version: Curriculum version, copied verbatim into the record.
        lo: Learning objective catalog, or a path to load it from.
            None disables validation.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    locale: str = Field(min_length=1)
    suffix: str | None = None
    track: str | None = None
    repo: str | None = None
    version: str | None = None
    lo: Path | LearningObjectiveCatalog | None = None

    @field_validator("suffix")
    @classmethod
    def empty_suffix_is_none(cls, value: str | None) -> str | None:
        """Treat an empty suffix as no suffix."""
        return value or None


class ProjectRecord(BaseModel):
    """Metadata extracted from a project directory.

    Serializes with camelCase keys (learningObjectives, parserVersion,
    createdAt) via model_dump(by_alias=True).
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    slug: str
    locale: str
    track: str | None = None
    repo: str | None = None
    version: str | None = None
    title: str
    summary: str | None = None
    learning_objectives: frozenset[str] = frozenset()
    thumb: str | None = None
    parser_version: str
    created_at: datetime

    @field_serializer("learning_objectives")
    def serialize_learning_objectives(self, value: frozenset[str]) -> list[str]:
        return sorted(value)


@dataclass(frozen=True)
class ParserContext:
    """Values stamped on every record, injected for deterministic tests.

    Attributes:
        parser_version: Release identifier of the parser.
        clock: Callable returning the current time.
    """

    parser_version: str = __version__
    clock: Callable[[], datetime] = field(default=utc_now)


@dataclass(frozen=True)
class ParseResult:
    """Outcome of a parse: either a record or the error that stopped it.

    Attributes:
        record: Parsed record on success.
        error: Pipeline error on failure.
    """

    record: ProjectRecord | None = None
    error: ProjectParseError | FileNotFoundError | None = None

    @property
    def ok(self) -> bool:
        """Whether the parse succeeded."""
        return self.error is None

    def unwrap(self) -> ProjectRecord:
        """Return the record, re-raising the captured error on failure.

        Raises:
            ProjectParseError | FileNotFoundError: The captured error.
            ValueError: If the result holds neither a record nor an error.
        """
        if self.error is not None:
            raise self.error
        if self.record is None:
            raise ValueError("ParseResult holds neither a record nor an error")
        return self.record
