# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Custom exceptions for project parsing.

This module defines the exception hierarchy raised by the pipeline stages:
- ProjectParseError: Base exception for all project parsing errors
- NameFormatError: Project directory name is not in 00-slug format
- UnsupportedLanguageError: Locale resolves to an unsupported language
- EmptyDocumentError: README exists but has no content
- TitleFormatError: README does not start with a level 1 heading
- UnknownLearningObjectiveError: README references codes missing from the catalog
- HttpError: Cover image download returned a non-200 status
- ImageFormatError: Cover image bytes are not a readable image

A missing README is not wrapped: the native FileNotFoundError propagates
so callers can tell it apart from content errors.
"""

from pathlib import Path


class ProjectParseError(Exception):
    """Base exception for all project parsing errors.

    Attributes:
        message: Human-readable error description.
        path: Most specific file or directory involved, if any.
        code: Machine-readable error code.
    """

    code = "EPROJECT"

    def __init__(self, message: str, path: Path | str | None = None):
        """Initialize project parse error.

        Args:
            message: Human-readable error description.
            path: Most specific file or directory involved.
        """
        self.message = message
        self.path = Path(path) if path is not None else None
        super().__init__(message)

    def to_dict(self) -> dict[str, str]:
        """Convert to the {message, path?, code} error shape."""
        data = {"message": self.message, "code": self.code}
        if self.path is not None:
            data["path"] = str(self.path)
        return data


class NameFormatError(ProjectParseError):
    """Project directory basename does not match the 00-slug format."""

    code = "ENAMEFORMAT"

    def __init__(self, path: Path | str):
        self.basename = Path(path).name
        super().__init__(
            f"Expected project dir to be in 00-slug format and got {self.basename}",
            path=path,
        )


class UnsupportedLanguageError(ProjectParseError):
    """Locale resolves to a base language the parser does not support.

    Attributes:
        language: The unsupported base language code.
    """

    code = "EUNSUPPORTEDLANG"

    def __init__(self, language: str):
        self.language = language
        super().__init__(f"Unsupported language: {language}")


class EmptyDocumentError(ProjectParseError):
    """README exists but is empty or whitespace only."""

    code = "EEMPTYDOC"

    def __init__(self, path: Path | str):
        super().__init__(f"Project {Path(path).name} is empty", path=path)


class TitleFormatError(ProjectParseError):
    """README does not start with a level 1 heading.

    Attributes:
        actual_kind: Node kind found first (e.g. "heading", "paragraph").
        depth: Heading depth when actual_kind is "heading".
    """

    code = "ETITLEFORMAT"

    def __init__(self, path: Path | str, actual_kind: str, depth: int | None = None):
        self.actual_kind = actual_kind
        self.depth = depth
        seen = actual_kind
        if depth is not None:
            seen = f"{actual_kind} (depth: {depth})"
        super().__init__(
            f"Expected {Path(path).name} to start with h1 and instead saw {seen}",
            path=path,
        )


class UnknownLearningObjectiveError(ProjectParseError):
    """README references learning objectives not present in the catalog.

    Attributes:
        codes: Sorted unknown codes.
    """

    code = "EUNKNOWNLO"

    def __init__(self, path: Path | str, codes: list[str] | set[str]):
        self.codes = sorted(codes)
        super().__init__(
            f"Unknown learning objectives: {', '.join(self.codes)}.",
            path=path,
        )


class HttpError(ProjectParseError):
    """Cover image download returned a non-200 response.

    Attributes:
        status_code: HTTP status code of the response.
        url: Requested URL.
    """

    code = "EHTTP"

    def __init__(self, status_code: int, url: str | None = None):
        self.status_code = status_code
        self.url = url
        super().__init__(f"HTTP error {status_code}")


class ImageFormatError(ProjectParseError):
    """Cover image could not be decoded for resizing.

    Attributes:
        url: Cover reference as written in the README.
    """

    code = "EIMAGEFORMAT"

    def __init__(self, url: str, path: Path | str | None = None):
        self.url = url
        super().__init__(f"Cover image {url} is not a readable image", path=path)
