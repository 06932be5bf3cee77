# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Title and summary extraction from a parsed README."""

import re

from curriculum_parser.domains.project.document import ParsedDocument
from curriculum_parser.domains.project.exceptions import TitleFormatError

# Canonical "project summary" section heading per base language
SUMMARY_HEADINGS: dict[str, str] = {
    "es": "resumen del proyecto",
    "pt": "resumo do projeto",
}

# Leading section numbering such as "1.", "2)" or "3 -"
_SECTION_NUMBER = re.compile(r"^\s*\d+(?:\.\d+)*\s*[.)\-]?\s*")


def extract_title(document: ParsedDocument) -> str:
    """Return the text of the leading level 1 heading.

    Raises:
        TitleFormatError: If the README does not start with an h1.
    """
    if not document.children:
        raise TitleFormatError(document.path, "nothing")

    first = document.children[0]
    if first.type != "heading":
        raise TitleFormatError(document.path, first.type)
    if first.depth != 1:
        raise TitleFormatError(document.path, first.type, depth=first.depth)

    return first.text.strip()


def _normalize_heading(text: str) -> str:
    text = _SECTION_NUMBER.sub("", text.strip().lower())
    return text.rstrip(":").strip()


def extract_summary(document: ParsedDocument, language: str) -> str | None:
    """Return the first paragraph of the project summary section.

    The section is the first top-level heading whose text contains the
    summary phrase for the language. It ends at the next heading of equal
    or shallower depth.

    Args:
        document: Parsed README.
        language: Base language ("es" or "pt").

    Returns:
        Paragraph text, or None when there is no summary section or the
        section has no paragraph.
    """
    phrase = SUMMARY_HEADINGS.get(language)
    if phrase is None:
        return None

    blocks = document.children
    for index, node in enumerate(blocks):
        if node.type != "heading" or phrase not in _normalize_heading(node.text):
            continue
        for sibling in blocks[index + 1:]:
            if sibling.type == "heading" and (sibling.depth or 0) <= (node.depth or 0):
                return None
            if sibling.type == "paragraph":
                return sibling.text.strip()
        return None

    return None
