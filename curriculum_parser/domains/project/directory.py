# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Project directory name validation.

Project directories are named with a two-digit ordinal followed by a
lowercase kebab-case slug, e.g. "01-cipher" or "04-burger-queen-api".
"""

import re
from dataclasses import dataclass
from pathlib import Path

from curriculum_parser.domains.project.exceptions import NameFormatError

DIRECTORY_NAME_PATTERN = re.compile(r"(?P<ordinal>[0-9]{2})-(?P<slug>[a-z0-9-]+)")


@dataclass(frozen=True)
class ProjectDirectoryName:
    """Validated project directory name.

    Attributes:
        ordinal: Two-digit ordinal prefix.
        slug: Lowercase kebab-case slug.
    """

    ordinal: str
    slug: str


def parse_directory_name(path: Path | str) -> ProjectDirectoryName:
    """Validate the last path segment and split it into ordinal and slug.

    Args:
        path: Project directory path.

    Returns:
        The validated directory name.

    Raises:
        NameFormatError: If the basename is not in 00-slug format.
    """
    basename = Path(path).name
    match = DIRECTORY_NAME_PATTERN.fullmatch(basename)
    if match is None:
        raise NameFormatError(path)
    return ProjectDirectoryName(ordinal=match["ordinal"], slug=match["slug"])
