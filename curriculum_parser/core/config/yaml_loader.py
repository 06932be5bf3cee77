# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""YAML file loader utilities.

Used to read pre-built learning objective catalogs from disk. A catalog
is either a YAML file or a directory holding data.yml (or data.yaml) next
to unrelated files such as translations, which are never read.

Example:
    >>> from pathlib import Path
    >>> from curriculum_parser.core.config.yaml_loader import find_yaml_file, load_yaml
    >>> tree = load_yaml(find_yaml_file(Path("learning-objectives"), "data"))
"""

from pathlib import Path
from typing import Any

import yaml

YAML_SUFFIXES = (".yml", ".yaml")


class YAMLLoadError(Exception):
    """Raised when YAML file cannot be loaded or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        """Initialize YAMLLoadError.

        Args:
            path: Path to the YAML file or directory that failed to load.
            reason: Description of why the file failed to load.
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load YAML file '{path}': {reason}")


def load_yaml(path: Path) -> dict[str, Any] | list[Any]:
    """Load a single YAML file holding a mapping or a list.

    Args:
        path: Path to the YAML file to load.

    Returns:
        The parsed mapping or list. Empty dict if file is empty.

    Raises:
        YAMLLoadError: If the file doesn't exist, cannot be read,
            contains invalid YAML or has a scalar root.
    """
    if not path.exists():
        raise YAMLLoadError(path, "File does not exist")

    if not path.is_file():
        raise YAMLLoadError(path, "Path is not a file")

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise YAMLLoadError(path, f"Cannot read file: {e}") from e

    try:
        parsed = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise YAMLLoadError(path, f"Invalid YAML syntax: {e}") from e

    if parsed is None:
        return {}

    if not isinstance(parsed, (dict, list)):
        raise YAMLLoadError(
            path, f"YAML root must be a mapping or a list, got {type(parsed).__name__}"
        )

    return parsed


def find_yaml_file(directory: Path, stem: str) -> Path:
    """Locate <stem>.yml or <stem>.yaml inside a directory.

    Only the named file is looked up; other YAML files in the directory
    are neither opened nor parsed.

    Args:
        directory: Directory to search.
        stem: File name without extension, e.g. "data".

    Returns:
        Path of the first existing candidate, .yml before .yaml.

    Raises:
        YAMLLoadError: If the directory is missing or holds neither file.
    """
    if not directory.exists():
        raise YAMLLoadError(directory, "Directory does not exist")

    if not directory.is_dir():
        raise YAMLLoadError(directory, "Path is not a directory")

    for suffix in YAML_SUFFIXES:
        candidate = directory / f"{stem}{suffix}"
        if candidate.is_file():
            return candidate

    raise YAMLLoadError(directory, f"No {stem}.yml or {stem}.yaml in directory")
