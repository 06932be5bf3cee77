# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Learning objective extraction, validation and expansion.

Learning objectives are referenced in a README by path-style codes such as
"html/semantics" or "js/data-types/primitive-vs-non-primitive". A code is
recognized when it is either an inline code span or the whole text of a
list item, and it fully matches CODE_PATTERN. A single segment such as
"css" only names a catalog root, so it counts when a catalog is given and
contains it.

When a catalog is given, every referenced code must exist in it, and a
referenced parent with none of its descendants referenced is replaced by
all of its descendant leaves.

Example:
    >>> catalog = LearningObjectiveCatalog.from_tree(
    ...     {"html": ["semantics", "validation"], "css": None}
    ... )
    >>> catalog.leaves("html")
    ('html/semantics', 'html/validation')
"""

import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from curriculum_parser.core.config.yaml_loader import find_yaml_file, load_yaml
from curriculum_parser.domains.project.document import ParsedDocument
from curriculum_parser.domains.project.exceptions import UnknownLearningObjectiveError
from curriculum_parser.utils.logging import get_logger

logger = get_logger(__name__)

CODE_PATTERN = re.compile(r"[a-z0-9][a-z0-9-]*(?:/[a-z0-9][a-z0-9-]*)+")
ROOT_CODE_PATTERN = re.compile(r"[a-z0-9][a-z0-9-]*")

# Catalog file looked up when the catalog path is a directory
CATALOG_DATA_STEM = "data"


@dataclass(frozen=True)
class LearningObjectiveNode:
    """A catalog entry.

    Attributes:
        code: Full path-style code.
        parent: Code of the parent entry, None for roots.
        children: Codes of the direct children, in catalog order.
    """

    code: str
    parent: str | None = None
    children: tuple[str, ...] = ()

    @property
    def is_leaf(self) -> bool:
        return not self.children


class LearningObjectiveCatalog:
    """Forest of learning objectives indexed by full code.

    Lookups are O(1); expanding a node visits only its subtree.
    """

    def __init__(self, nodes: Mapping[str, LearningObjectiveNode]) -> None:
        self._nodes = dict(nodes)

    @classmethod
    def from_tree(cls, tree: Any) -> "LearningObjectiveCatalog":
        """Build a catalog from a nested hierarchy.

        Each level is a mapping (name -> subtree), a list of names or
        single-key mappings, a bare name, or None/empty for a leaf.

        Args:
            tree: The hierarchy, e.g. as loaded from YAML.

        Returns:
            The indexed catalog.

        Raises:
            ValueError: If the hierarchy contains an unsupported value.
        """
        nodes: dict[str, LearningObjectiveNode] = {}
        cls._index(tree, None, nodes)
        return cls(nodes)

    @classmethod
    def _index(
        cls,
        subtree: Any,
        parent: str | None,
        nodes: dict[str, LearningObjectiveNode],
    ) -> tuple[str, ...]:
        children: list[str] = []
        for name, grandchildren in cls._entries(subtree):
            code = f"{parent}/{name}" if parent else str(name)
            child_codes = cls._index(grandchildren, code, nodes)
            nodes[code] = LearningObjectiveNode(code=code, parent=parent, children=child_codes)
            children.append(code)
        return tuple(children)

    @staticmethod
    def _entries(subtree: Any) -> Iterator[tuple[str, Any]]:
        if subtree is None:
            return
        if isinstance(subtree, str):
            yield subtree, None
        elif isinstance(subtree, Mapping):
            yield from subtree.items()
        elif isinstance(subtree, list):
            for item in subtree:
                if isinstance(item, str):
                    yield item, None
                elif isinstance(item, Mapping):
                    yield from item.items()
                else:
                    raise ValueError(
                        f"Unsupported learning objective entry: {item!r}"
                    )
        else:
            raise ValueError(
                f"Unsupported learning objective subtree: {type(subtree).__name__}"
            )

    def __contains__(self, code: object) -> bool:
        return code in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __getitem__(self, code: str) -> LearningObjectiveNode:
        return self._nodes[code]

    def get(self, code: str) -> LearningObjectiveNode | None:
        return self._nodes.get(code)

    @property
    def roots(self) -> tuple[str, ...]:
        """Codes of the top-level entries."""
        return tuple(code for code, node in self._nodes.items() if node.parent is None)

    def descendants(self, code: str) -> tuple[str, ...]:
        """All codes below the given code, depth-first."""
        result: list[str] = []
        for child in self._nodes[code].children:
            result.append(child)
            result.extend(self.descendants(child))
        return tuple(result)

    def leaves(self, code: str) -> tuple[str, ...]:
        """Leaf codes below the given code, or the code itself for a leaf."""
        if self._nodes[code].is_leaf:
            return (code,)
        return tuple(c for c in self.descendants(code) if self._nodes[c].is_leaf)


def load_catalog(path: Path) -> LearningObjectiveCatalog:
    """Load a catalog from a YAML file or a directory holding data.yml.

    Args:
        path: Catalog file, or directory containing data.yml / data.yaml.
            Other files in the directory are ignored.

    Returns:
        The loaded catalog.

    Raises:
        YAMLLoadError: If the file is missing or is not valid YAML.
        ValueError: If the hierarchy holds an unsupported entry.
    """
    source = find_yaml_file(path, CATALOG_DATA_STEM) if path.is_dir() else path
    catalog = LearningObjectiveCatalog.from_tree(load_yaml(source))
    logger.debug("learning_objective_catalog_loaded", path=str(source), size=len(catalog))
    return catalog


def _as_code(candidate: str, catalog: LearningObjectiveCatalog | None) -> str | None:
    candidate = candidate.strip()
    if CODE_PATTERN.fullmatch(candidate):
        return candidate
    if catalog is not None and ROOT_CODE_PATTERN.fullmatch(candidate) and candidate in catalog:
        return candidate
    return None


def extract_learning_objective_codes(
    document: ParsedDocument,
    catalog: LearningObjectiveCatalog | None = None,
) -> set[str]:
    """Collect learning objective codes referenced anywhere in the README.

    Single-segment root codes are only collected when the catalog has them.
    """
    candidates: list[str] = []
    for node in document.walk():
        if node.type == "inlineCode" and node.value:
            candidates.append(node.value)
        elif node.type == "listItem":
            candidates.extend(child.text for child in node.children if child.type == "paragraph")

    return {code for code in (_as_code(c, catalog) for c in candidates) if code is not None}


def expand_learning_objectives(
    codes: set[str],
    catalog: LearningObjectiveCatalog,
) -> frozenset[str]:
    """Replace parents referenced on their own by their leaf codes.

    A parent is kept verbatim (and not expanded) when any of its
    descendants is referenced too. All codes must exist in the catalog.
    """
    expanded: set[str] = set()
    for code in codes:
        node = catalog[code]
        if node.is_leaf or codes.intersection(catalog.descendants(code)):
            expanded.add(code)
            continue
        leaves = catalog.leaves(code)
        logger.debug("learning_objective_expanded", code=code, leaves=len(leaves))
        expanded.update(leaves)
    return frozenset(expanded)


def resolve_learning_objectives(
    document: ParsedDocument,
    catalog: LearningObjectiveCatalog | None = None,
) -> frozenset[str]:
    """Extract, validate and expand the README's learning objectives.

    Args:
        document: Parsed README.
        catalog: Known learning objectives. None skips validation and
            expansion.

    Returns:
        Set of learning objective codes.

    Raises:
        UnknownLearningObjectiveError: If a code is missing from the catalog.
    """
    codes = extract_learning_objective_codes(document, catalog)
    if catalog is None:
        return frozenset(codes)

    unknown = {code for code in codes if code not in catalog}
    if unknown:
        raise UnknownLearningObjectiveError(document.path, unknown)

    return expand_learning_objectives(codes, catalog)
