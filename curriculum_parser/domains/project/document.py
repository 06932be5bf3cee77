# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""README loading and markdown parsing.

The README is parsed with markdown-it-py (CommonMark plus GFM tables and
strikethrough) and the flat token stream is folded into an immutable tree
of Node objects. Node kinds follow the usual markdown AST naming:

Block kinds:  heading, paragraph, list, listItem, blockquote, code, html,
              thematicBreak, table, tableRow, tableCell
Inline kinds: text, inlineCode, emphasis, strong, delete, link, image,
              break, html

Only the plain text of inline formatting is used downstream.

Example:
    >>> document = await load_document(Path("projects/01-cipher"), "README.md")
    >>> document.children[0].type, document.children[0].depth
    ('heading', 1)
"""

import asyncio
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from markdown_it import MarkdownIt
from markdown_it.token import Token

from curriculum_parser.domains.project.exceptions import EmptyDocumentError
from curriculum_parser.utils.logging import get_logger

logger = get_logger(__name__)

# Token type (without _open/_close) -> node kind. None means the container
# is dropped and its children are lifted into the parent.
BLOCK_KINDS: dict[str, str | None] = {
    "heading": "heading",
    "paragraph": "paragraph",
    "bullet_list": "list",
    "ordered_list": "list",
    "list_item": "listItem",
    "blockquote": "blockquote",
    "table": "table",
    "thead": None,
    "tbody": None,
    "tr": "tableRow",
    "th": "tableCell",
    "td": "tableCell",
}

INLINE_KINDS: dict[str, str | None] = {
    "em": "emphasis",
    "strong": "strong",
    "s": "delete",
    "link": "link",
}

_markdown = MarkdownIt("commonmark", {"html": True}).enable(["table", "strikethrough"])


@dataclass(frozen=True)
class Node:
    """A node of the parsed markdown tree.

    Attributes:
        type: Node kind (see module docstring).
        children: Child nodes, in document order.
        value: Literal content for text, inlineCode, code and html nodes,
            and alt text for images.
        depth: Heading level (1-6) for headings.
        url: Target for links and source for images.
        ordered: Whether a list is ordered.
    """

    type: str
    children: tuple["Node", ...] = ()
    value: str | None = None
    depth: int | None = None
    url: str | None = None
    ordered: bool | None = None

    @property
    def text(self) -> str:
        """Plain text content with all formatting removed."""
        if self.type == "break":
            return "\n"
        if self.value is not None:
            return self.value
        return "".join(child.text for child in self.children)

    def walk(self) -> Iterator["Node"]:
        """Iterate over this node and its descendants depth-first."""
        yield self
        for child in self.children:
            yield from child.walk()


@dataclass(frozen=True)
class ParsedDocument:
    """Immutable parsed README.

    Attributes:
        path: Path of the README file.
        children: Top-level block nodes.
    """

    path: Path
    children: tuple[Node, ...] = field(default_factory=tuple)

    @property
    def filename(self) -> str:
        return self.path.name

    def walk(self) -> Iterator[Node]:
        """Iterate over every node in document order."""
        for child in self.children:
            yield from child.walk()

    def find_first(self, node_type: str) -> Node | None:
        """Return the first node of the given kind, if any."""
        return next((node for node in self.walk() if node.type == node_type), None)


@dataclass
class _Frame:
    kind: str | None
    props: dict
    children: list[Node] = field(default_factory=list)


def _open_props(token: Token) -> dict:
    if token.type == "heading_open":
        return {"depth": int(token.tag[1:])}
    if token.type in ("bullet_list_open", "ordered_list_open"):
        return {"ordered": token.type == "ordered_list_open"}
    if token.type == "link_open":
        href = token.attrGet("href")
        return {"url": str(href) if href is not None else None}
    return {}


def _inline_leaf(token: Token) -> Node | None:
    if token.type == "text":
        return Node(type="text", value=token.content)
    if token.type == "code_inline":
        return Node(type="inlineCode", value=token.content)
    if token.type == "softbreak":
        return Node(type="text", value="\n")
    if token.type == "hardbreak":
        return Node(type="break")
    if token.type == "image":
        src = token.attrGet("src")
        return Node(type="image", value=token.content, url=str(src) if src is not None else None)
    if token.type == "html_inline":
        return Node(type="html", value=token.content)
    return None


def _block_leaf(token: Token) -> Node | None:
    if token.type in ("fence", "code_block"):
        return Node(type="code", value=token.content.rstrip("\n"))
    if token.type == "html_block":
        return Node(type="html", value=token.content.rstrip("\n"))
    if token.type == "hr":
        return Node(type="thematicBreak")
    return None


def _fold(tokens: Sequence[Token], kinds: dict[str, str | None]) -> list[Node]:
    """Fold a flat open/close token stream into a list of nodes."""
    stack: list[_Frame] = [_Frame(kind=None, props={})]

    for token in tokens:
        if token.nesting == 1:
            base = token.type.removesuffix("_open")
            stack.append(_Frame(kind=kinds.get(base), props=_open_props(token)))
        elif token.nesting == -1:
            frame = stack.pop()
            if frame.kind is None:
                stack[-1].children.extend(frame.children)
            else:
                stack[-1].children.append(
                    Node(type=frame.kind, children=tuple(frame.children), **frame.props)
                )
        elif token.type == "inline":
            stack[-1].children.extend(_fold(token.children or [], INLINE_KINDS))
        else:
            leaf = _inline_leaf(token) if kinds is INLINE_KINDS else _block_leaf(token)
            if leaf is not None:
                stack[-1].children.append(leaf)

    return stack[0].children


def parse_markdown(content: str, path: Path) -> ParsedDocument:
    """Parse markdown content into a ParsedDocument.

    Args:
        content: Markdown source.
        path: README path the content was read from.

    Returns:
        The parsed document.
    """
    tokens = _markdown.parse(content)
    return ParsedDocument(path=path, children=tuple(_fold(tokens, BLOCK_KINDS)))


async def load_document(directory: Path, filename: str) -> ParsedDocument:
    """Read and parse a project README.

    Args:
        directory: Project directory.
        filename: README filename inside the directory.

    Returns:
        The parsed document.

    Raises:
        FileNotFoundError: If the README (or the directory) does not exist.
            Propagated unchanged, errno is ENOENT.
        EmptyDocumentError: If the README is empty or whitespace only.
    """
    path = directory / filename
    content = await asyncio.to_thread(path.read_text, encoding="utf-8")

    if not content.strip():
        raise EmptyDocumentError(path)

    document = parse_markdown(content, path)
    logger.debug("readme_parsed", path=str(path), blocks=len(document.children))
    return document
