"""Render a heading tree as a box-drawn outline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from mdtree.tree import OrderedTree, Position

DOCUMENT_MARKER = "\U0001f4c4"
EMPTY_MARKER = "[]"
INDENT = "\t"

BRANCH = "├── "
LAST = "└── "
VERTICAL = "│   "
SPACE = "    "


@dataclass(frozen=True)
class OutlineLine:
    """One rendered node: indentation prefix, connector glyph, and title."""

    prefix: str
    connector: str
    title: str
    depth: int

    @property
    def is_last(self) -> bool:
        return self.connector == LAST

    def __str__(self) -> str:
        return f"{self.prefix}{self.connector}{self.title}"


def walk(tree: OrderedTree) -> Iterator[OutlineLine]:
    """Yield outline lines in preorder, skipping the synthetic root."""
    yield from _walk(tree, tree.root, "", 1)


def _walk(
    tree: OrderedTree, position: Position, prefix: str, depth: int
) -> Iterator[OutlineLine]:
    children = tree.children_of(position)
    for index, child in enumerate(children):
        last = index == len(children) - 1
        title = tree.payload(child).title
        yield OutlineLine(
            prefix=prefix, connector=LAST if last else BRANCH, title=title, depth=depth
        )
        yield from _walk(tree, child, prefix + (SPACE if last else VERTICAL), depth + 1)


def format_outline(name: str, lines: Iterable[OutlineLine]) -> str:
    """Join a name line and outline lines into text.

    An empty line sequence renders the empty marker under the name.
    """
    rendered = [f"{DOCUMENT_MARKER} {name}"]
    body = [f"{INDENT}{line}" for line in lines]
    rendered.extend(body or [f"{INDENT}{EMPTY_MARKER}"])
    return "\n".join(rendered)


def render(name: str, tree: OrderedTree) -> str:
    """Render *tree* under the document *name*."""
    return format_outline(name, walk(tree))
