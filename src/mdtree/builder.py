"""Build an ordered tree from a flat, leveled heading sequence."""

from __future__ import annotations

import logging
from typing import Iterable, Tuple, Union

from mdtree.exceptions import StructureError
from mdtree.schemas import Heading, Placeholder
from mdtree.tree import OrderedTree, Position

logger = logging.getLogger(__name__)

HeadingLike = Union[Heading, Tuple[int, str]]


def build_tree(base_level: int, headings: Iterable[HeadingLike]) -> OrderedTree:
    """Reconstruct heading nesting in a single forward pass.

    A cursor tracks the most recently attached node and its level. Each
    heading is compared against that level and either descends one level,
    descends several levels through placeholder nodes, lands beside the
    cursor, or climbs back up through parent links.

    Args:
        base_level: Level treated as sitting directly above the root. Callers
            are expected to have dropped headings at or below it.
        headings: Headings in document order, as ``Heading`` models or
            ``(level, title)`` pairs.

    Returns:
        The populated tree. An empty input yields a root-only tree.

    Raises:
        StructureError: If a heading would have to attach above the root.
    """
    tree = OrderedTree.create_root()
    level_cursor = base_level
    position_cursor: Position = tree.root

    for index, item in enumerate(headings):
        heading = _coerce(item)
        level = heading.level

        if level == level_cursor + 1:
            parent = position_cursor

        elif level > level_cursor + 1:
            missing = level - level_cursor - 1
            logger.debug(
                "Bridging %d skipped level(s) before %r", missing, heading.title
            )
            for _ in range(missing):
                placeholder = tree.new_node(Placeholder())
                tree.attach_child(position_cursor, placeholder)
                position_cursor = placeholder
                level_cursor += 1
            parent = position_cursor

        elif level == level_cursor:
            parent = tree.parent_of(position_cursor)
            if parent is None:
                raise _above_root(heading, index)

        else:
            parent = tree.parent_of(position_cursor)
            for _ in range(level_cursor - level):
                parent = tree.parent_of(parent)
                level_cursor -= 1
                if parent is None:
                    raise _above_root(heading, index)

        node = tree.new_node(heading)
        tree.attach_child(parent, node)
        position_cursor = node
        level_cursor = level

    return tree


def _coerce(item: HeadingLike) -> Heading:
    if isinstance(item, Heading):
        return item
    level, title = item
    return Heading(level=level, title=title)


def _above_root(heading: Heading, index: int) -> StructureError:
    return StructureError(
        f"Heading {index} (level {heading.level}, {heading.title!r}) "
        "would attach above the document root",
        level=heading.level,
        title=heading.title,
        index=index,
    )
