"""Ordered, parent-linked tree of heading payloads.

Nodes live in a single arena list and are addressed by integer positions.
Parent and child links are positions, so dropping the tree drops every node
at once.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator

from mdtree.exceptions import TreeInvariantError
from mdtree.schemas.headings import NodePayload, RootPayload

logger = logging.getLogger(__name__)

Position = int

ROOT_POSITION: Position = 0


@dataclass
class _Node:
    payload: NodePayload
    parent: Position | None = None
    children: list[Position] = field(default_factory=list)


class OrderedTree:
    """A rooted multi-way tree whose children keep insertion order.

    The synthetic root exists from construction onward. Nodes are created
    detached with :meth:`new_node` and become part of the tree once
    :meth:`attach_child` links them under a parent. ``size`` counts attached
    nodes plus the root.
    """

    def __init__(self) -> None:
        self._nodes: list[_Node] = [_Node(payload=RootPayload())]
        self._size = 1

    @classmethod
    def create_root(cls) -> OrderedTree:
        """Return a tree holding only the synthetic root."""
        return cls()

    @property
    def root(self) -> Position:
        return ROOT_POSITION

    @property
    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def new_node(self, payload: NodePayload) -> Position:
        """Store a detached node and return its position."""
        self._nodes.append(_Node(payload=payload))
        return len(self._nodes) - 1

    def _lookup(self, position: Position | None) -> _Node | None:
        if position is None or not 0 <= position < len(self._nodes):
            return None
        return self._nodes[position]

    def get(self, position: Position | None) -> NodePayload | None:
        """Return the payload at *position*, or None if the position is invalid."""
        node = self._lookup(position)
        return node.payload if node else None

    def payload(self, position: Position) -> NodePayload:
        """Return the payload at a position this tree handed out.

        Raises:
            TreeInvariantError: If the position does not resolve to a node.
        """
        payload = self.get(position)
        if payload is None:
            raise TreeInvariantError(f"No node stored at position {position!r}")
        return payload

    def parent_of(self, position: Position | None) -> Position | None:
        """Return the parent position, or None for the root or an invalid position."""
        node = self._lookup(position)
        return node.parent if node else None

    def attach_child(self, parent: Position | None, child: Position) -> bool:
        """Append *child* to *parent*'s children and link it back.

        Attaching under a missing parent is a no-op that leaves ``size``
        untouched.

        Returns:
            True if the child was attached.

        Raises:
            TreeInvariantError: If *child* is the root or already has a parent.
        """
        parent_node = self._lookup(parent)
        child_node = self._lookup(child)
        if parent_node is None or child_node is None:
            logger.debug("Skipping attach of %r under missing parent %r", child, parent)
            return False
        if child == ROOT_POSITION or child_node.parent is not None:
            raise TreeInvariantError(f"Position {child!r} is already attached")

        parent_node.children.append(child)
        child_node.parent = parent
        self._size += 1
        return True

    def children_of(self, position: Position | None) -> tuple[Position, ...]:
        node = self._lookup(position)
        return tuple(node.children) if node else ()

    def is_root(self, position: Position | None) -> bool:
        return position == ROOT_POSITION

    def is_leaf(self, position: Position | None) -> bool:
        node = self._lookup(position)
        return node is not None and not node.children

    def depth(self, position: Position | None) -> int | None:
        """Count nodes from the root down to *position* inclusive (root is 1)."""
        if self._lookup(position) is None:
            return None
        depth = 1
        current = position
        while not self.is_root(current):
            current = self.parent_of(current)
            if current is None:
                # Detached node: not reachable from the root.
                return None
            depth += 1
        return depth

    def height(self, position: Position | None) -> int | None:
        """Return 1 plus the tallest child subtree; 1 for a leaf."""
        node = self._lookup(position)
        if node is None:
            return None
        tallest = 0
        for child in node.children:
            tallest = max(tallest, self.height(child) or 0)
        return tallest + 1

    def iter_preorder(self, start: Position = ROOT_POSITION) -> Iterator[Position]:
        """Yield positions under *start* (inclusive), parents before children."""
        if self._lookup(start) is None:
            return
        stack = [start]
        while stack:
            position = stack.pop()
            yield position
            stack.extend(reversed(self._nodes[position].children))

    def __repr__(self) -> str:
        return f"<OrderedTree size={self._size} height={self.height(self.root)}>"
