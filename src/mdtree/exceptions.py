"""Custom exceptions for mdtree."""

from __future__ import annotations


class MdtreeError(Exception):
    """Base exception for mdtree operations."""


class StructureError(MdtreeError):
    """A heading sequence would place a node above the root.

    Attributes:
        level: Level of the offending heading.
        title: Title of the offending heading.
        index: Position of the offending heading in the input sequence.
    """

    def __init__(self, message: str, *, level: int, title: str, index: int) -> None:
        self.level = level
        self.title = title
        self.index = index
        super().__init__(message)


class TreeInvariantError(MdtreeError):
    """The tree handed out a position that no longer resolves to a node."""


class ExtractionError(MdtreeError):
    """Error while reading or decoding a document."""
