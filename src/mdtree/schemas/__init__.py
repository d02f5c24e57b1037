"""Shared schemas for mdtree."""

from mdtree.schemas.headings import Heading, NodePayload, Placeholder, RootPayload
from mdtree.schemas.outline import OutlineResult

__all__ = ["Heading", "NodePayload", "OutlineResult", "Placeholder", "RootPayload"]
