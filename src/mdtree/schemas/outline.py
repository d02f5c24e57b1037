"""Per-document outline output model."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel


class OutlineResult(BaseModel):
    """Outcome of outlining one document.

    Attributes:
        path: Source file the outline was built from.
        name: Display name (front-matter title, or the file name).
        outline: Rendered outline text, or None when construction failed.
        node_count: Size of the built tree including the root, or None.
        error: Failure message when the document could not be outlined.
    """

    path: Path
    name: str
    outline: str | None = None
    node_count: int | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
