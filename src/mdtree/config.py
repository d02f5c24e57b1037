"""Local configuration for mdtree."""

from __future__ import annotations

import os


DEFAULT_LEVEL = 0
DEFAULT_EXTENSIONS = "md,mdx"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_MAX_WORKERS = 4


def _parse_extensions(raw: str) -> tuple[str, ...]:
    """Normalize a comma list like "md, .MDX" into ("md", "mdx")."""
    parts = (part.strip().lstrip(".").lower() for part in raw.split(","))
    return tuple(part for part in parts if part)


MDTREE_LEVEL = int(os.getenv("MDTREE_LEVEL", str(DEFAULT_LEVEL)))
MDTREE_EXTENSIONS = _parse_extensions(os.getenv("MDTREE_EXTENSIONS", DEFAULT_EXTENSIONS))
MDTREE_LOG_LEVEL = os.getenv("MDTREE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
MDTREE_MAX_WORKERS = max(1, int(os.getenv("MDTREE_MAX_WORKERS", str(DEFAULT_MAX_WORKERS))))
