"""Recursive discovery of documents to outline."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator

logger = logging.getLogger(__name__)


def _accepts(path: Path, extensions: frozenset[str]) -> bool:
    return path.suffix.lower().lstrip(".") in extensions


def discover_documents(path: Path, extensions: Iterable[str]) -> Iterator[Path]:
    """Yield files under *path* whose extension is in *extensions*.

    A file path is yielded as-is when its extension matches. Directories are
    walked recursively with entries sorted by name; symlinked directories are
    not followed.

    Raises:
        FileNotFoundError: If *path* does not exist.
    """
    accepted = frozenset(ext.lower().lstrip(".") for ext in extensions)
    if not path.exists():
        raise FileNotFoundError(f"No such file or directory: {path}")

    if path.is_file():
        if _accepts(path, accepted):
            yield path
        return

    try:
        entries = sorted(path.iterdir(), key=lambda entry: entry.name)
    except PermissionError as exc:
        logger.warning("Skipping unreadable directory %s: %s", path, exc)
        return

    for entry in entries:
        if entry.is_dir() and not entry.is_symlink():
            yield from discover_documents(entry, accepted)
        elif entry.is_file() and _accepts(entry, accepted):
            yield entry
