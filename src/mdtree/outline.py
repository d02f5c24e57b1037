"""Outline pipeline: extract, filter, build, and render documents."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Iterable, Sequence

from mdtree.builder import HeadingLike, build_tree
from mdtree.config import MDTREE_MAX_WORKERS
from mdtree.exceptions import ExtractionError, StructureError
from mdtree.extractor import extract_headings, filter_headings
from mdtree.renderer import render
from mdtree.schemas import Heading, OutlineResult

logger = logging.getLogger(__name__)


def outline_text(name: str, headings: Iterable[HeadingLike], level: int = 0) -> str:
    """Build and render an already-extracted heading sequence.

    Raises:
        StructureError: If the heading levels imply a node above the root.
    """
    return render(name, build_tree(level, headings))


def outline_document(path: Path, level: int = 0) -> OutlineResult:
    """Outline a single document, capturing its failure instead of raising.

    The front-matter title names the outline; the file name is used when the
    document has none.
    """
    logger.debug("Outlining %s (level=%d)", path, level)
    name = path.name
    try:
        parsed = extract_headings(path)
        name = parsed.title or path.name
        headings: list[Heading] = filter_headings(parsed.headings, level)
        tree = build_tree(level, headings)
    except (ExtractionError, StructureError) as exc:
        logger.warning("Could not outline %s: %s", path, exc)
        return OutlineResult(path=path, name=name, error=str(exc))

    return OutlineResult(
        path=path,
        name=name,
        outline=render(name, tree),
        node_count=tree.size,
    )


async def outline_paths(
    paths: Sequence[Path],
    level: int = 0,
    *,
    max_workers: int = MDTREE_MAX_WORKERS,
) -> list[OutlineResult]:
    """Outline several documents concurrently, preserving input order.

    Each document is built in a worker thread; trees share no state, so the
    only coordination is the semaphore bounding concurrent reads.
    """
    semaphore = asyncio.Semaphore(max(1, max_workers))

    async def _one(path: Path) -> OutlineResult:
        async with semaphore:
            return await asyncio.to_thread(outline_document, path, level)

    return list(await asyncio.gather(*(_one(path) for path in paths)))
