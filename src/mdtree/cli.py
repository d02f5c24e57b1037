"""Command-line entry point for mdtree."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Sequence

from mdtree import __version__
from mdtree.config import (
    MDTREE_EXTENSIONS,
    MDTREE_LEVEL,
    MDTREE_LOG_LEVEL,
    MDTREE_MAX_WORKERS,
)
from mdtree.discovery import discover_documents
from mdtree.outline import outline_paths
from mdtree.schemas import OutlineResult
from mdtree.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdtree",
        description="Print a table of contents tree for each Markdown document under a path.",
    )
    parser.add_argument(
        "-l",
        "--level",
        type=_non_negative_int,
        default=MDTREE_LEVEL,
        help="Exclude headings at and above the specified level; "
        "-l 1 skips H1s, -l 2 skips H1s and H2s.",
    )
    parser.add_argument(
        "-p",
        "--path",
        type=Path,
        default=Path("."),
        help="Relative path to a document or directory (default: current directory).",
    )
    parser.add_argument(
        "-e",
        "--ext",
        action="append",
        dest="extensions",
        metavar="EXT",
        help="Document extension to include; repeatable (default: %s)."
        % ",".join(MDTREE_EXTENSIONS),
    )
    parser.add_argument(
        "-j",
        "--jobs",
        type=int,
        default=MDTREE_MAX_WORKERS,
        help="Maximum documents processed concurrently.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging."
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _non_negative_int(raw: str) -> int:
    value = int(raw)
    if value < 0:
        raise argparse.ArgumentTypeError("level must be 0 or greater")
    return value


def format_result(result: OutlineResult) -> str:
    """Render one document's block: path line, outline, trailing blank line."""
    body = result.outline if result.ok else f"\tError: {result.error}"
    return f"{result.path}\n{body}\n"


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging("DEBUG" if args.verbose else MDTREE_LOG_LEVEL)
    extensions = args.extensions or MDTREE_EXTENSIONS

    try:
        paths = list(discover_documents(args.path, extensions))
    except FileNotFoundError as exc:
        print(f"mdtree: {exc}", file=sys.stderr)
        return 2

    logger.debug("Discovered %d document(s) under %s", len(paths), args.path)
    results = asyncio.run(outline_paths(paths, args.level, max_workers=args.jobs))

    for result in results:
        print(format_result(result))
    return 0 if all(result.ok for result in results) else 1


if __name__ == "__main__":
    sys.exit(main())
