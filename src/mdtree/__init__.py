"""mdtree: print heading outlines of Markdown documents as trees."""

__version__ = "0.1.0"

from mdtree.builder import build_tree
from mdtree.exceptions import (
    ExtractionError,
    MdtreeError,
    StructureError,
    TreeInvariantError,
)
from mdtree.extractor import ParsedDocument, extract_headings, parse_markdown
from mdtree.outline import outline_document, outline_paths, outline_text
from mdtree.renderer import OutlineLine, render, walk
from mdtree.schemas import Heading, OutlineResult, Placeholder
from mdtree.tree import OrderedTree

__all__ = [
    "ExtractionError",
    "Heading",
    "MdtreeError",
    "OrderedTree",
    "OutlineLine",
    "OutlineResult",
    "ParsedDocument",
    "Placeholder",
    "StructureError",
    "TreeInvariantError",
    "build_tree",
    "extract_headings",
    "outline_document",
    "outline_paths",
    "outline_text",
    "parse_markdown",
    "render",
    "walk",
]
