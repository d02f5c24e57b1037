"""Extract document titles and heading sequences from Markdown and HTML."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from mdtree.exceptions import ExtractionError
from mdtree.schemas import Heading

try:
    from bs4 import BeautifulSoup
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc


MARKDOWN_SUFFIXES = frozenset({".md", ".mdx", ".markdown"})
HTML_SUFFIXES = frozenset({".html", ".htm"})

_FRONT_MATTER_RE = re.compile(r"\A---[ \t]*\n(.*?)\n---[ \t]*(?:\n|\Z)", re.DOTALL)
_TITLE_RE = re.compile(r"^title:[ \t]*(.+?)[ \t]*$", re.MULTILINE)
_HEADING_RE = re.compile(r"^(#{1,6})\s+(.*)$")
_CLOSING_HASHES_RE = re.compile(r"\s+#+\s*$")
_FENCE_OPEN_RE = re.compile(r"^\s{0,3}(`{3,}|~{3,})")
_FENCE_CLOSE_RE = re.compile(r"^\s{0,3}(`{3,}|~{3,})\s*$")
_HTML_HEADING_RE = re.compile(r"^h[1-6]$")


@dataclass
class ParsedDocument:
    """Title and headings extracted from one document."""

    title: str = ""
    headings: list[Heading] = field(default_factory=list)


def parse_markdown(text: str) -> ParsedDocument:
    """Extract the front-matter title and ATX headings from Markdown or MDX.

    Headings inside fenced code blocks are ignored, as is the front-matter
    block itself.
    """
    title = ""
    body = text
    front_matter = _FRONT_MATTER_RE.match(text)
    if front_matter:
        title_match = _TITLE_RE.search(front_matter.group(1))
        if title_match:
            title = _unquote(title_match.group(1))
        body = text[front_matter.end():]

    return ParsedDocument(title=title, headings=list(_iter_markdown_headings(body)))


def _iter_markdown_headings(body: str) -> Iterable[Heading]:
    fence: str | None = None
    for line in body.splitlines():
        if fence is not None:
            # Closed only by a bare run of the same character, at least as long.
            closing = _FENCE_CLOSE_RE.match(line)
            if closing and closing.group(1).startswith(fence):
                fence = None
            continue

        opening = _FENCE_OPEN_RE.match(line)
        if opening:
            fence = opening.group(1)
            continue

        match = _HEADING_RE.match(line)
        if match:
            text = _CLOSING_HASHES_RE.sub("", match.group(2)).strip()
            yield Heading(level=len(match.group(1)), title=text)


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
        return value[1:-1]
    return value


def parse_html(text: str) -> ParsedDocument:
    """Extract the ``<title>`` and ``h1``-``h6`` elements outside navigation."""
    soup = BeautifulSoup(text, "lxml")
    title = soup.title.get_text(" ", strip=True) if soup.title else ""
    headings = [
        Heading(level=int(tag.name[1]), title=tag.get_text(" ", strip=True))
        for tag in _iter_html_headings(soup)
    ]
    return ParsedDocument(title=title, headings=headings)


def _iter_html_headings(soup: BeautifulSoup) -> Iterable[Tag]:
    for heading in soup.find_all(_HTML_HEADING_RE):
        if heading.find_parent("nav"):
            continue
        yield heading


def extract_headings(path: Path) -> ParsedDocument:
    """Read *path* and extract its title and headings based on its suffix.

    Raises:
        ExtractionError: If the file cannot be read or decoded, or its suffix
            is not a supported document type.
    """
    suffix = path.suffix.lower()
    if suffix in MARKDOWN_SUFFIXES:
        parser = parse_markdown
    elif suffix in HTML_SUFFIXES:
        parser = parse_html
    else:
        raise ExtractionError(f"Unsupported document type: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ExtractionError(f"Could not read {path}: {exc}") from exc
    return parser(text)


def filter_headings(headings: Iterable[Heading], level: int) -> list[Heading]:
    """Drop headings at or above *level* (``level=1`` drops H1s)."""
    return [heading for heading in headings if heading.level > level]
