"""Test setup for mdtree."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for pytest.

    This allows running the filesystem-backed tests selectively:
        pytest -m docs        # run only tests that write document trees
        pytest -m "not docs"  # skip them
    """
    config.addinivalue_line(
        "markers",
        "docs: marks tests that write sample document trees under tmp_path",
    )


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    """A small documentation tree with nested folders and mixed extensions."""
    root = tmp_path / "docs"
    (root / "guide").mkdir(parents=True)
    (root / "guide" / "install.md").write_text(
        "---\ntitle: Installing\n---\n# Setup\n## Linux\n## macOS\n", encoding="utf-8"
    )
    (root / "guide" / "usage.mdx").write_text("# Usage\n### Flags\n", encoding="utf-8")
    (root / "index.md").write_text("Intro text with no headings.\n", encoding="utf-8")
    (root / "notes.txt").write_text("# Not a document\n", encoding="utf-8")
    return root
