"""Tests for the outline walk and text formatting."""

from __future__ import annotations

from mdtree.builder import build_tree
from mdtree.renderer import BRANCH, LAST, OutlineLine, format_outline, render, walk


class TestWalk:
    """Tests for the lazy preorder walk."""

    def test_empty_tree_yields_nothing(self) -> None:
        assert list(walk(build_tree(0, []))) == []

    def test_single_child_uses_last_connector(self) -> None:
        (line,) = walk(build_tree(0, [(1, "Intro")]))

        assert line == OutlineLine(prefix="", connector=LAST, title="Intro", depth=1)
        assert line.is_last

    def test_branch_then_last(self) -> None:
        lines = list(walk(build_tree(0, [(1, "A"), (1, "B")])))

        assert [line.connector for line in lines] == [BRANCH, LAST]
        assert [line.title for line in lines] == ["A", "B"]

    def test_prefix_under_branch_keeps_vertical(self) -> None:
        lines = list(walk(build_tree(0, [(1, "A"), (2, "A1"), (1, "B")])))

        assert [str(line) for line in lines] == [
            "├── A",
            "│   └── A1",
            "└── B",
        ]

    def test_prefix_under_last_child_is_blank(self) -> None:
        lines = list(walk(build_tree(0, [(1, "A"), (3, "B")])))

        assert [str(line) for line in lines] == [
            "└── A",
            "    └── []",
            "        └── B",
        ]
        assert [line.depth for line in lines] == [1, 2, 3]

    def test_walk_is_lazy(self) -> None:
        lines = walk(build_tree(0, [(1, "A"), (1, "B")]))
        assert next(lines).title == "A"


class TestRender:
    """Tests for the rendered outline text."""

    def test_empty_document(self) -> None:
        text = render("empty.md", build_tree(0, []))
        assert text == "📄 empty.md\n\t[]"

    def test_single_heading(self) -> None:
        text = render("Doc", build_tree(0, [(1, "Intro")]))
        assert text == "📄 Doc\n\t└── Intro"

    def test_root_title_never_printed(self) -> None:
        text = render("Doc", build_tree(0, [(1, "A"), (2, "B")]))
        assert "ROOT" not in text

    def test_nested_outline(self) -> None:
        headings = [
            (1, "Landlocked"),
            (2, "Switzerland"),
            (3, "Geneva"),
            (4, "Old Town"),
            (5, "Cathédrale Saint-Pierre"),
            (2, "Bolivia"),
            (1, "Island"),
            (2, "Marine"),
            (3, "Australia"),
            (2, "Fresh Water"),
        ]
        text = render("Lorem Ipsum Test", build_tree(0, headings))

        assert text.splitlines() == [
            "📄 Lorem Ipsum Test",
            "\t├── Landlocked",
            "\t│   ├── Switzerland",
            "\t│   │   └── Geneva",
            "\t│   │       └── Old Town",
            "\t│   │           └── Cathédrale Saint-Pierre",
            "\t│   └── Bolivia",
            "\t└── Island",
            "\t    ├── Marine",
            "\t    │   └── Australia",
            "\t    └── Fresh Water",
        ]

    def test_one_line_per_heading_in_order(self) -> None:
        headings = [(1, "A"), (2, "B"), (2, "C"), (3, "D"), (1, "E")]
        lines = render("Doc", build_tree(0, headings)).splitlines()

        assert len(lines) == len(headings) + 1
        assert [line.rsplit(" ", 1)[-1] for line in lines[1:]] == [
            title for _, title in headings
        ]

    def test_render_is_idempotent(self) -> None:
        tree = build_tree(0, [(1, "A"), (4, "B"), (2, "C")])
        assert render("Doc", tree) == render("Doc", tree)

    def test_format_outline_accepts_plain_lines(self) -> None:
        lines = [OutlineLine(prefix="", connector=LAST, title="Only", depth=1)]
        assert format_outline("N", lines) == "📄 N\n\t└── Only"
