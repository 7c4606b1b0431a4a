from __future__ import annotations

"""
Unit tests for the Layered Outline Parser.

Verifies:
1. Root detection and exclusion from the node stream.
2. Depth mapping for flush-left and indented bullet lists.
3. Tolerance of commentary, rules and malformed lines.
"""

from mdscaffold.core.parsing.layered import LayeredOutlineParser, parse_layered
from mdscaffold.domain.outline_models import NodeKind, OutlineNode


def _pairs(outline):
    return [(n.depth, n.name) for n in outline.nodes]


def test_root_line_is_not_emitted(layered_lines):
    """The first unindented line becomes the root, never a node."""
    outline = parse_layered(layered_lines)

    assert outline.root == "root"
    assert "root" not in [n.name for n in outline.nodes]


def test_flush_left_bullets_start_at_depth_zero(layered_lines):
    """'- src' directly under the root line is a first-level child."""
    outline = parse_layered(layered_lines)

    assert _pairs(outline) == [(0, "src"), (1, "main.go"), (0, "docs")]


def test_indented_bullets_consume_root_level():
    """Children indented one step from the root drop one level."""
    lines = [
        "root",
        "  - src",
        "    - main.go",
        "    - pkg",
        "      - util.go",
        "  - docs",
    ]
    outline = parse_layered(lines)

    assert _pairs(outline) == [
        (0, "src"), (1, "main.go"), (1, "pkg"), (2, "util.go"), (0, "docs"),
    ]


def test_star_bullets_are_accepted():
    outline = parse_layered(["project", "* app", "  * __init__.py"])

    assert _pairs(outline) == [(0, "app"), (1, "__init__.py")]


def test_blank_lines_are_ignored_without_counting():
    outline = parse_layered(["root", "", "   ", "- src", "\n"])

    assert _pairs(outline) == [(0, "src")]
    assert outline.skipped_lines == 0


def test_indented_commentary_is_skipped():
    """Indented lines without a bullet are free text, not entries."""
    lines = [
        "root",
        "- src",
        "    holds the application code",
        "  - main.go",
    ]
    outline = parse_layered(lines)

    assert _pairs(outline) == [(0, "src"), (1, "main.go")]
    assert outline.skipped_lines == 1


def test_horizontal_rule_produces_no_node():
    outline = parse_layered(["root", "---", "- src", "***"])

    assert _pairs(outline) == [(0, "src")]
    assert outline.skipped_lines == 2


def test_entries_before_root_are_skipped():
    outline = parse_layered(["  - orphan", "root", "- src"])

    assert outline.root == "root"
    assert _pairs(outline) == [(0, "src")]
    assert outline.skipped_lines == 1


def test_bulleted_first_line_becomes_root():
    outline = parse_layered(["- root", "  - src"])

    assert outline.root == "root"
    assert _pairs(outline) == [(0, "src")]


def test_crlf_line_endings():
    outline = parse_layered(["root\r\n", "- README.md\r\n"])

    assert outline.root == "root"
    assert _pairs(outline) == [(0, "README.md")]


def test_node_kind_classification():
    outline = LayeredOutlineParser().parse(["root", "- src", "- README.md"])

    kinds = {n.name: n.kind for n in outline.nodes}
    assert kinds == {"src": NodeKind.DIRECTORY, "README.md": NodeKind.FILE}


def test_depth_counts_enclosing_bullets():
    """Each node's depth equals the number of bulleted ancestors around it."""
    lines = [
        "root",
        "- a",
        "  - b",
        "    - c",
        "      - d.txt",
        "  - e",
        "- f",
    ]
    outline = parse_layered(lines)

    assert outline.nodes == [
        OutlineNode(0, "a"),
        OutlineNode(1, "b"),
        OutlineNode(2, "c"),
        OutlineNode(3, "d.txt"),
        OutlineNode(1, "e"),
        OutlineNode(0, "f"),
    ]


def test_markdown_code_fences_are_ignored():
    outline = parse_layered(["```markdown", "root", "- src", "```"])

    assert outline.root == "root"
    assert _pairs(outline) == [(0, "src")]
    assert outline.skipped_lines == 2


def test_slashes_are_stripped_from_names():
    """'- /src/' names the same directory as '- src'."""
    outline = parse_layered(["/project/", "- /src/", "  - \\main.go", "- /"])

    assert outline.root == "project"
    assert _pairs(outline) == [(0, "src"), (1, "main.go")]
    assert outline.skipped_lines == 1
