from __future__ import annotations

"""
Unit tests for the outline and scaffold domain models.
"""

import pytest

from mdscaffold.domain.outline_models import (
    NodeKind,
    OutlineNode,
    classify_name,
    relative_name,
)
from mdscaffold.domain.scaffold_models import (
    ScaffoldEntry,
    create_error_result,
    create_success_result,
)


@pytest.mark.parametrize("name, kind", [
    ("README.md", NodeKind.FILE),
    ("main.go", NodeKind.FILE),
    (".env.example", NodeKind.FILE),
    ("src", NodeKind.DIRECTORY),
    ("my-dir", NodeKind.DIRECTORY),
    ("Makefile", NodeKind.DIRECTORY),
])
def test_classify_name(name, kind):
    assert classify_name(name) == kind
    assert OutlineNode(0, name).kind == kind


def test_outline_node_rejects_negative_depth():
    with pytest.raises(ValueError):
        OutlineNode(-1, "src")


def test_outline_node_rejects_empty_name():
    with pytest.raises(ValueError):
        OutlineNode(0, "")


def test_success_result_summary_counts():
    entries = [
        ScaffoldEntry("root", NodeKind.DIRECTORY),
        ScaffoldEntry("root/a.txt", NodeKind.FILE),
        ScaffoldEntry("root/b", NodeKind.DIRECTORY, ok=False, error="denied"),
    ]
    cfg = {"input_path": "s.md", "input_format": "tree", "output_base_dir": "", "dry_run": False}

    result = create_success_result(cfg, "root", entries, skipped_lines=2)

    assert result.ok
    assert result.summary["directories"] == 1
    assert result.summary["files"] == 1
    assert result.summary["failed"] == 1
    assert result.summary["skipped_lines"] == 2
    assert [e.path for e in result.failed_entries] == ["root/b"]


def test_error_result_carries_config():
    result = create_error_result("boom", {"input_path": "x.md", "input_format": "layered"})

    assert not result.ok
    assert result.error == "boom"
    assert result.input_path == "x.md"
    assert result.entries == []


@pytest.mark.parametrize("raw, expected", [
    ("/src", "src"),
    ("\\\\server\\share", "server\\share"),
    ("src/", "src"),
    (" /README.md ", "README.md"),
    ("/", ""),
])
def test_relative_name(raw, expected):
    assert relative_name(raw) == expected
