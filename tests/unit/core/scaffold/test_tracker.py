from __future__ import annotations

"""
Unit tests for the Path-Stack Tracker.

Verifies path composition, the pop rule for siblings and ancestors,
and that files never open a scope.
"""

import os

from mdscaffold.core.scaffold.tracker import PathStackTracker
from mdscaffold.domain.outline_models import NodeKind, OutlineNode


def _run(tracker, nodes):
    return [tracker.step(OutlineNode(depth, name)) for depth, name in nodes]


def test_nested_path_composition():
    tracker = PathStackTracker("root")
    results = _run(tracker, [(0, "src"), (1, "main.go")])

    assert results == [
        (os.path.join("root", "src"), NodeKind.DIRECTORY),
        (os.path.join("root", "src", "main.go"), NodeKind.FILE),
    ]


def test_same_depth_directories_are_siblings():
    """Regression: equal depth must pop the previous directory first."""
    tracker = PathStackTracker("root")
    results = _run(tracker, [(4, "src"), (4, "docs")])

    assert [p for p, _ in results] == [
        os.path.join("root", "src"),
        os.path.join("root", "docs"),
    ]
    assert tracker.stack == ["docs"]


def test_shallower_node_closes_several_scopes():
    tracker = PathStackTracker("root")
    results = _run(tracker, [(0, "a"), (1, "b"), (2, "c"), (0, "d")])

    assert results[-1][0] == os.path.join("root", "d")
    assert tracker.stack == ["d"]


def test_files_do_not_open_a_scope():
    tracker = PathStackTracker("root")
    results = _run(tracker, [(0, "README.md"), (1, "orphan")])

    assert tracker.stack == ["orphan"]
    assert results[1][0] == os.path.join("root", "orphan")


def test_deeper_jump_nests_under_nearest_directory():
    tracker = PathStackTracker("root")
    results = _run(tracker, [(4, "src"), (12, "deep.py")])

    assert results[1][0] == os.path.join("root", "src", "deep.py")


def test_base_dir_prefixes_root(tmp_path):
    tracker = PathStackTracker("root", str(tmp_path))
    path, _ = tracker.step(OutlineNode(0, "src"))

    assert tracker.root_path == os.path.join(str(tmp_path), "root")
    assert path == os.path.join(str(tmp_path), "root", "src")


def test_trackers_do_not_share_state():
    first = PathStackTracker("one")
    first.step(OutlineNode(0, "src"))
    second = PathStackTracker("two")

    assert first.stack == ["src"]
    assert second.stack == []


def test_leading_separator_stays_under_root():
    tracker = PathStackTracker("root", "out")
    results = _run(tracker, [(0, "/src"), (1, "\\main.go"), (0, "/README.md")])

    assert [p for p, _ in results] == [
        os.path.join("out", "root", "src"),
        os.path.join("out", "root", "src", "main.go"),
        os.path.join("out", "root", "README.md"),
    ]
    assert tracker.stack == []


def test_absolute_root_stays_under_base_dir():
    tracker = PathStackTracker("/project/", "out")

    assert tracker.root_path == os.path.join("out", "project")
