from __future__ import annotations

"""
Scaffold Builder.

Feeds a parsed outline through the path-stack tracker and applies every
resolved entry to a filesystem sink. Sink failures are logged and recorded,
never raised: the remaining entries are still attempted.
"""

import logging
from typing import Callable, List, Optional, Protocol, Tuple

from mdscaffold.core.scaffold.tracker import PathStackTracker
from mdscaffold.domain.outline_models import NodeKind, Outline
from mdscaffold.domain.scaffold_models import ScaffoldEntry

logger = logging.getLogger(__name__)

EntryCallback = Callable[[ScaffoldEntry], None]


class ScaffoldSink(Protocol):
    """Filesystem boundary consumed by the builder."""

    def ensure_directory(self, path: str) -> Tuple[bool, Optional[str]]:
        ...

    def create_empty_file(self, path: str) -> Tuple[bool, Optional[str]]:
        ...

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_scaffold(
        outline: Outline,
        sink: ScaffoldSink,
        base_dir: str = "",
        on_entry: Optional[EntryCallback] = None,
) -> Tuple[str, List[ScaffoldEntry]]:
    """
    Materialize an outline through a sink.

    The root directory is created first. A directory entry stays on the path
    stack even when its creation fails, so its children resolve to their
    intended paths (and fail individually) instead of landing elsewhere.

    Args:
        outline: Parsed outline (root and nodes).
        sink: Filesystem boundary receiving the operations.
        base_dir: Directory under which the root is created.
        on_entry: Optional callback invoked after each operation.

    Returns:
        Tuple[str, List[ScaffoldEntry]]: Root path and every attempted entry.
    """
    entries: List[ScaffoldEntry] = []

    if not outline.root:
        logger.warning("Outline has no root line. Nothing to create.")
        return "", entries

    tracker = PathStackTracker(outline.root, base_dir)
    entries.append(_apply(sink, tracker.root_path, NodeKind.DIRECTORY, on_entry))

    for node in outline.nodes:
        path, kind = tracker.step(node)
        entries.append(_apply(sink, path, kind, on_entry))

    return tracker.root_path, entries

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _apply(
        sink: ScaffoldSink,
        path: str,
        kind: NodeKind,
        on_entry: Optional[EntryCallback],
) -> ScaffoldEntry:
    """Execute one sink operation and wrap its outcome."""
    if kind == NodeKind.FILE:
        ok, err = sink.create_empty_file(path)
    else:
        ok, err = sink.ensure_directory(path)

    if ok:
        logger.debug(f"{kind.value} ready: {path}")
        entry = ScaffoldEntry(path=path, kind=kind)
    else:
        logger.error(f"Failed to create {kind.value} '{path}': {err}")
        entry = ScaffoldEntry(path=path, kind=kind, ok=False, error=err or "unknown error")

    if on_entry is not None:
        on_entry(entry)
    return entry
