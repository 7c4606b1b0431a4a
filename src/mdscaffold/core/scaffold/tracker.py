from __future__ import annotations

"""
Path-Stack Tracker.

Resolves the full path of each outline node from the chain of directories
currently open above it. The tracker is owned by a single build call; no
parse state survives between runs.
"""

import os
from typing import List, Tuple

from mdscaffold.domain.outline_models import NodeKind, OutlineNode, relative_name


class PathStackTracker:
    """
    Maintains the ancestor directory stack for one outline.

    Args:
        root: Root directory name from the outline.
        base_dir: Directory under which the root is materialized.
    """

    def __init__(self, root: str, base_dir: str = "") -> None:
        root = relative_name(root)
        self.root_path = os.path.join(base_dir, root) if base_dir else root
        self._stack: List[Tuple[str, int]] = []

    @property
    def stack(self) -> List[str]:
        """Names of the currently open directories, outermost first."""
        return [name for name, _ in self._stack]

    def step(self, node: OutlineNode) -> Tuple[str, NodeKind]:
        """
        Advance the tracker by one node.

        Closes every open directory at the same or a deeper level than the
        node, resolves the node's full path, and opens the node itself when
        it is a directory.

        Args:
            node: Next outline node in input order.

        Returns:
            Tuple[str, NodeKind]: Full path and kind of the node.
        """
        # Siblings share a depth and must close each other
        while self._stack and node.depth <= self._stack[-1][1]:
            self._stack.pop()

        name = relative_name(node.name)
        path = os.path.join(self.root_path, *self.stack, name)
        kind = node.kind

        if kind == NodeKind.DIRECTORY:
            self._stack.append((name, node.depth))

        return path, kind
