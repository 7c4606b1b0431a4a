from __future__ import annotations

"""
Outline Data Models.

Provides the transient structures produced by the outline parsers and
consumed by the path-stack tracker: the per-line node, its derived kind,
and the parse result of a complete outline document.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

# -----------------------------------------------------------------------------
# ENUMERATIONS
# -----------------------------------------------------------------------------

class NodeKind(str, Enum):
    """Filesystem entry type derived from an outline name."""
    FILE = "file"
    DIRECTORY = "directory"


class OutlineFormat(str, Enum):
    """Supported textual conventions for outline documents."""
    LAYERED = "layered"
    TREE = "tree"


def classify_name(name: str) -> NodeKind:
    """
    Derive the entry kind from its name.

    Any name containing a dot is treated as a file (README.md, .env.example),
    everything else as a directory.
    """
    return NodeKind.FILE if "." in name else NodeKind.DIRECTORY


def relative_name(name: str) -> str:
    """
    Make an outline name safe to join under its parent.

    Leading '/' and '\\' are dropped so the name can never replace the
    root or output base, and one trailing '/' (a directory hint) is removed.
    """
    name = name.strip().lstrip("/\\")
    if name.endswith("/"):
        name = name[:-1]
    return name.strip()

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class OutlineNode:
    """
    A single recognized outline line.

    Attributes:
        depth: Nesting indicator. Layered outlines use levels (0, 1, 2...),
               tree outlines use the raw column of the first name character.
        name: Entry name with all decoration removed.
    """
    depth: int
    name: str

    def __post_init__(self) -> None:
        if self.depth < 0:
            raise ValueError(f"Outline depth must be >= 0, got {self.depth}.")
        if not self.name:
            raise ValueError("Outline node name must be non-empty.")

    @property
    def kind(self) -> NodeKind:
        return classify_name(self.name)


@dataclass
class Outline:
    """
    Result of parsing one outline document.

    Attributes:
        root: Root directory name (empty when no root line was found).
        nodes: Recognized entries below the root, in input order.
        skipped_lines: Count of non-empty lines ignored as anomalies.
    """
    root: str = ""
    nodes: List[OutlineNode] = field(default_factory=list)
    skipped_lines: int = 0
