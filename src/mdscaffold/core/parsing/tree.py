from __future__ import annotations

"""
Tree-Drawing Outline Parser.

Reads diagrams in the style produced by `tree` and most documentation tools:

    root/
    ├── src/
    │   └── main.go
    └── docs/

Depth is the raw column of the first name character. Columns are never
divided into fixed-width levels, so diagrams drawn with two, three or four
character steps all nest correctly as long as a child sits to the right of
its parent.
"""

import logging
import re
from typing import Iterable, Optional

from mdscaffold.core.parsing.base import OutlineParser, is_code_fence
from mdscaffold.domain.outline_models import (
    Outline,
    OutlineFormat,
    OutlineNode,
    relative_name,
)

logger = logging.getLogger(__name__)

# Leading tree glyphs, ASCII fallbacks and whitespace
TREE_PREFIX_RE = re.compile(r"^[\s│├└─\-+|]+")

# Accepted entry names: _file.py, text.py, README.md, my-dir
NAME_RE = re.compile(r"^[_A-Za-z0-9][A-Za-z0-9._-]*$")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

class TreeOutlineParser(OutlineParser):
    """
    Strategy for box-drawing tree diagrams.
    """

    format_name = OutlineFormat.TREE.value

    def parse(self, lines: Iterable[str]) -> Outline:
        outline = Outline()
        root_found = False

        for line_no, raw in enumerate(lines, start=1):
            line = raw.rstrip("\r\n")
            if not line.strip():
                continue

            if is_code_fence(line):
                outline.skipped_lines += 1
                continue

            if not root_found:
                outline.root = _normalize_root(line)
                root_found = True
                continue

            column = _name_column(line)
            if column < 0:
                logger.debug(f"Line {line_no}: decoration only, skipped.")
                outline.skipped_lines += 1
                continue

            name = _extract_name(line)
            if name is None:
                logger.debug(f"Line {line_no}: invalid entry name, skipped.")
                outline.skipped_lines += 1
                continue

            outline.nodes.append(OutlineNode(depth=column, name=name))

        return outline


def parse_tree(lines: Iterable[str]) -> Outline:
    """Parse a tree-drawing outline with the default strategy instance."""
    return TreeOutlineParser().parse(lines)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _normalize_root(line: str) -> str:
    """Strip './', leading separators and the trailing slash from the root line."""
    root = line.strip()
    if root.startswith("./"):
        root = root[2:]
    return relative_name(root) or "."


def _name_column(line: str) -> int:
    """Index of the first alphanumeric, '_' or '.' character, or -1."""
    for i, ch in enumerate(line):
        if ch.isalnum() or ch in "_.":
            return i
    return -1


def _extract_name(line: str) -> Optional[str]:
    """Remove tree decoration and validate the remaining name."""
    name = relative_name(TREE_PREFIX_RE.sub("", line))
    if not NAME_RE.fullmatch(name):
        return None
    return name
