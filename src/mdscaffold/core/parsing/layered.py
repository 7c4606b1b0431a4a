from __future__ import annotations

"""
Layered Outline Parser.

Reads markdown-style bullet lists indented by two spaces per level:

    root
      - src
        - main.go
      - docs

The first unindented line names the root directory. Every other entry must
carry a "- " or "* " bullet; indented lines without one are treated as
commentary and skipped, as are horizontal rules and other lines without a
single alphanumeric character.
"""

import logging
from typing import Iterable, Optional

from mdscaffold.core.parsing.base import OutlineParser, is_code_fence
from mdscaffold.domain.outline_models import (
    Outline,
    OutlineFormat,
    OutlineNode,
    relative_name,
)

logger = logging.getLogger(__name__)

BULLET_MARKERS = ("- ", "* ")
SPACES_PER_LEVEL = 2

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

class LayeredOutlineParser(OutlineParser):
    """
    Strategy for two-space indented bullet outlines.
    """

    format_name = OutlineFormat.LAYERED.value

    def parse(self, lines: Iterable[str]) -> Outline:
        outline = Outline()
        root_found = False
        # Level of the first child line. Children written one step in from
        # the root line start at level 1; flush-left bullets start at 0.
        baseline: Optional[int] = None

        for line_no, raw in enumerate(lines, start=1):
            raw = raw.rstrip("\r\n")
            stripped = raw.strip()
            if not stripped:
                continue

            if is_code_fence(stripped):
                outline.skipped_lines += 1
                continue

            indent = _count_indent(raw)
            name = _extract_name(stripped, indent)
            if not name:
                logger.debug(f"Line {line_no}: not an outline entry, skipped.")
                outline.skipped_lines += 1
                continue

            if not root_found:
                if indent == 0:
                    outline.root = name
                    root_found = True
                    continue
                logger.debug(f"Line {line_no}: entry before root line, skipped.")
                outline.skipped_lines += 1
                continue

            level = indent // SPACES_PER_LEVEL
            if baseline is None:
                baseline = 1 if level > 0 else 0

            outline.nodes.append(OutlineNode(depth=max(level - baseline, 0), name=name))

        return outline


def parse_layered(lines: Iterable[str]) -> Outline:
    """Parse a layered outline with the default strategy instance."""
    return LayeredOutlineParser().parse(lines)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _count_indent(raw: str) -> int:
    """Count leading space characters (tabs are not indentation)."""
    return len(raw) - len(raw.lstrip(" "))


def _extract_name(stripped: str, indent: int) -> Optional[str]:
    """Return the entry name, or None when the line is not an outline entry."""
    if stripped.startswith(BULLET_MARKERS):
        name = relative_name(stripped[2:])
    elif indent == 0:
        name = relative_name(stripped)
    else:
        return None

    # Rules such as '---' or '***' carry no name
    if not any(ch.isalnum() or ch == "_" for ch in name):
        return None
    return name
