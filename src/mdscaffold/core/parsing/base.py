from __future__ import annotations

"""
Base Definitions for Outline Parsing Strategies.

Provides the abstract interface shared by the layered and tree-drawing
parsers. Both strategies turn raw text lines into the same Outline model
so that the path-stack tracker never needs to know which notation was used.
"""

from abc import ABC, abstractmethod
from typing import Iterable

from mdscaffold.domain.outline_models import Outline

MARKDOWN_FENCES = ("```", "~~~")


def is_code_fence(line: str) -> bool:
    """True for markdown fence lines wrapping an outline (```text, ~~~)."""
    return line.strip().startswith(MARKDOWN_FENCES)


class OutlineParser(ABC):
    """
    Abstract base class for outline notations.
    """

    #: Configuration identifier of the notation (matches OutlineFormat values).
    format_name: str = ""

    @abstractmethod
    def parse(self, lines: Iterable[str]) -> Outline:
        """
        Convert raw outline lines into a root name and an ordered node list.

        Args:
            lines: Raw lines, with or without trailing newlines.

        Returns:
            Outline: Root directory, recognized nodes and skip statistics.
        """
        pass
