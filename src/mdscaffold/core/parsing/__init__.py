from __future__ import annotations

from typing import Dict, Type

from .base import OutlineParser
from .layered import LayeredOutlineParser, parse_layered
from .tree import TreeOutlineParser, parse_tree

_PARSERS: Dict[str, Type[OutlineParser]] = {
    LayeredOutlineParser.format_name: LayeredOutlineParser,
    TreeOutlineParser.format_name: TreeOutlineParser,
}


def get_parser(fmt: str) -> OutlineParser:
    """
    Instantiate the parsing strategy registered for an outline format.

    Raises:
        ValueError: If the format is not supported.
    """
    key = str(fmt).strip().lower()
    try:
        return _PARSERS[key]()
    except KeyError:
        raise ValueError(
            f"Unsupported outline format '{fmt}'. Expected one of: {', '.join(sorted(_PARSERS))}."
        ) from None


__all__ = [
    "OutlineParser",
    "LayeredOutlineParser",
    "TreeOutlineParser",
    "get_parser",
    "parse_layered",
    "parse_tree",
]
