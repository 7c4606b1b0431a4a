from __future__ import annotations

"""
Outline Document Reader.

Loads the outline file in one pass. Undecodable byte sequences are replaced
rather than rejected, so a stray binary character never prevents the rest
of the outline from being parsed.
"""

from typing import List


class InputFileError(Exception):
    """The outline document could not be opened or read."""


def read_outline_lines(file_path: str, encoding: str = "utf-8") -> List[str]:
    """
    Read every line of an outline document.

    Args:
        file_path: Path to the outline file.
        encoding: Text encoding of the file.

    Returns:
        List[str]: Raw lines including their line terminators.

    Raises:
        InputFileError: If the file cannot be opened or the encoding is unknown.
    """
    try:
        with open(file_path, "r", encoding=encoding, errors="replace") as f:
            return f.readlines()
    except (OSError, LookupError) as e:
        raise InputFileError(f"Error opening file '{file_path}': {e}") from e
