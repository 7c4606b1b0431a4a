from __future__ import annotations

"""
Unit tests for the Outline Document Reader.

Verifies:
1. Line reading with terminators preserved.
2. Resilience against invalid byte sequences.
3. Conversion of open failures into InputFileError.
"""

import pytest

from mdscaffold.core.pipeline.reader import InputFileError, read_outline_lines


def test_read_outline_lines(tmp_path):
    f = tmp_path / "structure.md"
    f.write_text("root/\n├── src/\n", encoding="utf-8")

    assert read_outline_lines(str(f)) == ["root/\n", "├── src/\n"]


def test_invalid_bytes_are_replaced(tmp_path):
    f = tmp_path / "broken.md"
    f.write_bytes(b"root\n- \xff\xfe\n- docs\n")

    lines = read_outline_lines(str(f))

    assert len(lines) == 3
    assert "�" in lines[1]


def test_missing_file_raises_input_file_error(tmp_path):
    with pytest.raises(InputFileError, match="Error opening file"):
        read_outline_lines(str(tmp_path / "missing.md"))


def test_directory_path_raises_input_file_error(tmp_path):
    with pytest.raises(InputFileError):
        read_outline_lines(str(tmp_path))


def test_unknown_encoding_raises_input_file_error(tmp_path):
    f = tmp_path / "structure.md"
    f.write_text("root\n", encoding="utf-8")

    with pytest.raises(InputFileError):
        read_outline_lines(str(f), encoding="no-such-codec")
