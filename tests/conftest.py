from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared outline fixtures used across unit, integration and e2e tests.
"""

import os
import sys
from typing import List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def layered_lines() -> List[str]:
    """Layered rendition of root/{src/main.go, docs}."""
    return [
        "root\n",
        "- src\n",
        "  - main.go\n",
        "- docs\n",
    ]


@pytest.fixture
def tree_lines() -> List[str]:
    """Tree-drawing rendition of root/{src/main.go, docs}."""
    return [
        "root/\n",
        "├── src/\n",
        "│   └── main.go\n",
        "└── docs/\n",
    ]


@pytest.fixture
def expected_paths() -> List[str]:
    """Relative paths both renditions must produce, root included."""
    return [
        "root",
        os.path.join("root", "src"),
        os.path.join("root", "src", "main.go"),
        os.path.join("root", "docs"),
    ]
