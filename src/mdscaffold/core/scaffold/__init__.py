from __future__ import annotations

from .builder import ScaffoldSink, build_scaffold
from .tracker import PathStackTracker

__all__ = [
    "PathStackTracker",
    "ScaffoldSink",
    "build_scaffold",
]
