from __future__ import annotations

"""
Scaffold Domain Data Models.

Defines the data structures and factory functions used to communicate
scaffold results between the engine and the interface layer (CLI).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from mdscaffold.domain.outline_models import NodeKind

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ScaffoldEntry:
    """
    Outcome of a single filesystem operation.

    Attributes:
        path: Full path resolved for the entry.
        kind: Whether a directory or an empty file was requested.
        ok: True when the sink reported success.
        error: Sink error message on failure.
    """
    path: str
    kind: NodeKind
    ok: bool = True
    error: str = ""


@dataclass(frozen=True)
class ScaffoldResult:
    """
    Unified result object of a complete scaffold run.

    Attributes:
        ok: Flag indicating the run completed (per-entry failures allowed).
        error: Descriptive message when the run could not start.
        input_path: Outline document that was read.
        input_format: Parser strategy used (layered/tree).
        output_base_dir: Directory under which the root was materialized.
        root_path: Full path of the root directory.
        dry_run: Whether the run only simulated filesystem writes.
        entries: Every attempted filesystem operation, in order.
        skipped_lines: Outline lines ignored by the parser.
        summary: Execution statistics.
    """
    ok: bool
    error: str

    input_path: str
    input_format: str
    output_base_dir: str

    root_path: str = ""
    dry_run: bool = False
    entries: List[ScaffoldEntry] = field(default_factory=list)
    skipped_lines: int = 0

    summary: Dict[str, Any] = field(default_factory=dict)

    @property
    def failed_entries(self) -> List[ScaffoldEntry]:
        return [e for e in self.entries if not e.ok]

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        cfg: Dict[str, Any],
        summary_extra: Optional[Dict[str, Any]] = None
) -> ScaffoldResult:
    """
    Create a failed scaffold result instance.

    Args:
        error: Detailed error description.
        cfg: The configuration used during the failed run.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        ScaffoldResult: An immutable error result object.
    """
    return ScaffoldResult(
        ok=False,
        error=error,
        input_path=cfg.get("input_path", ""),
        input_format=cfg.get("input_format", ""),
        output_base_dir=cfg.get("output_base_dir", ""),
        dry_run=cfg.get("dry_run", False),
        summary=summary_extra or {},
    )


def create_success_result(
        cfg: Dict[str, Any],
        root_path: str,
        entries: List[ScaffoldEntry],
        skipped_lines: int = 0,
) -> ScaffoldResult:
    """
    Create a successful scaffold result instance with computed statistics.

    Args:
        cfg: Final configuration used during execution.
        root_path: Full path of the materialized root directory.
        entries: Filesystem operations performed (root included).
        skipped_lines: Outline lines ignored by the parser.

    Returns:
        ScaffoldResult: An immutable success result object.
    """
    summary = {
        "directories": sum(1 for e in entries if e.ok and e.kind == NodeKind.DIRECTORY),
        "files": sum(1 for e in entries if e.ok and e.kind == NodeKind.FILE),
        "failed": sum(1 for e in entries if not e.ok),
        "skipped_lines": skipped_lines,
        "dry_run": cfg.get("dry_run", False),
    }
    return ScaffoldResult(
        ok=True,
        error="",
        input_path=cfg.get("input_path", ""),
        input_format=cfg.get("input_format", ""),
        output_base_dir=cfg.get("output_base_dir", ""),
        root_path=root_path,
        dry_run=cfg.get("dry_run", False),
        entries=list(entries),
        skipped_lines=skipped_lines,
        summary=summary,
    )
