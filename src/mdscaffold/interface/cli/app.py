from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging initialization, merging of default
configuration with command-line overrides, scaffold execution, and result
rendering.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from mdscaffold.core.pipeline.engine import run_scaffold
from mdscaffold.core.pipeline.validator import validate_config
from mdscaffold.core.scaffold.builder import EntryCallback
from mdscaffold.domain.config import get_default_config
from mdscaffold.domain.scaffold_models import ScaffoldEntry, ScaffoldResult
from mdscaffold.infra.logging import LoggingConfig, configure_logging, get_logger
from mdscaffold.interface.cli import args as cli_args

logger = get_logger(__name__)

SUCCESS_MESSAGE = "Repository structure created successfully!"
DRY_RUN_MESSAGE = "Dry run complete. No changes were written."

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console on stderr, optional file)
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    # 3. Merge overrides over defaults and normalize
    overrides = cli_args.args_to_overrides(args)
    raw_conf = _merge_config(get_default_config(), overrides)
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    # 4. Scaffold execution phase
    on_entry = None if args.json_output else _make_progress_printer(clean_conf["dry_run"])
    try:
        result = run_scaffold(clean_conf, on_entry=on_entry)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return 130

    # 5. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge known, non-None override values into the base configuration.

    Args:
        base: The default configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    keys_to_merge = ["input_path", "input_format", "output_base_dir", "encoding", "dry_run"]
    for k in keys_to_merge:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _make_progress_printer(dry_run: bool) -> EntryCallback:
    """Build the per-entry progress callback for terminal output."""

    def _print_entry(entry: ScaffoldEntry) -> None:
        kind = entry.kind.value
        if not entry.ok:
            print(f"Failed to create {kind}: {entry.path} ({entry.error})")
        elif dry_run:
            print(f"[dry-run] Would create {kind}: {entry.path}")
        else:
            print(f"Created {kind}: {entry.path}")

    return _print_entry


def _print_human_summary(result: ScaffoldResult) -> None:
    """
    Print the final report of a scaffold run.

    Args:
        result: The scaffold result to render.
    """
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    summary = result.summary
    print()
    print(DRY_RUN_MESSAGE if result.dry_run else SUCCESS_MESSAGE)

    stats_keys = {
        "directories": "Directories",
        "files": "Files",
        "failed": "Failed",
        "skipped_lines": "Skipped lines",
    }
    for key, label in stats_keys.items():
        if key in summary:
            print(f"{label}: {summary[key]}")

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
