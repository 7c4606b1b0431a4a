from __future__ import annotations

"""
Core orchestration pipeline.

This module coordinates a complete scaffold run:
1. Validates configuration.
2. Reads the outline document.
3. Parses it with the configured notation strategy.
4. Materializes the resolved entries through the filesystem sink.
5. Aggregates per-entry outcomes into a ScaffoldResult.
"""

import logging
from typing import Any, Dict, Optional

from mdscaffold.core.parsing import get_parser
from mdscaffold.core.pipeline.reader import InputFileError, read_outline_lines
from mdscaffold.core.pipeline.validator import validate_config
from mdscaffold.core.scaffold.builder import EntryCallback, build_scaffold
from mdscaffold.domain.scaffold_models import (
    ScaffoldResult,
    create_error_result,
    create_success_result,
)
from mdscaffold.infra.fs import DryRunSink, FilesystemSink, expand_path

logger = logging.getLogger(__name__)


def run_scaffold(
        config: Optional[Dict[str, Any]],
        *,
        on_entry: Optional[EntryCallback] = None,
) -> ScaffoldResult:
    """
    Execute the full outline-to-filesystem pipeline.

    Args:
        config: The configuration dictionary (raw or partial).
        on_entry: Optional progress callback invoked after each filesystem
                  operation.

    Returns:
        ScaffoldResult: Object containing status, entries, and summary.
    """
    logger.info("Scaffold run started.")

    # -------------------------------------------------------------------------
    # 1) Config Normalization
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config if config is not None else {}, strict=False)

    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    # -------------------------------------------------------------------------
    # 2) Input Reading
    # -------------------------------------------------------------------------
    input_path = expand_path(cfg["input_path"])
    try:
        lines = read_outline_lines(input_path, cfg["encoding"])
    except InputFileError as e:
        logger.error(str(e))
        return create_error_result(str(e), cfg)

    # -------------------------------------------------------------------------
    # 3) Parsing
    # -------------------------------------------------------------------------
    parser = get_parser(cfg["input_format"])
    outline = parser.parse(lines)
    logger.info(
        f"Parsed {len(outline.nodes)} entries under root '{outline.root}' "
        f"({cfg['input_format']} format, {outline.skipped_lines} lines skipped)."
    )

    # -------------------------------------------------------------------------
    # 4) Materialization
    # -------------------------------------------------------------------------
    sink = DryRunSink() if cfg["dry_run"] else FilesystemSink()
    base_dir = expand_path(cfg["output_base_dir"])
    root_path, entries = build_scaffold(outline, sink, base_dir, on_entry)

    result = create_success_result(cfg, root_path, entries, outline.skipped_lines)
    logger.info(f"Scaffold run finished: {result.summary}")
    return result
