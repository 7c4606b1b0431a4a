from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema (help messages, choices and
defaults) and translates the parsed namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict

from mdscaffold.domain.config import DEFAULT_INPUT_FORMAT, DEFAULT_INPUT_PATH, SUPPORTED_FORMATS

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the mdscaffold CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="mdscaffold",
        description="Create directories and empty files from a markdown outline.",
    )

    # --- Input ---
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help=f"Path to the outline file (default: {DEFAULT_INPUT_PATH}).",
    )
    p.add_argument(
        "-f", "--format",
        dest="input_format",
        choices=SUPPORTED_FORMATS,
        default=None,
        help=f"Outline notation (default: {DEFAULT_INPUT_FORMAT}).",
    )
    p.add_argument(
        "--encoding",
        default=None,
        help="Text encoding of the outline file (default: utf-8).",
    )

    # --- Output ---
    p.add_argument(
        "-o", "--output-base",
        dest="output_base_dir",
        default=None,
        help="Directory in which the root directory is created (default: current directory).",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Report what would be created without writing anything.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the run result as JSON instead of progress lines.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the resolved configuration as JSON and exit.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostic logs to this file.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["input_path"] = args.input_path
    overrides["input_format"] = args.input_format
    overrides["output_base_dir"] = args.output_base_dir
    overrides["encoding"] = args.encoding

    if args.dry_run:
        overrides["dry_run"] = True

    return overrides
