from __future__ import annotations

"""
Configuration Domain Management.

Provides the default runtime configuration of a scaffold run. The
configuration is a plain dictionary assembled from these defaults and
command-line overrides; nothing is persisted between runs.
"""

from typing import Any, Dict, List

from mdscaffold.domain.outline_models import OutlineFormat

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEFAULT_INPUT_PATH = "structure.md"
DEFAULT_INPUT_FORMAT = OutlineFormat.TREE.value
DEFAULT_ENCODING = "utf-8"

SUPPORTED_FORMATS: List[str] = [f.value for f in OutlineFormat]


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO
        "input_path": DEFAULT_INPUT_PATH,
        "input_format": DEFAULT_INPUT_FORMAT,
        # Empty means the current working directory; paths stay relative
        "output_base_dir": "",
        "encoding": DEFAULT_ENCODING,

        # Execution
        "dry_run": False,
    }
