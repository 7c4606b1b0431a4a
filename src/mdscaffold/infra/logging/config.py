from __future__ import annotations

"""
Logging Settings for Scaffold Runs.

The CLI builds one LoggingConfig from --debug and --log-file; everything
else keeps its default.
"""

import logging
from dataclasses import dataclass
from typing import Optional


def level_from_name(name: Optional[str]) -> int:
    """Numeric level for a name such as 'debug' or 'WARNING'; INFO when unknown."""
    value = logging.getLevelName(str(name or "").strip().upper())
    return value if isinstance(value, int) else logging.INFO


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings consumed by configure_logging.

    Attributes:
        level: Level name applied to the root logger and every handler.
        console: Send diagnostics to stderr (stdout carries progress lines).
        log_file: Optional rotating log file path.
        max_bytes: Size at which the log file rolls over.
        backup_count: Rolled-over files kept next to the active one.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 512 * 1024
    backup_count: int = 1

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
