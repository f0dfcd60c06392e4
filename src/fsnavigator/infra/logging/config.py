from __future__ import annotations

"""
Logging Configuration Models.

The navigator shares the terminal with the user, so the console threshold
is kept separate from the optional log file, which records full detail.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

# Level names accepted in configuration files and on the command line
LEVELS: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

DEFAULT_CONSOLE_LEVEL = "WARNING"


def is_known_level(name: str) -> bool:
    """Return True if `name` (any case) is an accepted level name."""
    return str(name).strip().upper() in LEVELS


def parse_level(name: Optional[str], fallback: str = DEFAULT_CONSOLE_LEVEL) -> int:
    """Map a level name to its numeric value, using `fallback` for unknown names."""
    key = str(name or "").strip().upper()
    return LEVELS.get(key, LEVELS[fallback])


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings for one navigator session.

    Attributes:
        console_level: Threshold for stderr output. Kept at WARNING so log
            lines do not interleave with command output.
        log_file: Opt-in file receiving records at `file_level`.
        file_level: Threshold for the log file.
        max_bytes: Size at which the log file rolls over.
        backup_count: Rolled-over files kept next to the active one.
    """
    console_level: str = DEFAULT_CONSOLE_LEVEL
    log_file: Optional[str] = None
    file_level: str = "DEBUG"

    max_bytes: int = 512 * 1024
    backup_count: int = 2

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"
