from __future__ import annotations

from .config import LEVELS, LoggingConfig, is_known_level
from .core import (
    configure_logging,
    get_default_log_path,
    is_logging_active,
    shutdown_logging,
)

__all__ = [
    "LEVELS",
    "LoggingConfig",
    "configure_logging",
    "get_default_log_path",
    "is_known_level",
    "is_logging_active",
    "shutdown_logging",
]
