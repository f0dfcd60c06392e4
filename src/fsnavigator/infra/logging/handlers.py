from __future__ import annotations

"""
Session Log Handlers.

Builds the two sinks a navigator session can write to: the terminal's
stderr stream and an optional rotating log file.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from fsnavigator.infra.logging.config import LoggingConfig, parse_level


def build_console_handler(cfg: LoggingConfig) -> logging.Handler:
    """Stderr handler filtered at the console threshold."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(parse_level(cfg.console_level))
    handler.setFormatter(logging.Formatter(cfg.console_fmt))
    return handler


def build_file_handler(cfg: LoggingConfig) -> RotatingFileHandler:
    """
    Rotating file handler for `cfg.log_file`, creating missing parent folders.

    Raises:
        OSError: If the file cannot be opened for appending.
    """
    path = os.path.abspath(cfg.log_file or "")
    os.makedirs(os.path.dirname(path), exist_ok=True)

    handler = RotatingFileHandler(
        path,
        maxBytes=cfg.max_bytes,
        backupCount=cfg.backup_count,
        encoding="utf-8",
    )
    handler.setLevel(parse_level(cfg.file_level, fallback="DEBUG"))
    handler.setFormatter(logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt))
    return handler
