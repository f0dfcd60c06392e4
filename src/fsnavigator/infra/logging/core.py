from __future__ import annotations

"""
Session Logging Lifecycle.

Installs a single QueueHandler on the root logger for the duration of a
navigator session. A QueueListener thread fans records out to the console
and, when requested, to a log file, so commands never wait on file I/O.
"""

import atexit
import logging
import os
import queue
from dataclasses import dataclass
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from fsnavigator.infra.fs import get_user_data_dir
from fsnavigator.infra.logging.config import LoggingConfig
from fsnavigator.infra.logging.handlers import build_console_handler, build_file_handler

logger = logging.getLogger(__name__)


@dataclass
class _ActiveLogging:
    queue_handler: QueueHandler
    listener: QueueListener
    previous_level: int


_active: Optional[_ActiveLogging] = None


# ==============================================================================
# PUBLIC API
# ==============================================================================

def get_default_log_path(file_name: str = "fsnavigator.log") -> str:
    """Log file location used by `--log-file` when no path is given."""
    return os.path.join(get_user_data_dir(), "logs", file_name)


def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Start session logging on the root logger.

    Calling it again is a no-op unless `force` is set, in which case the
    previous session logging is shut down first. A log file that cannot be
    opened is reported as a warning and the session continues with the
    console only.

    Args:
        cfg: Session logging settings.
        force: Replace an already active configuration.

    Returns:
        logging.Logger: The root logger.
    """
    global _active

    root = logging.getLogger()
    if _active is not None:
        if not force:
            return root
        shutdown_logging()

    sinks: List[logging.Handler] = [build_console_handler(cfg)]
    file_error: Optional[OSError] = None
    if cfg.log_file:
        try:
            sinks.append(build_file_handler(cfg))
        except OSError as e:
            file_error = e

    previous_level = root.level
    # The root must let through everything any sink wants to see
    root.setLevel(min(sink.level for sink in sinks))

    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)
    queue_handler = QueueHandler(log_queue)
    listener = QueueListener(log_queue, *sinks, respect_handler_level=True)
    listener.start()
    root.addHandler(queue_handler)
    _active = _ActiveLogging(queue_handler, listener, previous_level)

    if file_error is not None:
        logger.warning(f"Log file disabled, cannot open '{cfg.log_file}': {file_error}")
    elif cfg.log_file:
        logger.debug(f"Session log file: {cfg.log_file}")

    return root


def shutdown_logging() -> None:
    """
    Flush pending records and detach session logging from the root logger.

    Safe to call when logging was never configured or already shut down.
    """
    global _active

    if _active is None:
        return

    active, _active = _active, None
    root = logging.getLogger()
    root.removeHandler(active.queue_handler)
    root.setLevel(active.previous_level)
    active.listener.stop()
    for sink in active.listener.handlers:
        sink.close()


def is_logging_active() -> bool:
    return _active is not None


atexit.register(shutdown_logging)
