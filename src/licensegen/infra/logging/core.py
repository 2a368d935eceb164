from __future__ import annotations

"""
Logging Bootstrap.

Configures the root logger once per process. All records go through a
single QueueHandler; a QueueListener fans them out to the real sinks, so
writing to a log file never happens inline with the tree walk.
"""

import atexit
import logging
import queue
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from licensegen.infra.logging.config import LoggingConfig
from licensegen.infra.logging.handlers import (
    CONFIGURED_FLAG_ATTR,
    QUEUE_LISTENER_ATTR,
    create_console_handler,
    create_rotating_file_handler,
    is_own_handler,
    tag_handler,
)


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Idempotently attach the package's handlers to the root logger.

    Args:
        cfg: Logging settings.
        force: Re-create handlers even if logging is already configured.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()
    if getattr(root, CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    shutdown_logging()

    level = cfg.level_int()
    root.setLevel(level)

    sinks: List[logging.Handler] = []
    if cfg.console:
        sinks.append(create_console_handler(level, cfg.console_fmt))
    if cfg.log_file:
        fh = create_rotating_file_handler(
            cfg.log_file,
            level,
            cfg.file_fmt,
            cfg.datefmt,
            cfg.max_bytes,
            cfg.backup_count,
        )
        if fh:
            sinks.append(fh)

    if not sinks:
        return root

    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)
    listener = QueueListener(log_queue, *sinks, respect_handler_level=True)
    listener.start()

    root.addHandler(tag_handler(QueueHandler(log_queue)))
    setattr(root, QUEUE_LISTENER_ATTR, listener)
    setattr(root, CONFIGURED_FLAG_ATTR, True)

    # Flush queued records before interpreter exit
    atexit.register(_stop_listener, listener)
    return root


def shutdown_logging() -> None:
    """Stop the listener and detach every handler created by configure_logging."""
    root = logging.getLogger()

    listener: Optional[QueueListener] = getattr(root, QUEUE_LISTENER_ATTR, None)
    if listener is not None:
        _stop_listener(listener)
        setattr(root, QUEUE_LISTENER_ATTR, None)

    for h in list(root.handlers):
        if is_own_handler(h):
            root.removeHandler(h)
            h.close()

    setattr(root, CONFIGURED_FLAG_ATTR, False)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _stop_listener(listener: QueueListener) -> None:
    # QueueListener.stop() fails on a listener that was already stopped
    if getattr(listener, "_thread", None) is not None:
        listener.stop()
    for h in listener.handlers:
        h.close()
