from __future__ import annotations

"""
Logging Handler Factories.

Builds the concrete sinks (stderr, rotating file) and tags every handler
created here so that reconfiguration only removes what this package owns.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

HANDLER_TAG_ATTR: str = "_licensegen_handler"
QUEUE_LISTENER_ATTR: str = "_licensegen_queue_listener"
CONFIGURED_FLAG_ATTR: str = "_licensegen_configured"


def tag_handler(handler: logging.Handler) -> logging.Handler:
    setattr(handler, HANDLER_TAG_ATTR, True)
    return handler


def is_own_handler(handler: logging.Handler) -> bool:
    return bool(getattr(handler, HANDLER_TAG_ATTR, False))


def create_console_handler(level: int, fmt: str) -> logging.Handler:
    """Stream handler writing to stderr, leaving stdout for command output."""
    sh = logging.StreamHandler(sys.stderr)
    sh.setLevel(level)
    sh.setFormatter(logging.Formatter(fmt))
    return tag_handler(sh)


def create_rotating_file_handler(
        log_file: str,
        level: int,
        fmt: str,
        datefmt: str,
        max_bytes: int,
        backup_count: int,
) -> Optional[RotatingFileHandler]:
    """
    Open a RotatingFileHandler, creating parent directories as needed.

    Returns:
        Optional[RotatingFileHandler]: The handler, or None if the file
                                       cannot be opened.
    """
    try:
        parent = os.path.dirname(os.path.abspath(log_file))
        os.makedirs(parent, exist_ok=True)
        fh = RotatingFileHandler(
            log_file,
            maxBytes=int(max_bytes),
            backupCount=int(backup_count),
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"licensegen: WARNING | Cannot open log file '{log_file}': {e}\n")
        return None

    fh.setLevel(level)
    fh.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    tag_handler(fh)
    return fh
