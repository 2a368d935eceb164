from __future__ import annotations

from .config import LoggingConfig
from .core import configure_logging, get_logger, shutdown_logging
from .handlers import HANDLER_TAG_ATTR, QUEUE_LISTENER_ATTR, CONFIGURED_FLAG_ATTR

__all__ = [
    "LoggingConfig",
    "configure_logging",
    "get_logger",
    "shutdown_logging",
    "HANDLER_TAG_ATTR",
    "QUEUE_LISTENER_ATTR",
    "CONFIGURED_FLAG_ATTR",
]
