from __future__ import annotations

"""
Integration tests for the logging bootstrap.

Verifies idempotent configuration, the QueueHandler/QueueListener layout
and the rotating file sink.
"""

import logging
from logging.handlers import QueueHandler
from pathlib import Path

from licensegen.infra.logging import (
    CONFIGURED_FLAG_ATTR,
    HANDLER_TAG_ATTR,
    QUEUE_LISTENER_ATTR,
    LoggingConfig,
    configure_logging,
    shutdown_logging,
)


def _own_handlers():
    return [h for h in logging.getLogger().handlers if getattr(h, HANDLER_TAG_ATTR, False)]


def test_configuration_is_idempotent() -> None:
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    first = _own_handlers()
    configure_logging(cfg)

    assert _own_handlers() == first
    assert len(first) == 1


def test_queue_listener_is_attached() -> None:
    configure_logging(LoggingConfig(level="DEBUG"))
    root = logging.getLogger()

    assert isinstance(_own_handlers()[0], QueueHandler)
    assert getattr(root, QUEUE_LISTENER_ATTR) is not None
    assert root.level == logging.DEBUG


def test_unknown_level_falls_back_to_info() -> None:
    assert LoggingConfig(level="chatty").level_int() == logging.INFO


def test_file_sink_receives_records(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "licensegen.log"
    configure_logging(LoggingConfig(level="DEBUG", console=False, log_file=str(log_file)))

    logging.getLogger("licensegen.test").debug("walk finished")
    shutdown_logging()

    assert "walk finished" in log_file.read_text(encoding="utf-8")


def test_shutdown_detaches_everything() -> None:
    configure_logging(LoggingConfig())
    shutdown_logging()

    root = logging.getLogger()
    assert _own_handlers() == []
    assert getattr(root, QUEUE_LISTENER_ATTR) is None
    assert getattr(root, CONFIGURED_FLAG_ATTR) is False
