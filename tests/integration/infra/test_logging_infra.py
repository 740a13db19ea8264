from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the QueueListener architecture, idempotency of configuration,
log file rotation and that foreign handlers survive reconfiguration.
"""

import logging
import time
from pathlib import Path

import pytest

from xtree.infra.logging import (
    LoggingConfig,
    _HANDLER_TAG_ATTR,
    _QUEUE_LISTENER_ATTR,
    configure_logging,
    get_logger,
)


@pytest.fixture(autouse=True)
def _clean_logging(reset_logging) -> None:
    """Run every test in this module against a pristine root logger."""


def _ours(root: logging.Logger):
    return [h for h in root.handlers if getattr(h, _HANDLER_TAG_ATTR, False)]


def test_logging_idempotency() -> None:
    """TC-01: Verify that multiple config calls do not duplicate handlers."""
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    root = logging.getLogger()
    initial = len(_ours(root))

    configure_logging(cfg)
    assert len(_ours(root)) == initial == 1


def test_force_reconfigure_changes_level() -> None:
    """TC-02: force=True replaces handlers and applies the new level."""
    configure_logging(LoggingConfig(level="WARNING"))
    configure_logging(LoggingConfig(level="DEBUG"), force=True)

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(_ours(root)) == 1


def test_unknown_level_defaults_to_warning() -> None:
    configure_logging(LoggingConfig(level="chatty"))
    assert logging.getLogger().level == logging.WARNING


def test_config_from_settings_defaults() -> None:
    """TC-03: Stock settings log warnings to stderr only."""
    cfg = LoggingConfig.from_settings({"log_level": "WARNING", "log_file": ""})

    assert cfg == LoggingConfig()
    assert cfg.console is True
    assert cfg.log_file is None


def test_config_from_settings_debug_and_file(tmp_path: Path) -> None:
    """TC-04: --debug overrides the stored level; log_file enables the file handler."""
    log_path = str(tmp_path / "xtree.log")
    cfg = LoggingConfig.from_settings({"log_level": "ERROR", "log_file": log_path}, debug=True)

    assert cfg.level == "DEBUG"
    assert cfg.log_file == log_path

    configure_logging(cfg)
    assert logging.getLogger().level == logging.DEBUG


def test_log_rotation(tmp_path: Path) -> None:
    """TC-05: Verify file rotation when size limit is exceeded."""
    log_file = tmp_path / "logs" / "xtree.log"
    cfg = LoggingConfig(
        level="DEBUG",
        console=False,
        log_file=str(log_file),
        max_bytes=100,
        backup_count=1,
    )

    configure_logging(cfg)
    logger = get_logger("test_rotate")

    for _ in range(10):
        logger.debug("This is a long log message to trigger rotation." * 5)

    # Give time for the QueueListener to process
    time.sleep(0.5)

    assert log_file.exists()
    assert (tmp_path / "logs" / "xtree.log.1").exists(), "Rotation backup file was not created."


def test_queue_listener_architecture() -> None:
    """TC-06: Verify that the root logger uses a QueueHandler-based architecture."""
    configure_logging(LoggingConfig(level="INFO", console=True))

    root = logging.getLogger()
    assert len(_ours(root)) > 0
    assert getattr(root, _QUEUE_LISTENER_ATTR) is not None


def test_foreign_handlers_preserved() -> None:
    """TC-07: Handlers not installed by xtree survive reconfiguration."""
    root = logging.getLogger()
    foreign = logging.NullHandler()
    root.addHandler(foreign)
    try:
        configure_logging(LoggingConfig(level="INFO"))
        configure_logging(LoggingConfig(level="INFO"), force=True)
        assert foreign in root.handlers
    finally:
        root.removeHandler(foreign)
