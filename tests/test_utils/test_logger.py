"""Проверки настройки логирования."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from boxi.utils.logger import configure_logging, resolve_log_level


def test_configure_logging_creates_file(tmp_path: Path) -> None:
    """После конфигурации должен появиться файл журнала с записью."""

    log_dir = tmp_path / "logs"
    assert configure_logging(log_dir, level_name="INFO", max_bytes=1024, backup_count=1)

    logging.getLogger("boxi.test").info("log entry")
    for handler in logging.getLogger().handlers:
        handler.flush()

    log_file = log_dir / "boxi.log"
    assert log_file.exists()
    assert "log entry" in log_file.read_text(encoding="utf-8")


def test_configure_logging_falls_back_to_stderr(tmp_path: Path) -> None:
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", encoding="utf-8")

    assert configure_logging(blocker / "logs") is False
    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.StreamHandler)


def test_resolve_log_level() -> None:
    assert resolve_log_level("debug") == logging.DEBUG
    with pytest.raises(ValueError):
        resolve_log_level("INVALID")
