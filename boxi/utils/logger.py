"""Вспомогательные функции для настройки логирования."""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, List, cast

LOG_FORMAT: Final[str] = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def resolve_log_level(level_name: str) -> int:
    """Преобразует строковый уровень логирования в числовой."""

    level = getattr(logging, level_name.upper(), None)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {level_name}")
    return cast(int, level)


def configure_logging(
    log_dir: Path,
    *,
    log_file_name: str = "boxi.log",
    level_name: str = "INFO",
    max_bytes: int = 1024 * 1024,
    backup_count: int = 3,
    verbose: bool = False,
) -> bool:
    """Настраивает файл с ротацией и, в подробном режиме, вывод в stderr.

    stdout занят отчётом для пользователя, поэтому записи журнала туда не
    попадают. Возвращает False, если файловый журнал создать не удалось:
    в этом случае остаётся только stderr.
    """

    log_level = resolve_log_level(level_name)
    formatter = logging.Formatter(LOG_FORMAT)
    handlers: List[logging.Handler] = []
    file_error: OSError | None = None

    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_dir / log_file_name,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
    except OSError as exc:
        file_error = exc
    else:
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if verbose or file_error is not None:
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(formatter)
        # без подробного режима в stderr идут только предупреждения
        stream_handler.setLevel(log_level if verbose else logging.WARNING)
        handlers.append(stream_handler)

    logging.basicConfig(level=log_level, handlers=handlers, force=True)
    if file_error is not None:
        logging.getLogger(__name__).warning("Log file disabled, cannot open %s: %s", log_dir, file_error)
        return False
    return True

