"""Синхронный запуск внешних команд."""

from __future__ import annotations

import logging
import subprocess
from typing import Sequence

from boxi.engine.models import CommandResult

LOGGER = logging.getLogger(__name__)


def run_command(executable: str, args: Sequence[str]) -> CommandResult:
    """Выполняет команду синхронно и возвращает объединённый вывод и код возврата.

    Таймаута нет: зависший дочерний процесс блокирует вызывающего. Если
    процесс не удалось запустить, в выводе будет текст ошибки ОС, а код
    возврата будет None.
    """

    argv = (executable, *args)
    try:
        completed = subprocess.run(
            argv,
            check=False,
            text=True,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
        )
    except OSError as exc:
        LOGGER.debug("Cannot start %s: %s", executable, exc)
        return CommandResult(args=argv, output=str(exc), returncode=None)
    return CommandResult(args=argv, output=completed.stdout or "", returncode=completed.returncode)
