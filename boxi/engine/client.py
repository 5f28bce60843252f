"""Обёртка над CLI контейнерного движка."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from boxi.engine.models import CommandResult
from boxi.engine.runner import run_command

LOGGER = logging.getLogger(__name__)

Runner = Callable[[str, Sequence[str]], CommandResult]


class EngineClient:
    """Выполняет подкоманды движка (docker, podman) через внешний процесс."""

    def __init__(self, executable: str = "docker", runner: Optional[Runner] = None) -> None:
        self.executable = executable
        self._runner = runner or run_command  # подменяется в тестах

    def run(self, *args: str) -> CommandResult:
        """Запускает `<executable> <args...>` и возвращает результат."""

        LOGGER.debug("Running %s %s", self.executable, " ".join(args))
        result = self._runner(self.executable, args)
        if not result.ok:
            LOGGER.warning(
                "Command failed (%s): %s %s: %s",
                result.returncode,
                self.executable,
                " ".join(args),
                result.output.strip(),
            )
        return result
