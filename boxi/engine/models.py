"""Структуры данных для результатов команд и пакетных операций."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass(slots=True)
class CommandResult:
    """Результат одного вызова внешней команды."""

    args: Tuple[str, ...]
    output: str  # stdout и stderr вместе
    returncode: Optional[int]  # None, если процесс не удалось запустить

    @property
    def ok(self) -> bool:
        return self.returncode == 0


@dataclass(slots=True)
class BatchOutcome:
    """Итог пакетной операции над одним классом ресурсов."""

    resource: str
    attempted: int = 0
    succeeded: int = 0
    failed_items: List[str] = field(default_factory=list)

    @property
    def status(self) -> str:
        if self.attempted == 0:
            return "nothing-to-do"
        if self.succeeded == 0:
            return "failed"
        return "completed"
