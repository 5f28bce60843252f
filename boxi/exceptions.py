"""Исключения boxi с поддержкой контекста."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

LOGGER = logging.getLogger(__name__)


class BoxiError(Exception):
    """Базовое исключение для фатальных ошибок с сохранением контекста."""

    def __init__(self, message: str, *, context: Optional[Dict[str, Any]] = None) -> None:
        """Сохраняет сообщение и контекст, логируя ошибку."""

        self.message = message
        self.context = context or {}
        super().__init__(message)
        LOGGER.error("%s | context=%s", message, self.context)


class ListingError(BoxiError):
    """Не удалось получить список ресурсов: дальнейшая работа невозможна."""

    def __init__(self, resource: str, output: str) -> None:
        self.resource = resource
        self.output = output
        super().__init__(
            f"Failed to list {resource}: {output.strip()}",
            context={"resource": resource, "output": output},
        )


class PruneError(BoxiError):
    """Команда system prune завершилась ошибкой."""

    def __init__(self, output: str) -> None:
        self.output = output
        super().__init__(
            f"Failed to prune system: {output.strip()}",
            context={"output": output},
        )


class SettingsValidationError(BoxiError):
    """Некорректное значение переменной окружения."""

    def __init__(self, key: str, value: Any, reason: str) -> None:
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(
            f"Validation error for '{key}': {reason} (value={value!r})",
            context={"key": key, "value": value, "reason": reason},
        )
