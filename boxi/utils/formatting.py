"""Форматирование итогов и цветной вывод в терминал."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Final, Optional

from rich.console import Console
from rich.text import Text


class MessageStyle(Enum):
    """Категория сообщения для терминала."""

    DANGER = "danger"
    SUCCESS = "success"
    WARNING = "warning"


STYLES: Final[Dict[MessageStyle, str]] = {
    MessageStyle.DANGER: "bold red",
    MessageStyle.SUCCESS: "bold green",
    MessageStyle.WARNING: "bold yellow",
}


def pluralise(count: int) -> str:
    """Возвращает суффикс "s" для любого количества, кроме единицы."""

    return "" if count == 1 else "s"


def tally(count: int, noun: str, plural: Optional[str] = None) -> str:
    """Собирает фрагмент вида "3 containers"."""

    if count == 1:
        return f"{count} {noun}"
    return f"{count} {plural or noun + pluralise(count)}"


def colorise(message: str, style: Optional[MessageStyle] = None) -> Text:
    """Оборачивает сообщение в стиль; разметка rich в тексте не разбирается."""

    return Text(message, style=STYLES[style] if style else "")


class Reporter:
    """Печатает отчёт об операциях в stdout."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console(highlight=False)

    def plain(self, message: str) -> None:
        self.console.print(colorise(message), soft_wrap=True)

    def danger(self, message: str) -> None:
        self.console.print(colorise(message, MessageStyle.DANGER), soft_wrap=True)

    def success(self, message: str) -> None:
        self.console.print(colorise(message, MessageStyle.SUCCESS), soft_wrap=True)

    def warning(self, message: str) -> None:
        self.console.print(colorise(message, MessageStyle.WARNING), soft_wrap=True)

    def headline(self, title: str, body: str) -> None:
        """Печатает строку "ЗАГОЛОВОК: текст" с выделенным заголовком."""

        line = Text.assemble(colorise(title, MessageStyle.SUCCESS), ": ", body)
        self.console.print(line, soft_wrap=True)
