"""Общие фикстуры: поддельный движок и отчёт в памяти."""

from __future__ import annotations

import io
from typing import Dict, List, Sequence, Tuple

import pytest
from rich.console import Console

from boxi.engine.client import EngineClient
from boxi.engine.models import CommandResult
from boxi.utils.formatting import Reporter


class FakeRunner:
    """Возвращает заранее заданные результаты и запоминает вызовы."""

    def __init__(self) -> None:
        self.responses: Dict[Tuple[str, ...], Tuple[str, int]] = {}
        self.calls: List[Tuple[str, ...]] = []

    def add(self, *args: str, output: str = "", returncode: int = 0) -> None:
        self.responses[args] = (output, returncode)

    def __call__(self, executable: str, args: Sequence[str]) -> CommandResult:
        key = tuple(args)
        self.calls.append(key)
        output, returncode = self.responses.get(key, ("", 0))
        return CommandResult(args=(executable, *key), output=output, returncode=returncode)


class MemoryReporter(Reporter):
    """Reporter, пишущий в строку без ANSI-кодов."""

    def __init__(self) -> None:
        super().__init__(Console(file=io.StringIO(), width=200, color_system=None, highlight=False))

    @property
    def text(self) -> str:
        return self.console.file.getvalue()  # type: ignore[attr-defined]

    @property
    def lines(self) -> List[str]:
        return [line for line in self.text.splitlines() if line.strip()]


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def engine(runner: FakeRunner) -> EngineClient:
    return EngineClient("docker", runner=runner)


@pytest.fixture
def reporter() -> MemoryReporter:
    return MemoryReporter()
