"""Тесты запуска внешних команд."""

from __future__ import annotations

import sys

import pytest

from boxi.engine.client import EngineClient
from boxi.engine.models import CommandResult
from boxi.engine.runner import run_command


def test_run_command_captures_stdout_and_stderr() -> None:
    script = "import sys; print('out'); print('err', file=sys.stderr)"
    result = run_command(sys.executable, ["-c", script])
    assert result.ok
    assert result.returncode == 0
    assert "out" in result.output
    assert "err" in result.output


def test_run_command_reports_non_zero_exit() -> None:
    result = run_command(sys.executable, ["-c", "import sys; print('boom'); sys.exit(3)"])
    assert not result.ok
    assert result.returncode == 3
    assert "boom" in result.output


def test_run_command_missing_executable() -> None:
    result = run_command("boxi-no-such-engine", ["ps"])
    assert not result.ok
    assert result.returncode is None
    assert result.output


def test_engine_client_passes_arguments() -> None:
    seen = []

    def fake_runner(executable: str, args) -> CommandResult:
        seen.append((executable, tuple(args)))
        return CommandResult(args=(executable, *args), output="", returncode=0)

    client = EngineClient("podman", runner=fake_runner)
    assert client.run("volume", "ls", "-q").ok
    assert seen == [("podman", ("volume", "ls", "-q"))]


def test_engine_client_logs_failures(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level("WARNING")

    def failing_runner(executable: str, args) -> CommandResult:
        return CommandResult(args=(executable, *args), output="no such container\n", returncode=1)

    client = EngineClient(runner=failing_runner)
    assert not client.run("stop", "web").ok
    assert "no such container" in caplog.text
