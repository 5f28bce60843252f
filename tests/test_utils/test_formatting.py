"""Тесты форматирования итогов и стилей."""

from __future__ import annotations

import io

import pytest
from rich.console import Console

from boxi.utils.formatting import MessageStyle, Reporter, colorise, pluralise, tally


@pytest.mark.parametrize("count, suffix", [(0, "s"), (1, ""), (2, "s"), (17, "s")])
def test_pluralise(count: int, suffix: str) -> None:
    assert pluralise(count) == suffix


def test_tally_regular_and_explicit_plural() -> None:
    assert tally(1, "volume") == "1 volume"
    assert tally(0, "volume") == "0 volumes"
    assert tally(3, "container") == "3 containers"
    assert tally(2, "cache", plural="caches") == "2 caches"


def test_colorise_applies_style_lookup() -> None:
    assert str(colorise("x", MessageStyle.DANGER).style) == "bold red"
    assert str(colorise("x", MessageStyle.SUCCESS).style) == "bold green"
    assert str(colorise("x", MessageStyle.WARNING).style) == "bold yellow"
    assert str(colorise("x").style) == ""


def test_reporter_emits_ansi_on_terminal() -> None:
    buffer = io.StringIO()
    reporter = Reporter(Console(file=buffer, force_terminal=True, color_system="standard"))
    reporter.danger("broken")
    value = buffer.getvalue()
    assert "broken" in value
    assert "\x1b[" in value
