"""Очистка системы движка (system prune)."""

from __future__ import annotations

import logging
from typing import Final, Optional

from boxi.engine.client import EngineClient
from boxi.exceptions import PruneError
from boxi.utils.formatting import Reporter

LOGGER = logging.getLogger(__name__)

RECLAIMED_MARKER: Final[str] = "Total reclaimed space"
NOTHING_RECLAIMED: Final[str] = "Total reclaimed space: 0B"


def find_reclaimed_line(output: str) -> Optional[str]:
    """Ищет первую строку вывода prune с объёмом освобождённого места."""

    for line in output.splitlines():
        if RECLAIMED_MARKER in line:
            return line.strip()
    return None


def prune_system(engine: EngineClient, reporter: Reporter) -> bool:
    """Запускает `system prune -f`; возвращает True, если место освобождено."""

    result = engine.run("system", "prune", "-f")
    if not result.ok:
        raise PruneError(result.output)

    reclaimed = find_reclaimed_line(result.output)
    if reclaimed is None or reclaimed == NOTHING_RECLAIMED:
        LOGGER.info("System prune reclaimed nothing")
        reporter.warning("Nothing to prune")
        return False

    LOGGER.info("System prune: %s", reclaimed)
    reporter.headline("PRUNING SYSTEM", reclaimed)
    return True
