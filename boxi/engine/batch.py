"""Общий алгоритм пакетной операции: список, обход, подсчёт."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Tuple

from boxi.engine.client import EngineClient
from boxi.engine.models import BatchOutcome
from boxi.exceptions import ListingError
from boxi.utils.formatting import Reporter, tally

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BatchJob:
    """Описание операции над одним классом ресурсов."""

    noun: str  # "container"
    verb: str  # "stop"
    past: str  # "stopped"
    header: str  # "STOPPING CONTAINERS"
    list_args: Tuple[str, ...]
    item_args: Tuple[str, ...]  # идентификатор добавляется в конец

    @property
    def plural(self) -> str:
        return f"{self.noun}s"


def parse_identifiers(output: str) -> List[str]:
    """Разбивает вывод листинга на идентификаторы по любым пробельным символам."""

    return output.split()


def run_batch(engine: EngineClient, reporter: Reporter, job: BatchJob) -> BatchOutcome:
    """Получает список ресурсов и применяет команду к каждому по очереди.

    Ошибка листинга фатальна и поднимает ListingError. Ошибка по отдельному
    элементу печатается сразу и не прерывает цикл.
    """

    listing = engine.run(*job.list_args)
    if not listing.ok:
        raise ListingError(job.plural, listing.output)

    identifiers = parse_identifiers(listing.output)
    outcome = BatchOutcome(resource=job.plural)
    if not identifiers:
        LOGGER.info("No %s to %s", job.plural, job.verb)
        reporter.warning(f"No {job.plural} to {job.verb}")
        return outcome

    for identifier in identifiers:
        outcome.attempted += 1
        result = engine.run(*job.item_args, identifier)
        if result.ok:
            outcome.succeeded += 1
            continue
        outcome.failed_items.append(identifier)
        reporter.danger(f"Failed to {job.verb} {job.noun} {identifier}: {result.output.strip()}")

    LOGGER.info(
        "%s: %d of %d %s %s",
        job.header,
        outcome.succeeded,
        outcome.attempted,
        job.plural,
        job.past,
    )
    if outcome.succeeded == 0:
        reporter.danger(f"No {job.plural} were {job.past}")
        return outcome

    reporter.headline(job.header, f"{tally(outcome.succeeded, job.noun)} {job.past}")
    return outcome
