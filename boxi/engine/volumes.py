"""Пакетные операции над томами."""

from __future__ import annotations

from boxi.engine.batch import BatchJob, run_batch
from boxi.engine.client import EngineClient
from boxi.engine.models import BatchOutcome
from boxi.utils.formatting import Reporter

REMOVE_VOLUMES = BatchJob(
    noun="volume",
    verb="remove",
    past="removed",
    header="REMOVING VOLUMES",
    list_args=("volume", "ls", "-q"),
    item_args=("volume", "rm"),
)


def remove_volumes(engine: EngineClient, reporter: Reporter) -> BatchOutcome:
    """Удаляет тома; используемые контейнерами движок не удалит."""

    return run_batch(engine, reporter, REMOVE_VOLUMES)
