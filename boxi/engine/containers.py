"""Пакетные операции над контейнерами."""

from __future__ import annotations

from boxi.engine.batch import BatchJob, run_batch
from boxi.engine.client import EngineClient
from boxi.engine.models import BatchOutcome
from boxi.utils.formatting import Reporter

# только запущенные контейнеры
STOP_CONTAINERS = BatchJob(
    noun="container",
    verb="stop",
    past="stopped",
    header="STOPPING CONTAINERS",
    list_args=("ps", "--format", "{{.Names}}"),
    item_args=("stop",),
)

REMOVE_CONTAINERS = BatchJob(
    noun="container",
    verb="remove",
    past="removed",
    header="REMOVING CONTAINERS",
    list_args=("ps", "-a", "--format", "{{.Names}}"),
    item_args=("rm",),
)


def stop_containers(engine: EngineClient, reporter: Reporter) -> BatchOutcome:
    """Останавливает все запущенные контейнеры."""

    return run_batch(engine, reporter, STOP_CONTAINERS)


def remove_containers(engine: EngineClient, reporter: Reporter) -> BatchOutcome:
    """Удаляет все контейнеры; запущенные движок удалить откажется."""

    return run_batch(engine, reporter, REMOVE_CONTAINERS)
