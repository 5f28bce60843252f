"""Пакетные операции над образами."""

from __future__ import annotations

from dataclasses import replace

from boxi.engine.batch import BatchJob, run_batch
from boxi.engine.client import EngineClient
from boxi.engine.models import BatchOutcome
from boxi.utils.formatting import Reporter

REMOVE_IMAGES = BatchJob(
    noun="image",
    verb="remove",
    past="removed",
    header="REMOVING IMAGES",
    list_args=("images", "-q"),
    item_args=("rmi",),
)

FORCE_REMOVE_IMAGES = replace(REMOVE_IMAGES, item_args=("rmi", "-f"))


def remove_images(engine: EngineClient, reporter: Reporter, force: bool = False) -> BatchOutcome:
    """Удаляет образы, при force=True принудительно (rmi -f)."""

    return run_batch(engine, reporter, FORCE_REMOVE_IMAGES if force else REMOVE_IMAGES)
