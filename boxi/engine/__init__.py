"""Вызовы CLI контейнерного движка и пакетные операции над ресурсами."""

from boxi.engine.client import EngineClient
from boxi.engine.containers import remove_containers, stop_containers
from boxi.engine.images import remove_images
from boxi.engine.models import BatchOutcome, CommandResult
from boxi.engine.system import prune_system
from boxi.engine.volumes import remove_volumes

__all__ = [
    "BatchOutcome",
    "CommandResult",
    "EngineClient",
    "prune_system",
    "remove_containers",
    "remove_images",
    "remove_volumes",
    "stop_containers",
]
