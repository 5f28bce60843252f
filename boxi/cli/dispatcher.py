"""Разбор позиционных аргументов и запуск пакетных операций."""

from __future__ import annotations

import logging
from functools import partial
from typing import Callable, Dict, Final, FrozenSet, Sequence, Tuple

from boxi.cli.usage import CONTAINER_USAGE, IMAGE_USAGE, MAIN_USAGE, VOLUME_USAGE
from boxi.engine.client import EngineClient
from boxi.engine.containers import remove_containers, stop_containers
from boxi.engine.images import remove_images
from boxi.engine.system import prune_system
from boxi.engine.volumes import remove_volumes
from boxi.utils.formatting import Reporter

LOGGER = logging.getLogger(__name__)

EXIT_OK: Final[int] = 0
EXIT_USAGE: Final[int] = 1

HELP_TOKENS: Final[FrozenSet[str]] = frozenset({"-h", "--help", "help"})

Action = Callable[[EngineClient, Reporter], object]


def clean_containers(engine: EngineClient, reporter: Reporter) -> None:
    """Останавливает, затем удаляет контейнеры."""

    stop_containers(engine, reporter)
    remove_containers(engine, reporter)


def wipe(engine: EngineClient, reporter: Reporter) -> None:
    """Контейнеры останавливаются до удаления, тома удаляются последними."""

    clean_containers(engine, reporter)
    remove_volumes(engine, reporter)


def purge(engine: EngineClient, reporter: Reporter) -> None:
    """wipe, затем принудительное удаление образов и system prune."""

    wipe(engine, reporter)
    remove_images(engine, reporter, force=True)
    prune_system(engine, reporter)


# группа -> (справка, подкоманды)
GROUPS: Final[Dict[str, Tuple[str, Dict[str, Action]]]] = {
    "container": (
        CONTAINER_USAGE,
        {
            "stop": stop_containers,
            "rm": remove_containers,
            "clean": clean_containers,
        },
    ),
    "volume": (VOLUME_USAGE, {"rm": remove_volumes}),
    "image": (IMAGE_USAGE, {"rm": remove_images, "rmf": partial(remove_images, force=True)}),
}

GROUP_ALIASES: Final[Dict[str, str]] = {
    "con": "container",
    "container": "container",
    "containers": "container",
    "vol": "volume",
    "volume": "volume",
    "volumes": "volume",
    "img": "image",
    "image": "image",
    "images": "image",
}

COMPOSITES: Final[Dict[str, Action]] = {"wipe": wipe, "purge": purge}


def dispatch(argv: Sequence[str], engine: EngineClient, reporter: Reporter) -> int:
    """Выполняет команду по аргументам (без имени программы) и возвращает код выхода.

    Фатальные ошибки движка (BoxiError) не перехватываются.
    """

    if not argv:
        reporter.plain(MAIN_USAGE)
        return EXIT_USAGE

    command = argv[0]
    if command in HELP_TOKENS:
        reporter.plain(MAIN_USAGE)
        return EXIT_OK

    if command in COMPOSITES:
        LOGGER.info("Running %s", command)
        COMPOSITES[command](engine, reporter)
        return EXIT_OK

    group = GROUP_ALIASES.get(command)
    if group is None:
        LOGGER.info("Unknown command: %s", command)
        reporter.plain(MAIN_USAGE)
        return EXIT_USAGE

    usage, actions = GROUPS[group]
    if len(argv) < 2:
        reporter.plain(usage)
        return EXIT_USAGE

    sub_command = argv[1]
    if sub_command in HELP_TOKENS:
        reporter.plain(usage)
        return EXIT_OK

    action = actions.get(sub_command)
    if action is None:
        LOGGER.info("Unknown %s subcommand: %s", group, sub_command)
        reporter.plain(usage)
        return EXIT_USAGE

    LOGGER.info("Running %s %s", group, sub_command)
    action(engine, reporter)
    return EXIT_OK
