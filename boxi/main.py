"""Точка входа в boxi."""

from __future__ import annotations

import logging
import os
import sys
from typing import Mapping, Optional, Sequence

from boxi import __version__
from boxi.cli.dispatcher import EXIT_USAGE, dispatch
from boxi.engine.client import EngineClient
from boxi.exceptions import BoxiError
from boxi.settings import Settings, load_settings
from boxi.utils.formatting import Reporter
from boxi.utils.logger import configure_logging

LOGGER = logging.getLogger(__name__)


def setup_logging(settings: Settings) -> None:
    """Настраивает логирование по Settings."""

    configure_logging(
        settings.log_dir,
        level_name=settings.log_level,
        verbose=settings.verbose,
    )


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
    engine: Optional[EngineClient] = None,
    reporter: Optional[Reporter] = None,
) -> int:
    """Основная точка входа: готовит окружение и выполняет одну команду."""

    args = list(sys.argv[1:] if argv is None else argv)
    reporter = reporter or Reporter()

    try:
        settings = load_settings(os.environ if environ is None else environ)
    except BoxiError as exc:
        reporter.danger(exc.message)
        return EXIT_USAGE
    setup_logging(settings)

    engine = engine or EngineClient(settings.engine)
    LOGGER.info("boxi %s: %s (engine=%s)", __version__, " ".join(args) or "<no command>", engine.executable)
    try:
        return dispatch(args, engine, reporter)
    except BoxiError as exc:
        reporter.danger(exc.message)
        return EXIT_USAGE


if __name__ == "__main__":
    sys.exit(main())
