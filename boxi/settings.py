"""Настройки boxi из переменных окружения."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final, Mapping

from boxi.exceptions import SettingsValidationError
from boxi.utils.logger import resolve_log_level

_TRUE_VALUES: Final = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES: Final = frozenset({"", "0", "false", "no", "off"})


@dataclass(slots=True)
class Settings:
    """Параметры запуска, не влияющие на семантику команд."""

    home_dir: Path
    engine: str = "docker"
    log_level: str = "INFO"
    verbose: bool = False

    @property
    def base_dir(self) -> Path:
        return self.home_dir / ".boxi"

    @property
    def log_dir(self) -> Path:
        return self.base_dir / "logs"


def load_settings(environ: Mapping[str, str]) -> Settings:
    """Собирает Settings из BOXI_HOME, BOXI_ENGINE, BOXI_LOG_LEVEL, BOXI_VERBOSE."""

    home_value = environ.get("BOXI_HOME", "").strip()
    home_dir = Path(home_value).expanduser() if home_value else Path.home()

    engine = environ.get("BOXI_ENGINE", "docker").strip()
    if not engine or any(char.isspace() for char in engine):
        raise SettingsValidationError("BOXI_ENGINE", engine, "expected a single executable name")

    log_level = environ.get("BOXI_LOG_LEVEL", "INFO").strip().upper() or "INFO"
    try:
        resolve_log_level(log_level)
    except ValueError as exc:
        raise SettingsValidationError("BOXI_LOG_LEVEL", log_level, "unknown level") from exc

    verbose_raw = environ.get("BOXI_VERBOSE", "").strip().lower()
    if verbose_raw in _TRUE_VALUES:
        verbose = True
    elif verbose_raw in _FALSE_VALUES:
        verbose = False
    else:
        raise SettingsValidationError("BOXI_VERBOSE", verbose_raw, "expected a boolean")

    return Settings(home_dir=home_dir, engine=engine, log_level=log_level, verbose=verbose)
