"""Runtime settings resolved from the environment."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from heroplan.data.paths import get_definitions_path

DEBUG_ENV = "HEROPLAN_DEBUG"
CATALOG_URL_ENV = "HEROPLAN_CATALOG_URL"
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True, slots=True)
class Settings:
    data_dir: Path
    catalog_url: str | None
    debug: bool


def debug_enabled() -> bool:
    """Return True only when HEROPLAN_DEBUG is explicitly set to '1'."""
    return os.getenv(DEBUG_ENV) == "1"


def load_settings() -> Settings:
    return Settings(
        data_dir=get_definitions_path(),
        catalog_url=os.getenv(CATALOG_URL_ENV) or None,
        debug=debug_enabled(),
    )


def configure_logging(debug: bool) -> None:
    logging.basicConfig(level=logging.DEBUG if debug else logging.WARNING, format=_LOG_FORMAT)
