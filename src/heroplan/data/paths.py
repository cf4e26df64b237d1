"""Helpers for resolving data file locations."""
from __future__ import annotations

import os
from pathlib import Path

DATA_DIR_ENV = "HEROPLAN_DATA_DIR"


def get_repo_root() -> Path:
    """Return the repository root."""
    return Path(__file__).resolve().parents[3]


def get_definitions_path(base_path: Path | str | None = None) -> Path:
    """Return the directory containing JSON definition files.

    An explicit ``base_path`` wins, then ``HEROPLAN_DATA_DIR``, then the
    ``data/definitions`` directory of the source checkout.
    """
    if base_path is not None:
        return Path(base_path)
    env_dir = os.getenv(DATA_DIR_ENV)
    if env_dir:
        return Path(env_dir)
    return get_repo_root() / "data" / "definitions"
