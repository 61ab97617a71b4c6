"""Locate the shapecast.toml for a run.

Priority: an explicit ``--config`` path, then the ``SHAPECAST_CONFIG`` env
var, then the nearest ``shapecast.toml`` in the start directory or one of
its parents.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "shapecast.toml"
CONFIG_ENV_VAR = "SHAPECAST_CONFIG"


class ConfigNotFoundError(FileNotFoundError):
    """An explicitly requested config file does not exist."""


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest shapecast.toml at or above *start* (default: cwd)."""
    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def resolve_config(explicit: str | Path | None = None, start: Path | None = None) -> Path | None:
    """Pick the config file for this run, or None to use code defaults.

    A path given explicitly (argument or env var) must exist; discovery
    finding nothing is not an error.

    Raises:
        ConfigNotFoundError: If an explicit path does not point to a file.
    """
    requested = explicit or os.environ.get(CONFIG_ENV_VAR)
    if requested:
        path = Path(requested)
        if not path.is_file():
            raise ConfigNotFoundError(f"Config file not found: {path}")
        return path
    return find_config(start)
