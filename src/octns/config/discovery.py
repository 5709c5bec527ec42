"""Locate the ``octns.toml`` file a command should read.

Precedence: the ``--config`` flag, then ``OCTNS_CONFIG``, then the first
``octns.toml`` found walking up from the working directory.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "octns.toml"
CONFIG_ENV_VAR = "OCTNS_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest ``octns.toml`` at or above *start* (default: cwd).

    ``OCTNS_CONFIG`` short-circuits the walk; a path that does not exist
    there means "no config", not "keep looking".
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return _existing(Path(override))

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        found = _existing(directory / CONFIG_FILENAME)
        if found:
            return found
    return None


def locate_config(config_path: str | None = None, start: Path | None = None) -> Path | None:
    """Resolve the file for a CLI run: an explicit *config_path* wins over discovery."""
    if config_path:
        return _existing(Path(config_path))
    return find_config(start)


def _existing(path: Path) -> Path | None:
    return path if path.is_file() else None
