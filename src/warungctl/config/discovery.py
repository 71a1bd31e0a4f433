"""Locating a site workspace from wherever the command was run.

A workspace is the nearest directory holding ``warungctl.toml`` or the
site document itself.  Commands may be run from any subdirectory (for
instance ``dist/``) and still act on the right ``site.yaml``.  The
``WARUNGCTL_CONFIG`` env var pins the config file and skips the search.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

CONFIG_FILENAME = "warungctl.toml"
CONFIG_ENV_VAR = "WARUNGCTL_CONFIG"
DEFAULT_DOCUMENT = "site.yaml"

# Either file marks a directory as a workspace root.
WORKSPACE_MARKERS = (CONFIG_FILENAME, DEFAULT_DOCUMENT)


def _ancestors(start: Path | None) -> Iterator[Path]:
    """*start* (default: cwd) and each parent up to the filesystem root."""
    current = (start or Path.cwd()).resolve()
    yield current
    yield from current.parents


def find_config(start: Path | None = None) -> Path | None:
    """Nearest ``warungctl.toml`` at or above *start*.

    A set ``WARUNGCTL_CONFIG`` wins outright; if it names a missing file
    no config is used at all.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        pinned = Path(env_path)
        return pinned if pinned.is_file() else None

    for directory in _ancestors(start):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def find_workspace_root(start: Path | None = None) -> Path | None:
    """Nearest directory at or above *start* holding a workspace marker."""
    for directory in _ancestors(start):
        if any((directory / marker).is_file() for marker in WORKSPACE_MARKERS):
            return directory
    return None
