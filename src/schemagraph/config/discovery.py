"""Locate schemagraph.toml.

The settings layer asks for one path. ``SCHEMAGRAPH_CONFIG`` pins it
explicitly; otherwise the first ``schemagraph.toml`` found between the
working directory and the filesystem root is used, nearest first.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

CONFIG_FILENAME = "schemagraph.toml"
CONFIG_ENV_VAR = "SCHEMAGRAPH_CONFIG"


def _search_dirs(start: Path) -> Iterator[Path]:
    current = start.resolve()
    yield current
    yield from current.parents


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), or None.

    A ``SCHEMAGRAPH_CONFIG`` pointing at a missing file disables discovery
    rather than falling back to the walk.
    """
    pinned = os.environ.get(CONFIG_ENV_VAR)
    if pinned:
        path = Path(pinned)
        return path if path.is_file() else None

    for directory in _search_dirs(start or Path.cwd()):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
