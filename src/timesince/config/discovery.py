"""Locating ``timesince.toml``.

``TIMESINCE_CONFIG`` names a file outright; otherwise the nearest
``timesince.toml`` in the working directory or one of its ancestors wins.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "timesince.toml"
CONFIG_ENV_VAR = "TIMESINCE_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), if any.

    A ``TIMESINCE_CONFIG`` pointing at a missing file disables discovery
    rather than falling back to the walk-up search.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
