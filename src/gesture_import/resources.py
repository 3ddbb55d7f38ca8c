from __future__ import annotations

import os
from importlib import resources
from pathlib import Path
from warnings import warn

from gesture_core.protocol import DEFAULT_STORE_NAME, STORE_PATH_ENV


def _candidate_paths() -> list[Path]:
    candidates: list[Path] = []
    env_path = os.environ.get(STORE_PATH_ENV)
    if env_path:
        candidates.append(Path(env_path))
    candidates.append(Path.cwd() / DEFAULT_STORE_NAME)
    bundled = resources.files("gesture_import") / "data" / DEFAULT_STORE_NAME
    candidates.append(Path(str(bundled)))
    return candidates


def default_store_path() -> Path | None:
    """Locate the default gestures.bin.

    Lookup order: $GESTURE_STORE_PATH, ./gestures.bin, then the copy bundled
    with the package. Returns None when none of them exists.
    """
    for candidate in _candidate_paths():
        if candidate.is_file():
            return candidate
    warn("File not found")
    return None
