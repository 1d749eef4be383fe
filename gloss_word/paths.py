"""
Platform-specific application cache directory resolution.

Resolution order:
1. An explicit directory (from config or the CLI)
2. The ``GLOSS_WORD_CACHE_DIR`` environment variable
3. The platform's per-user cache location
"""

from __future__ import annotations

import os
import sys
from pathlib import Path


APP_NAME = "gloss-word"
APP_ORGANIZATION = "theobeers"
APP_QUALIFIER = "com"
CACHE_DIR_ENV = "GLOSS_WORD_CACHE_DIR"


def resolve_cache_dir(explicit: str | None = None) -> Path:
    """Return the directory that holds the cache database.

    The directory is not created here; callers create it lazily so a
    read-only home does not break lookups.
    """
    if explicit:
        return Path(explicit).expanduser()

    env_dir = os.getenv(CACHE_DIR_ENV)
    if env_dir:
        return Path(env_dir).expanduser()

    if sys.platform == "darwin":
        return Path.home() / "Library" / "Caches" / f"{APP_QUALIFIER}.{APP_ORGANIZATION}.{APP_NAME}"
    if sys.platform.startswith("win"):
        local = os.getenv("LOCALAPPDATA")
        base = Path(local) if local else Path.home() / "AppData" / "Local"
        return base / APP_ORGANIZATION / APP_NAME / "cache"

    xdg = os.getenv("XDG_CACHE_HOME")
    base = Path(xdg).expanduser() if xdg else Path.home() / ".cache"
    return base / APP_NAME
