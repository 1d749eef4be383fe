"""
Persistent lookup cache backed by SQLite.

Each lookup mode has its own table keyed by word. Caching is strictly an
optimization, so no operation here raises during a lookup: failures come
back as ``CacheResult.error`` and the caller decides to ignore them.
"""

from __future__ import annotations

from contextlib import closing
from dataclasses import dataclass
from pathlib import Path
import shutil
import sqlite3

from .core.types import Mode
from .errors import CacheError


_SCHEMA = """
CREATE TABLE IF NOT EXISTS {table} (
    word        TEXT UNIQUE NOT NULL,
    content     TEXT NOT NULL
)
"""


@dataclass
class CacheResult:
    """Outcome of a cache operation.

    Attributes:
        value: Cached text for a hit, None for a miss or a write
        error: Error message if the store could not be used, None otherwise
    """
    value: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def hit(self) -> bool:
        return self.value is not None


class LookupCache:
    """(mode, word) -> text store in a single SQLite file.

    Every operation opens its own short-lived connection; concurrent
    processes rely on SQLite's locking.
    """

    def __init__(self, db_path: Path):
        self.db_path = Path(db_path)

    def _connect(self) -> sqlite3.Connection:
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        return sqlite3.connect(self.db_path)

    def ensure_schema(self) -> CacheResult:
        """Create both tables if they do not exist yet."""
        try:
            with closing(self._connect()) as conn, conn:
                for mode in Mode:
                    conn.execute(_SCHEMA.format(table=mode.table))
        except (sqlite3.Error, OSError) as exc:
            return CacheResult(error=f"{type(exc).__name__}: {exc}")
        return CacheResult()

    def lookup(self, mode: Mode, word: str) -> CacheResult:
        """Return the cached text for ``word``; a miss has neither value nor error."""
        try:
            with closing(self._connect()) as conn:
                row = conn.execute(
                    f"SELECT content FROM {mode.table} WHERE word = ?",
                    (word,),
                ).fetchone()
        except (sqlite3.Error, OSError) as exc:
            return CacheResult(error=f"{type(exc).__name__}: {exc}")
        if row is None:
            return CacheResult()
        return CacheResult(value=row[0])

    def upsert(self, mode: Mode, word: str, text: str, is_update: bool) -> CacheResult:
        """Write ``text`` for ``word``.

        Overwrites the existing row when ``is_update`` is set, otherwise
        inserts a new one; inserting an existing word is an error result.
        Each write is one transaction, so a failed write leaves the old
        value in place.
        """
        try:
            with closing(self._connect()) as conn, conn:
                if is_update:
                    cursor = conn.execute(
                        f"UPDATE {mode.table} SET content = ? WHERE word = ?",
                        (text, word),
                    )
                    if cursor.rowcount == 0:
                        return CacheResult(error=f"No cached {mode.table} entry for {word!r}")
                else:
                    conn.execute(
                        f"INSERT INTO {mode.table} (word, content) VALUES (?, ?)",
                        (word, text),
                    )
        except (sqlite3.Error, OSError) as exc:
            return CacheResult(error=f"{type(exc).__name__}: {exc}")
        return CacheResult()


def clear_cache_dir(cache_dir: Path) -> None:
    """Delete the cache directory and everything in it.

    Raises:
        CacheError: if the directory does not exist or cannot be removed
    """
    if not cache_dir.exists():
        raise CacheError("Cache directory not found")
    try:
        shutil.rmtree(cache_dir)
    except OSError as exc:
        raise CacheError(f"Failed to delete cache directory: {exc}") from exc
