"""
Database connection and initialization.
"""
from __future__ import annotations

import os
import sqlite3
from pathlib import Path

from .schema import all_schema_sql

DB_PATH_ENV = "ROLEDRAFT_DB_PATH"


# Default DB path (project root / data / roledraft.db)
def _default_db_path() -> Path:
    env_path = os.environ.get(DB_PATH_ENV, "").strip()
    if env_path:
        return Path(env_path)
    return Path(__file__).resolve().parent.parent.parent / "data" / "roledraft.db"


_db_path: Path | None = None


def set_db_path(path: str | Path) -> None:
    """Set the database path. Call before first get_connection if not using default."""
    global _db_path
    _db_path = Path(path)


def get_db_path() -> Path:
    """Return the current database path."""
    if _db_path is not None:
        return _db_path
    return _default_db_path()


def get_connection(db_path: str | Path | None = None) -> sqlite3.Connection:
    """
    Return a new SQLite connection.
    Use as context manager or ensure close() is called.
    """
    path = Path(db_path) if db_path else get_db_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(path))
    conn.row_factory = sqlite3.Row
    return conn


def init_db(
    db_path: str | Path | None = None,
    legacy_json_path: str | Path | None = None,
) -> None:
    """
    Create or ensure all tables exist.
    If legacy_json_path is provided, also import records from a legacy
    {name: [tokens]} preference file (uses persistence.legacy).
    """
    conn = get_connection(db_path)
    try:
        conn.executescript(all_schema_sql())
        conn.commit()
        if legacy_json_path:
            from .legacy import load_legacy_preferences
            load_legacy_preferences(conn, Path(legacy_json_path))
    finally:
        conn.close()
