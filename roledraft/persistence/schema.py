"""
SQLite schema for preference records.
Migration-friendly: each table created with IF NOT EXISTS.
"""
from __future__ import annotations


def preferences_schema() -> str:
    """One row per participant. key is the case-folded name; roles is a JSON array of tokens."""
    return """
    CREATE TABLE IF NOT EXISTS preferences (
        key TEXT PRIMARY KEY,
        participant TEXT NOT NULL,
        roles TEXT NOT NULL DEFAULT '[]',
        updated_at TEXT NOT NULL
    );
    """


def all_schema_sql() -> str:
    return preferences_schema()
