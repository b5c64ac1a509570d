"""
Import of the flat JSON preference file ({"name": ["1", "fill", ...]}) used by earlier deployments.
"""
from __future__ import annotations

import json
import logging
import sqlite3
from pathlib import Path

from roledraft.roles import parse_token

from .repositories import PreferenceRepository

logger = logging.getLogger(__name__)


def load_legacy_preferences(conn: sqlite3.Connection, json_path: Path) -> int:
    """
    Upsert every record from json_path. Invalid tokens are dropped with a warning.
    Returns the number of records imported. A missing file imports nothing.
    """
    if not json_path.exists():
        logger.info("Legacy preference file %s not found; nothing to import", json_path)
        return 0
    data = json.loads(json_path.read_text(encoding="utf-8") or "{}")
    if not isinstance(data, dict):
        raise ValueError(f"Legacy preference file must hold a JSON object: {json_path}")
    repo = PreferenceRepository()
    imported = 0
    for name, raw_roles in data.items():
        if not str(name).strip() or not isinstance(raw_roles, list):
            logger.warning("Skipping malformed legacy record %r", name)
            continue
        roles: list[str] = []
        for raw in raw_roles:
            token = parse_token(raw)
            if token is None:
                logger.warning("Dropping invalid token %r for %r", raw, name)
                continue
            roles.append(token)
        repo.upsert(conn, str(name), roles)
        imported += 1
    logger.info("Imported %d legacy preference records from %s", imported, json_path)
    return imported
