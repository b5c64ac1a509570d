"""
Repository for stored role preferences.
No business logic — only read/write operations. Every write commits.
"""
from __future__ import annotations

import json
import sqlite3
from datetime import datetime, timezone

from roledraft.models import PreferenceRecord, participant_key


def _parse_datetime(s: str | None) -> datetime:
    if s is None:
        raise ValueError("expected datetime string")
    return datetime.fromisoformat(s.replace("Z", "+00:00"))


def _row_to_record(row: sqlite3.Row) -> PreferenceRecord:
    return PreferenceRecord(
        participant=row["participant"],
        roles=list(json.loads(row["roles"])),
        updated_at=_parse_datetime(row["updated_at"]),
    )


# ---------- PreferenceRepository ----------


class PreferenceRepository:
    """CRUD for preference records keyed by case-insensitive participant name."""

    def get(self, conn: sqlite3.Connection, participant: str) -> PreferenceRecord | None:
        row = conn.execute(
            "SELECT participant, roles, updated_at FROM preferences WHERE key = ?",
            (participant_key(participant),),
        ).fetchone()
        if row is None:
            return None
        return _row_to_record(row)

    def get_roles(self, conn: sqlite3.Connection, participant: str) -> list[str]:
        """Stored list for participant, or [] when nothing is stored."""
        record = self.get(conn, participant)
        return record.roles if record is not None else []

    def upsert(self, conn: sqlite3.Connection, participant: str, roles: list[str]) -> PreferenceRecord:
        name = participant.strip()
        now = datetime.now(timezone.utc)
        conn.execute(
            """INSERT INTO preferences (key, participant, roles, updated_at) VALUES (?, ?, ?, ?)
            ON CONFLICT(key) DO UPDATE SET
                participant = excluded.participant,
                roles = excluded.roles,
                updated_at = excluded.updated_at""",
            (participant_key(name), name, json.dumps(list(roles)), now.isoformat()),
        )
        conn.commit()
        return PreferenceRecord(participant=name, roles=list(roles), updated_at=now)

    def delete(self, conn: sqlite3.Connection, participant: str) -> bool:
        """Remove a record. Returns False if there was nothing to remove."""
        cur = conn.execute("DELETE FROM preferences WHERE key = ?", (participant_key(participant),))
        conn.commit()
        return cur.rowcount > 0

    def list_all(self, conn: sqlite3.Connection) -> list[PreferenceRecord]:
        rows = conn.execute(
            "SELECT participant, roles, updated_at FROM preferences ORDER BY key"
        ).fetchall()
        return [_row_to_record(r) for r in rows]
