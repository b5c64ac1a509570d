"""
Data models for the role draft service.
Domain objects only — no persistence or API logic.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


def participant_key(name: str) -> str:
    """Storage key for a participant. Names are case-insensitive for lookups."""
    return name.strip().casefold()


# ---------- Preference record ----------
@dataclass
class PreferenceRecord:
    """
    A participant's ranked role preferences, most preferred first.
    participant keeps the display name last written; lookups go through participant_key().
    """
    participant: str
    roles: list[str] = field(default_factory=list)
    updated_at: datetime | None = None


# ---------- Role assignment ----------
@dataclass(frozen=True)
class RoleAssignment:
    """One participant locked into one role slot (1-5)."""
    participant: str
    role: int

    def to_dict(self) -> dict[str, Any]:
        return {"user": self.participant, "role": self.role}
