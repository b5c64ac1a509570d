"""
Draft service: lobby rules, preference writes, and the shuffle -> resolve pipeline.
Persistence is delegated to PreferenceRepository; each call works on the connection it is given.
"""
from __future__ import annotations

import logging
import random
import sqlite3
from typing import Iterable

from roledraft.models import PreferenceRecord, RoleAssignment, participant_key
from roledraft.persistence.repositories import PreferenceRepository
from roledraft.roles import ROLE_COUNT, parse_token
from roledraft.services.resolver import resolve
from roledraft.services.shuffler import shuffle

logger = logging.getLogger(__name__)

# ---------- Exceptions ----------


class InvalidPreferenceError(ValueError):
    """Preference list contains a token outside {"fill", "1".."5"}, or the name is empty."""


class EmptyLobbyError(ValueError):
    """No participants left to draft after cleaning the input."""


class LobbyTooLargeError(ValueError):
    """More distinct participants than role slots."""


def unique_participants(names: Iterable[str]) -> list[str]:
    """Strip names, drop blanks and case-insensitive duplicates (first occurrence wins)."""
    seen: set[str] = set()
    result: list[str] = []
    for raw in names:
        name = raw.strip()
        if not name:
            continue
        key = participant_key(name)
        if key in seen:
            logger.info("Ignoring duplicate participant %r", name)
            continue
        seen.add(key)
        result.append(name)
    return result


def validate_tokens(roles: Iterable[str | int]) -> list[str]:
    """Normalise tokens; raise InvalidPreferenceError on the first invalid one."""
    tokens: list[str] = []
    for raw in roles:
        token = parse_token(raw)
        if token is None:
            raise InvalidPreferenceError(f"Invalid role token: {raw!r}. Use 'fill' or 1-{ROLE_COUNT}")
        tokens.append(token)
    return tokens


# ---------- DraftService ----------


class DraftService:
    """
    Domain logic for role drafts and stored preferences.
    """

    def __init__(self, repo: PreferenceRepository | None = None) -> None:
        self._repo = repo or PreferenceRepository()

    # ---------- Preferences ----------

    def set_preferences(
        self, conn: sqlite3.Connection, participant: str, roles: Iterable[str | int]
    ) -> PreferenceRecord:
        if not participant or not participant.strip():
            raise InvalidPreferenceError("Participant name must not be empty")
        tokens = validate_tokens(roles)
        record = self._repo.upsert(conn, participant, tokens)
        logger.info("Stored preferences for %r: %s", record.participant, tokens)
        return record

    def get_preferences(self, conn: sqlite3.Connection, participant: str) -> list[str] | None:
        record = self._repo.get(conn, participant)
        return record.roles if record is not None else None

    def all_preferences(self, conn: sqlite3.Connection) -> dict[str, list[str]]:
        return {r.participant: r.roles for r in self._repo.list_all(conn)}

    def remove_preferences(self, conn: sqlite3.Connection, participant: str) -> bool:
        removed = self._repo.delete(conn, participant)
        if removed:
            logger.info("Removed preferences for %r", participant)
        return removed

    # ---------- Draft ----------

    def assign_roles(
        self, conn: sqlite3.Connection, participants: Iterable[str], seed: int | None = None
    ) -> list[RoleAssignment]:
        """
        Draw a random order over the lobby and resolve one role per participant.
        Deterministic if seed provided.
        """
        lobby = unique_participants(participants)
        if not lobby:
            raise EmptyLobbyError("At least one participant is required")
        if len(lobby) > ROLE_COUNT:
            raise LobbyTooLargeError(
                f"At most {ROLE_COUNT} participants can be drafted (got {len(lobby)})"
            )
        # Read-only snapshot for this draft; resolve() copies each list before deferring.
        snapshot = {name: self._repo.get_roles(conn, name) for name in lobby}
        order = shuffle(lobby, random.Random(seed))
        logger.info("Drafting %d participants (seed=%s)", len(order), seed)
        return resolve(order, lambda name: snapshot.get(name, []))
