"""
Service layer: draw order, role resolution, draft orchestration.
No persistence writes in shuffler/resolver; draft_service orchestrates persistence.
"""
from .shuffler import shuffle
from .resolver import resolve
from .draft_service import (
    DraftService,
    InvalidPreferenceError,
    EmptyLobbyError,
    LobbyTooLargeError,
)

__all__ = [
    "shuffle",
    "resolve",
    "DraftService",
    "InvalidPreferenceError",
    "EmptyLobbyError",
    "LobbyTooLargeError",
]
