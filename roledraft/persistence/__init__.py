"""
Persistence layer for preference data.
No business logic, no resolution — only read/write interfaces.
"""
from .db import get_connection, init_db
from .repositories import PreferenceRepository

__all__ = [
    "get_connection",
    "init_db",
    "PreferenceRepository",
]
