"""
Role slots and preference tokens.
Five mutually exclusive positions (1-5) plus the "fill" wildcard.
Parsing lives here so the API, the store import and the resolver agree on what a token is.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# ---------- Role enum (exactly these 5) ----------


class Role(str, Enum):
    CARRY = "1"
    MID = "2"
    OFFLANE = "3"
    SOFT_SUPPORT = "4"
    HARD_SUPPORT = "5"


# Wildcard token: accepts any role, defers the player until the end of the queue.
FILL = "fill"

# Appended to every stored list so each player always has a fallback path.
DEFAULT_ROLE_ORDER: tuple[str, ...] = tuple(r.value for r in Role)

VALID_TOKENS: frozenset[str] = frozenset(DEFAULT_ROLE_ORDER) | {FILL}

ROLE_COUNT = len(DEFAULT_ROLE_ORDER)


# ---------- Role definitions (shown to users) ----------


@dataclass(frozen=True)
class RoleDefinition:
    name: str
    description: str


ROLE_DEFINITIONS: dict[Role, RoleDefinition] = {
    Role.CARRY: RoleDefinition(
        name="Carry",
        description="Safe lane core. Farms early, carries the late game.",
    ),
    Role.MID: RoleDefinition(
        name="Mid",
        description="Solo middle lane. Tempo and early kills.",
    ),
    Role.OFFLANE: RoleDefinition(
        name="Offlane",
        description="Hard lane core. Initiates and soaks pressure.",
    ),
    Role.SOFT_SUPPORT: RoleDefinition(
        name="Soft support",
        description="Roaming support. Ganks and secures runes.",
    ),
    Role.HARD_SUPPORT: RoleDefinition(
        name="Hard support",
        description="Lane support for the carry. Wards, stacks and saves.",
    ),
}


def list_all_roles() -> list[tuple[Role, RoleDefinition]]:
    """For API/frontend: list all role slots with definitions."""
    return [(r, ROLE_DEFINITIONS[r]) for r in Role]


def parse_token(value: str | int | None) -> str | None:
    """Normalise a preference token ("Fill", " 3", 3 -> "fill", "3", "3"); None if invalid or empty."""
    if value is None or isinstance(value, bool):
        return None
    token = str(value).strip().lower()
    if token not in VALID_TOKENS:
        return None
    return token

