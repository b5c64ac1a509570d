"""
REST API for the role draft service.
Thin wrappers around domain logic and persistence.
"""
from __future__ import annotations

import os
from contextlib import asynccontextmanager, contextmanager
from typing import Any, AsyncGenerator, Generator

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

from roledraft.persistence import get_connection, init_db
from roledraft.persistence.db import get_db_path
from roledraft.roles import FILL, list_all_roles
from roledraft.services.draft_service import (
    DraftService,
    EmptyLobbyError,
    InvalidPreferenceError,
    LobbyTooLargeError,
)

LEGACY_PREFS_ENV = "ROLEDRAFT_LEGACY_PREFS"


@contextmanager
def db_conn() -> Generator:
    """Yield a DB connection, ensure close on exit."""
    conn = get_connection()
    try:
        yield conn
    finally:
        conn.close()


# ---------- Startup: ensure DB (and optional legacy import) ----------
def _ensure_db() -> None:
    legacy = os.environ.get(LEGACY_PREFS_ENV, "").strip() or None
    init_db(db_path=get_db_path(), legacy_json_path=legacy)


# ---------- Lifespan ----------
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    _ensure_db()
    yield


# ---------- FastAPI app ----------
app = FastAPI(
    title="Dota 2 Role Preference API",
    description="Stores ranked role preferences and drafts one role per player",
    version="1.3.3.7",
    license_info={"name": "Licensed Under MIT", "url": "https://spdx.org/licenses/MIT.html"},
    lifespan=lifespan,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

draft_service = DraftService()


# ---------- Request/Response models ----------


class AssignRolesRequest(BaseModel):
    users: list[str] = Field(..., description="Players in the lobby (at most 5 distinct names)")
    seed: int | None = Field(default=None, description="RNG seed for a reproducible draw")


class SetPreferencesRequest(BaseModel):
    user: str = Field(..., max_length=100)
    # Raw JSON values; the service rejects anything that is not a token (true, 1.5, "6").
    roles: list[Any] = Field(..., description="Ranked tokens, most preferred first: 'fill' or 1-5")


class RoleAssignmentResponse(BaseModel):
    user: str
    role: int = Field(..., ge=1, le=5)


# ---------- Endpoints ----------


@app.post("/roles", response_model=list[RoleAssignmentResponse])
def assign_roles(req: AssignRolesRequest) -> list[dict[str, Any]]:
    """Shuffle the lobby and assign one distinct role per player, honouring stored preferences."""
    with db_conn() as conn:
        try:
            assignments = draft_service.assign_roles(conn, req.users, seed=req.seed)
        except (EmptyLobbyError, LobbyTooLargeError) as e:
            raise HTTPException(status_code=400, detail=str(e))
        return [a.to_dict() for a in assignments]


@app.get("/roles/catalog")
def list_roles() -> dict[str, Any]:
    """List role slots with definitions, plus the wildcard token."""
    roles = [
        {"id": r.value, "name": d.name, "description": d.description}
        for r, d in list_all_roles()
    ]
    return {"roles": roles, "wildcard": FILL}


@app.get("/")
def all_preferences() -> dict[str, list[str]]:
    """Every stored preference list, keyed by player name."""
    with db_conn() as conn:
        return draft_service.all_preferences(conn)


@app.post("/role", response_class=PlainTextResponse)
def set_preferences(req: SetPreferencesRequest) -> str:
    """Store (replace) a player's ranked role preferences."""
    with db_conn() as conn:
        try:
            draft_service.set_preferences(conn, req.user, req.roles)
        except InvalidPreferenceError as e:
            raise HTTPException(status_code=400, detail=str(e))
    return "Role added"


@app.get("/role/{user:path}")
def get_preferences(user: str) -> list[str]:
    """A player's stored preferences. Names are case-insensitive."""
    with db_conn() as conn:
        roles = draft_service.get_preferences(conn, user)
    if roles is None:
        raise HTTPException(status_code=404, detail=f"No preferences stored for {user}")
    return roles


@app.delete("/role/{user:path}", response_class=PlainTextResponse)
def remove_preferences(user: str) -> str:
    with db_conn() as conn:
        removed = draft_service.remove_preferences(conn, user)
    if not removed:
        raise HTTPException(status_code=404, detail=f"No preferences stored for {user}")
    return "Role removed"


@app.get("/healthcheck", response_class=PlainTextResponse)
def healthcheck() -> str:
    return "Totally alive"
