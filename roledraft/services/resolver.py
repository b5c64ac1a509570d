"""
Greedy role resolver.

Participants are taken from the front of a work queue in draw order. Each one is given the first
role in their effective preference list (stored list + default order 1..5) that nobody has claimed yet.
If the first usable entry is "fill", the participant is not assigned: one "fill" is removed from their
working copy and they go to the back of the queue, so they pick from whatever is left later.

No backtracking, no global optimisation: preference order is honoured as far as draw order allows.
"""
from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Iterable, Sequence

from roledraft.models import RoleAssignment
from roledraft.roles import DEFAULT_ROLE_ORDER, FILL, parse_token

logger = logging.getLogger(__name__)

PreferenceLookup = Callable[[str], Iterable[str]]


def _best_available(prefs: Iterable[str], claimed: set[int]) -> str | None:
    """First token that is "fill" or an unclaimed role. Claimed roles and unknown tokens are skipped."""
    for raw in prefs:
        token = parse_token(raw)
        if token is None:
            continue
        if token == FILL:
            return FILL
        if int(token) not in claimed:
            return token
    return None


def _remove_one_fill(prefs: list[str]) -> None:
    for i, raw in enumerate(prefs):
        if parse_token(raw) == FILL:
            del prefs[i]
            return


def resolve(participants: Sequence[str], lookup: PreferenceLookup) -> list[RoleAssignment]:
    """
    Assign one distinct role (1-5) per participant, in queue order.
    participants must already be in draw order (see shuffler.shuffle).
    lookup(participant) returns the stored preference list; it is copied before use and never mutated.
    Participants left over once all five roles are claimed are logged and not assigned.
    """
    assigned: list[RoleAssignment] = []
    claimed: set[int] = set()
    queue: deque[str] = deque(participants)
    working: dict[str, list[str]] = {}

    while len(assigned) < len(participants):
        if not queue:
            break
        participant = queue.popleft()
        if participant not in working:
            working[participant] = list(lookup(participant) or [])
        prefs = working[participant]

        pick = _best_available([*prefs, *DEFAULT_ROLE_ORDER], claimed)
        if pick is None:
            logger.warning("No role left for participant %r; %d roles already claimed", participant, len(claimed))
            continue
        if pick == FILL:
            _remove_one_fill(prefs)
            queue.append(participant)
            logger.debug("Deferred %r (fill); %d left in queue", participant, len(queue))
            continue

        role = int(pick)
        claimed.add(role)
        assigned.append(RoleAssignment(participant=participant, role=role))
        logger.debug("Assigned %r to role %d", participant, role)

    return assigned
