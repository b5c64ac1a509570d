"""
Tests for role slots and token parsing.
"""
from __future__ import annotations

import pytest

from roledraft.roles import (
    DEFAULT_ROLE_ORDER,
    FILL,
    ROLE_COUNT,
    Role,
    list_all_roles,
    parse_token,
)


def test_default_order_is_ascending_and_complete():
    assert DEFAULT_ROLE_ORDER == ("1", "2", "3", "4", "5")
    assert ROLE_COUNT == 5


def test_every_role_has_definition():
    roles = list_all_roles()
    assert [r for r, _ in roles] == list(Role)
    assert dict(roles)[Role.MID].name == "Mid"


@pytest.mark.parametrize(
    "raw, expected",
    [("1", "1"), (" 5 ", "5"), (3, "3"), ("fill", FILL), ("FILL", FILL), ("6", None), ("", None), (None, None), ("mid", None)],
)
def test_parse_token(raw, expected):
    assert parse_token(raw) == expected

