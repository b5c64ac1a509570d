"""
Tests for the Fisher–Yates draw order.
Same multiset out as in; input untouched; seeded draws are reproducible; positions roughly uniform.
"""
from __future__ import annotations

import random
from collections import Counter

from roledraft.services.shuffler import shuffle


class _LowestRNG:
    """randint always picks the lowest index, to pin down the swap order."""

    def randint(self, a: int, b: int) -> int:
        return a


def test_shuffle_preserves_members():
    items = ["A", "B", "C", "D", "E"]
    out = shuffle(items, random.Random(7))
    assert sorted(out) == sorted(items)
    assert len(out) == len(items)


def test_shuffle_keeps_duplicates():
    items = ["A", "A", "B"]
    out = shuffle(items, random.Random(3))
    assert Counter(out) == Counter(items)


def test_shuffle_does_not_mutate_input():
    items = ["A", "B", "C"]
    shuffle(items, random.Random(1))
    assert items == ["A", "B", "C"]


def test_shuffle_returns_new_list():
    items = ["A"]
    out = shuffle(items)
    assert out == ["A"]
    assert out is not items


def test_shuffle_empty():
    assert shuffle([]) == []


def test_shuffle_seeded_is_reproducible():
    items = list("ABCDEFGH")
    assert shuffle(items, random.Random(42)) == shuffle(items, random.Random(42))


def test_shuffle_walks_from_last_index_down():
    """i=2 swaps with 0 -> [c, b, a]; i=1 swaps with 0 -> [b, c, a]."""
    assert shuffle(["a", "b", "c"], _LowestRNG()) == ["b", "c", "a"]


def test_shuffle_positions_roughly_uniform():
    items = ["A", "B", "C", "D", "E"]
    rng = random.Random(1234)
    trials = 20000
    counts = {item: Counter() for item in items}
    for _ in range(trials):
        for pos, item in enumerate(shuffle(items, rng)):
            counts[item][pos] += 1
    expected = trials / len(items)
    for item in items:
        for pos in range(len(items)):
            assert abs(counts[item][pos] - expected) < expected * 0.15
