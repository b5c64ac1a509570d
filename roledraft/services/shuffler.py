"""
Random draw order for a lobby.
The draw order is the only source of randomness in a draft: whoever is drawn first wins a contested role.
"""
from __future__ import annotations

import random
from typing import Sequence, TypeVar

T = TypeVar("T")


def shuffle(items: Sequence[T], rng: random.Random | None = None) -> list[T]:
    """
    Return a uniformly shuffled copy of items (Fisher–Yates). The input is not mutated.
    Pass a seeded random.Random for a reproducible draw.
    """
    randint = rng.randint if rng is not None else random.randint
    result = list(items)
    # Walk from the last index down to 1; swap with any index at or before it.
    for i in range(len(result) - 1, 0, -1):
        j = randint(0, i)
        result[i], result[j] = result[j], result[i]
    return result
