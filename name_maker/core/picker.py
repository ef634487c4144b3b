"""Randomness sources for uniform index selection.

The generator never calls the ``random`` module directly; it asks an
``IndexPicker`` for indices. Tests substitute seeded or fixed-sequence
pickers to make draws reproducible.
"""

from __future__ import annotations

import random
import threading
from typing import Protocol, runtime_checkable


@runtime_checkable
class IndexPicker(Protocol):
    """Uniform selection over ``range(n)`` plus a fair coin."""

    def pick(self, n: int) -> int: ...

    def coin(self) -> bool: ...


class RandomPicker:
    """Default picker backed by a ``random.Random`` instance.

    Draws are serialized through a lock so one picker can be shared by
    generators used from several threads.
    """

    def __init__(self, seed: int | None = None, rng: random.Random | None = None):
        self._rng = rng if rng is not None else random.Random(seed)
        self._lock = threading.Lock()

    def pick(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"Cannot pick an index from an empty range (n={n})")
        with self._lock:
            return self._rng.randrange(n)

    def coin(self) -> bool:
        with self._lock:
            return self._rng.random() < 0.5
