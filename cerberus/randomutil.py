"""Seeded pseudo-random integers."""

from __future__ import annotations

import random
import time

_rng = random.Random()


def random_init() -> None:
    """Seed the generator from the current time in whole seconds."""
    _rng.seed(int(time.time()))


def randint(low: int, high: int) -> int:
    """Return a random integer in ``[low, high)``."""
    return _rng.randrange(low, high)