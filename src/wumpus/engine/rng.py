"""Source of randomness for the engine.

All nondeterminism in a game comes through a ``RandomSource``. A plain
``random.Random`` satisfies the protocol, and tests substitute scripted draws.
"""

import random
from typing import Protocol


class RandomSource(Protocol):
    """Uniform integer generator."""

    def randrange(self, stop: int) -> int:
        """Return a uniform integer in ``[0, stop)``."""
        ...


def make_rng(seed: int | None = None) -> random.Random:
    """Create the default random source, optionally seeded for replay."""
    return random.Random(seed)
