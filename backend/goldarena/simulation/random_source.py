"""Injectable random source for the simulations."""

import random
from typing import Protocol


class RandomSource(Protocol):
    """Subset of random.Random used by the simulations."""

    def random(self) -> float: ...

    def randrange(self, start: int, stop: int) -> int: ...


def create_random_source(seed: int | None = None) -> RandomSource:
    """Create a random source, seeded when a seed is given."""
    return random.Random(seed)
