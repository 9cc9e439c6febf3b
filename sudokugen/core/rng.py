"""Single source of randomness for the generator and searches."""

from __future__ import annotations
import random
from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")


class RandomSource:
    """
    Wraps a private ``random.Random`` instance.

    Every randomized decision (value ordering, pre-seeding, carving order,
    hint choice) goes through one of these, so a seed reproduces a run
    and two generators never share state.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._random = random.Random(seed)

    def shuffled(self, items: Sequence[T]) -> List[T]:
        """Return a shuffled copy of items."""
        result = list(items)
        self._random.shuffle(result)
        return result

    def randrange(self, stop: int) -> int:
        """Random int in [0, stop)."""
        return self._random.randrange(stop)

    def choice(self, items: Sequence[T]) -> T:
        return self._random.choice(items)


def ensure_rng(rng: Optional[RandomSource]) -> RandomSource:
    """Use the given source or create an unseeded one."""
    return rng if rng is not None else RandomSource()
