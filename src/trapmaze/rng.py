"""
Injectable random sources for level generation.

Every source exposes ``below(n)`` returning an int in ``[0, n)``; ``shuffle``
is the Fisher-Yates pass used for direction and candidate ordering, built on
top of ``below`` so that scripted sources drive it deterministically.
"""

import random
from dataclasses import dataclass, field
from typing import MutableSequence, Optional, Sequence, TypeVar

T = TypeVar("T")

A = 16807
M = 0x7FFFFFFF  # 2^31-1


def pm_next(state: int) -> int:
    return (state * A) % M


def shuffle(rng, items: MutableSequence[T]) -> None:
    """In-place Fisher-Yates shuffle driven by ``rng.below``."""
    for i in range(len(items) - 1, 0, -1):
        j = rng.below(i + 1)
        items[i], items[j] = items[j], items[i]


def _check_bound(n: int) -> None:
    if n <= 0:
        raise ValueError(f"bound must be positive, got {n}")


@dataclass
class PMRandom:
    """Park-Miller minimal standard generator; small, seedable and portable."""
    state: int

    def __post_init__(self) -> None:
        # 0 and multiples of M are fixed points of the recurrence.
        self.state %= M
        if self.state == 0:
            self.state = 1

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def below(self, n: int) -> int:
        _check_bound(n)
        return self.next32() % n

    def shuffle(self, items: MutableSequence[T]) -> None:
        shuffle(self, items)


@dataclass
class StdRandom:
    """Wraps the stdlib generator; the default when no source is injected."""
    seed: Optional[int] = None
    _r: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._r = random.Random(self.seed)

    def below(self, n: int) -> int:
        _check_bound(n)
        return self._r.randrange(n)

    def shuffle(self, items: MutableSequence[T]) -> None:
        shuffle(self, items)


@dataclass
class ScriptedRandom:
    """
    Replays a fixed sequence of draws, cycling when exhausted.
    Each value is reduced modulo the requested bound, so ``ScriptedRandom([0])``
    always picks the first option.
    """
    values: Sequence[int] = (0,)
    calls: int = 0

    def __post_init__(self) -> None:
        if not self.values:
            raise ValueError("ScriptedRandom needs at least one value")

    def below(self, n: int) -> int:
        _check_bound(n)
        v = self.values[self.calls % len(self.values)] % n
        self.calls += 1
        return v

    def shuffle(self, items: MutableSequence[T]) -> None:
        shuffle(self, items)


def make_rng(seed: Optional[int] = None):
    """Seeded sources are Park-Miller; unseeded ones fall back to the system generator."""
    if seed is None:
        return StdRandom()
    return PMRandom(seed)
