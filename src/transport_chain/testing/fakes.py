"""Deterministic stand-ins for the random generator and the clock."""

import random
from collections.abc import Iterable, Sequence


class ScriptedRandom(random.Random):
    """``random.Random`` that returns scripted values before real ones.

    Each kind of draw has its own queue. Once a queue is empty the draw falls
    back to a generator seeded with ``seed``.

    Args:
        fractions: Values returned by ``random()``.
        integers: Values returned by ``randrange()``.
        choices: Indexes into the sequence passed to ``choice()``.
        seed: Seed for draws past the end of the script.
    """

    def __init__(
        self,
        *,
        fractions: Iterable[float] = (),
        integers: Iterable[int] = (),
        choices: Iterable[int] = (),
        seed: int = 0,
    ) -> None:
        super().__init__(seed)
        self._fractions = list(fractions)
        self._integers = list(integers)
        self._choices = list(choices)

    def random(self) -> float:
        if self._fractions:
            return self._fractions.pop(0)
        return super().random()

    def randrange(self, start, stop=None, step=1):
        if self._integers:
            return self._integers.pop(0)
        return super().randrange(start, stop, step)

    def choice(self, seq: Sequence):
        if self._choices:
            return seq[self._choices.pop(0)]
        return super().choice(seq)


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, now: float = 1_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds
