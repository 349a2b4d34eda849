"""
Random source abstraction shared by every stochastic engine component.

``random.Random`` already satisfies the protocol, so tests and callers pass a
seeded instance; nothing in the engine touches the module-level generator.
"""
import random
from typing import Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    def random(self) -> float: ...

    def uniform(self, a: float, b: float) -> float: ...

    def randint(self, a: int, b: int) -> int: ...

    def choice(self, seq: Sequence[T]) -> T: ...


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Build an independent generator, seeded when a seed is given"""
    return random.Random(seed)
