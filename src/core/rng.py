"""Seedable random stream shared by the scene.

All "unseeded" randomness (spawn colours, size and speed jitter) is drawn
from one stream owned by the scene. Recursive generators borrow it through
``with_seed`` which reseeds, runs the callback and then restores the saved
state, so the shared sequence is unaffected by how much seeded work ran in
between.
"""

from __future__ import annotations

import random
from contextlib import contextmanager
from typing import Callable, Iterator, Optional, TypeVar

T = TypeVar("T")

# Upper bound of next_int(), matches the classic C rand() range
RAND_MAX = 32767


class RandomStream(random.Random):
    """Seeded RNG with save/restore helpers for deterministic branching."""

    def next_int(self) -> int:
        return self.randint(0, RAND_MAX)

    def next_in_range(self, lo: int, hi: int) -> int:
        """Integer in the inclusive range [lo, hi]."""
        if hi < lo:
            raise ValueError(f"empty range [{lo}, {hi}]")
        return self.randint(lo, hi)

    @contextmanager
    def seeded(self, seed: int) -> Iterator["RandomStream"]:
        state = self.getstate()
        self.seed(seed)
        try:
            yield self
        finally:
            self.setstate(state)

    def with_seed(self, seed: int, fn: Callable[["RandomStream"], T]) -> T:
        """Run ``fn`` on this stream reseeded to ``seed``; restore afterwards.

        ``fn`` may reseed further (nested ``with_seed`` calls); the state
        seen by the caller after return is identical to the state before.
        """
        with self.seeded(seed) as stream:
            return fn(stream)


def new_stream(seed: Optional[int] = None) -> RandomStream:
    stream = RandomStream()
    stream.seed(seed)
    return stream


__all__ = ["RAND_MAX", "RandomStream", "new_stream"]
