"""Frame clock: elapsed time since start and delta since the previous tick."""

from __future__ import annotations

import time
from typing import Callable


class Clock:
    """Time source read once per frame.

    ``tick()`` samples the time function; ``elapsed()`` and ``delta()`` are
    pure reads until the next tick. The very first tick reports a delta of
    zero so the first animated frame does not jump by the start-up time.
    """

    def __init__(self, time_fn: Callable[[], float] = time.perf_counter) -> None:
        self._time_fn = time_fn
        self._start = float(time_fn())
        self._last: float | None = None
        self._elapsed = 0.0
        self._delta = 0.0
        self.frames = 0

    def tick(self) -> float:
        now = float(self._time_fn())
        self._delta = 0.0 if self._last is None else now - self._last
        self._elapsed = now - self._start
        self._last = now
        self.frames += 1
        return self._delta

    def elapsed(self) -> float:
        return self._elapsed

    def delta(self) -> float:
        return self._delta


class ManualTime:
    """Callable time source advanced by hand (headless runs, tests)."""

    def __init__(self, start: float = 0.0) -> None:
        self.now = float(start)

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def __call__(self) -> float:
        return self.now


__all__ = ["Clock", "ManualTime"]
