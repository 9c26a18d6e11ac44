"""Steps a movable target through a fixed list of waypoints.

Two states, Running and Paused, switched with ``toggle()``. While running
the frame delta accumulates; once it exceeds ``move_delay`` the cursor
advances (wrapping) and ``move_delay`` is subtracted, keeping the
fractional overshoot. Paused freezes everything, accumulator included.
A ``move_delay`` of 0 steps once per update call.
"""

from __future__ import annotations

import logging
from typing import Sequence, Tuple

from behaviors.base import Behavior
from core.drawable import Movable
from core.errors import SceneConfigError

logger = logging.getLogger(__name__)


class PathFollowingBehavior(Behavior):
    requires = Movable

    def __init__(self, target, waypoints: Sequence[Tuple[float, float]], move_delay: float = 0.0) -> None:
        if not waypoints:
            raise SceneConfigError("A path needs at least one waypoint.")
        if move_delay < 0:
            raise SceneConfigError(f"Move delay must not be negative, got {move_delay}")
        super().__init__(target)
        self.waypoints = tuple((float(x), float(y)) for x, y in waypoints)
        self.move_delay = float(move_delay)
        self.cursor = 0
        self.accumulator = 0.0
        self.running = True
        self.target.move_to(self.waypoints[0])

    def toggle(self) -> bool:
        self.running = not self.running
        logger.debug("Path follower %s", "running" if self.running else "paused")
        return self.running

    def step(self) -> None:
        self.cursor = (self.cursor + 1) % len(self.waypoints)
        self.target.move_to(self.waypoints[self.cursor])

    def update(self, elapsed: float, delta: float) -> None:
        if not self.running:
            return
        if self.move_delay == 0:
            self.step()
            return
        self.accumulator += delta
        if self.accumulator > self.move_delay:
            self.step()
            self.accumulator -= self.move_delay


__all__ = ["PathFollowingBehavior"]
