"""Per-frame ordering of clock, behaviors, player movement and redraw."""

from __future__ import annotations

from typing import Callable, Optional

from core.clock import Clock


class FrameScheduler:
    """Runs one frame in a fixed order.

    1. ``clock.tick()``
    2. every behavior in insertion order, ``update(elapsed, delta)``
    3. player translation by ``speed * delta``
    4. redraw request (drawables in insertion order, then the player)

    Input callbacks run between frames and only append to the scene or
    mutate player state.
    """

    def __init__(self, clock: Clock, scene, redraw: Optional[Callable[[], None]] = None) -> None:
        self.clock = clock
        self.scene = scene
        self.redraw = redraw

    def run_frame(self) -> float:
        delta = self.clock.tick()
        elapsed = self.clock.elapsed()
        self.scene.update_behaviors(elapsed, delta)
        self.scene.update_player(delta)
        if self.redraw is not None:
            self.redraw()
        return delta


__all__ = ["FrameScheduler"]
