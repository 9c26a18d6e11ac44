from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from core.drawable import Drawable
from core.errors import CapabilityError, SceneConfigError
from core.rng import RandomStream, new_stream

logger = logging.getLogger(__name__)


@dataclass
class Scene:
    """Registry of everything drawn and animated.

    ``drawables`` are painted in insertion order and ``behaviors`` updated in
    insertion order. Both lists are append-only for the life of the scene.
    Iteration runs over the length captured when a phase starts, so entries
    appended mid-phase (e.g. from an input callback) are picked up on the
    next frame without disturbing the one in flight.
    """

    # Shared stream for all unseeded randomness in this scene
    stream: RandomStream = field(default_factory=new_stream)
    drawables: List[object] = field(default_factory=list)
    behaviors: List[object] = field(default_factory=list)
    # Generic object so core does not depend on the world package
    player: Optional[object] = None

    def add(self, drawable):
        if not isinstance(drawable, Drawable):
            raise CapabilityError(f"{type(drawable).__name__} is not drawable")
        self.drawables.append(drawable)
        logger.debug("Added %s (%d drawables)", type(drawable).__name__, len(self.drawables))
        return drawable

    def attach(self, behavior):
        target = getattr(behavior, "target", None)
        if not callable(getattr(behavior, "update", None)):
            raise CapabilityError(f"{type(behavior).__name__} has no update()")
        # A behavior must not outlive its target: only registered entities qualify
        if not any(d is target for d in self.drawables):
            raise SceneConfigError(
                f"{type(behavior).__name__} target is not registered in the scene"
            )
        self.behaviors.append(behavior)
        return behavior

    def update_behaviors(self, elapsed: float, delta: float) -> None:
        count = len(self.behaviors)
        for i in range(count):
            behavior = self.behaviors[i]
            if getattr(behavior, "enabled", True):
                behavior.update(elapsed, delta)

    def update_player(self, delta: float) -> None:
        if self.player is not None:
            self.player.update(delta)

    def draw(self, renderer) -> None:
        count = len(self.drawables)
        for i in range(count):
            self.drawables[i].draw(renderer)
        # Player avatar always on top
        if self.player is not None:
            self.player.draw(renderer)

    def behaviors_of(self, kind: type) -> list:
        return [b for b in self.behaviors if isinstance(b, kind)]
