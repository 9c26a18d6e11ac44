"""Playground scene: the initial population plus the input surface.

The engine translates raw pygame events into the ``on_*`` hooks below; the
hooks only append to the scene or change player state, never reorder or
remove anything.
"""

from __future__ import annotations

import logging
import time
from typing import Optional

from config import (
    DEFAULT_SEED,
    DEMO_MARKERS,
    DEMO_SINE_WAVES,
    DEMO_TREE_COUNT,
    HEIGHT,
    WIDTH,
)
from behaviors import DanceAttribute, PathFollowingBehavior, SineWaveBehavior, TreeDanceBehavior
from core.errors import SceneConfigError
from core.rng import new_stream
from core.scene import Scene
from shapes import RadialPerturbation
from world.player import Direction, Player
from world.spawner import Spawner

logger = logging.getLogger(__name__)


class PlaygroundScene(Scene):
    def __init__(
        self,
        *,
        width: int = WIDTH,
        height: int = HEIGHT,
        seed: Optional[int] = DEFAULT_SEED,
        tree_count: int = DEMO_TREE_COUNT,
        sine_waves: int = DEMO_SINE_WAVES,
        markers: int = DEMO_MARKERS,
        populate: bool = True,
    ) -> None:
        super().__init__(stream=new_stream(seed))
        for name, count in (("tree", tree_count), ("sine wave", sine_waves), ("marker", markers)):
            if count < 0:
                raise SceneConfigError(f"{name} count must not be negative, got {count}")
        self.width = width
        self.height = height
        self.spawner = Spawner(self)
        self.player = Player((0.0, -height * 0.25))

        if populate:
            start_time = time.perf_counter()
            self._create_world_objects(tree_count, sine_waves, markers)
            logger.info(
                "Playground ready: %d drawables, %d behaviors (%.3fs)",
                len(self.drawables), len(self.behaviors), time.perf_counter() - start_time,
            )

    def _create_world_objects(self, tree_count: int, sine_waves: int, markers: int) -> None:
        half_w = self.width / 2.0
        half_h = self.height / 2.0

        # Trees stand along the bottom edge, evenly spaced
        for i in range(tree_count):
            x = -half_w + self.width * (i + 1) / (tree_count + 1)
            self.spawner.spawn_tree((x, -half_h + 10.0))

        for i in range(sine_waves):
            y = half_h * 0.75 - i * 40.0
            rate = 3.0 if i % 2 == 0 else -3.0
            self.spawner.spawn_sine_wave((-half_w * 0.8, y), length=self.width * 0.8, shift_rate=rate)

        # Pulsing/rotating showcase polygons
        self.spawner.spawn_circle(
            (-half_w * 0.5, half_h * 0.15), radius=30, perturbation=RadialPerturbation.QUANTIZED_SINE
        )
        self.spawner.spawn_triangle((half_w * 0.5, half_h * 0.15), size=25)

        # Markers walk squares of growing size around the centre
        for i in range(markers):
            r = 60.0 + 40.0 * i
            path = [(-r, -r), (r, -r), (r, r), (-r, r)]
            self.spawner.spawn_marker(path, move_delay=0.5 + 0.25 * i)

    # --------------------------------------------------------------- input
    def on_click(self, world_position) -> None:
        self.spawner.spawn_at(world_position)

    def on_key_down(self, direction: Direction) -> None:
        self.player.on_key_down(direction)

    def on_key_up(self, direction: Direction) -> None:
        self.player.on_key_up(direction)

    def on_pointer_move(self, world_position) -> None:
        self.player.on_pointer_move(world_position)

    # ------------------------------------------------------------- toggles
    def toggle_dance(self, attribute: DanceAttribute) -> None:
        for dance in self.behaviors_of(TreeDanceBehavior):
            dance.toggle(attribute)

    def toggle_paths(self) -> None:
        for path in self.behaviors_of(PathFollowingBehavior):
            path.toggle()

    def reverse_waves(self) -> None:
        for wave in self.behaviors_of(SineWaveBehavior):
            wave.reverse()


__all__ = ["PlaygroundScene"]
