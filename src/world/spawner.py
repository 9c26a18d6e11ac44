"""Spawn helpers that populate a scene with animated shapes.

All jitter (colour, radius, rotation speed, tree seeds) is drawn from the
scene's shared stream, so a scene built from the same seed spawns the same
shapes no matter how many frames or tree draws happened in between.

Each helper registers the entity first and then attaches its behaviors,
so behaviors always reference an entity already owned by the scene.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple

from config import (
    SPAWN_COLORS,
    SPAWN_RADIUS,
    SPAWN_ROTATE_SPEED,
    SPAWN_SCALE_AMPLITUDE,
    SPAWN_SCALE_FREQUENCY,
    TREE_COLORS,
)
from behaviors import (
    PathFollowingBehavior,
    RotateBehavior,
    ScaleBehavior,
    SineWaveBehavior,
    TreeDanceBehavior,
)
from core.errors import SceneConfigError
from shapes import Circle, FractalTree, Point, RadialPerturbation, SineWave, Triangle

logger = logging.getLogger(__name__)

_PERTURBATIONS = list(RadialPerturbation)


class Spawner:
    def __init__(self, scene) -> None:
        self.scene = scene
        self.stream = scene.stream
        self._spawned = 0

    # ------------------------------------------------------------ jitter
    def _color(self, palette=SPAWN_COLORS):
        return palette[self.stream.next_in_range(0, len(palette) - 1)]

    def _rotate_speed(self) -> float:
        speed = self.stream.next_in_range(*SPAWN_ROTATE_SPEED)
        return float(speed if self.stream.next_in_range(0, 1) else -speed)

    # ------------------------------------------------------------ shapes
    def spawn_at(self, position):
        """Click spawn: alternate pulsing circles and spinning triangles."""
        self._spawned += 1
        if self._spawned % 2:
            return self.spawn_circle(position)
        return self.spawn_triangle(position)

    def spawn_circle(
        self,
        position,
        *,
        radius: Optional[float] = None,
        rotate_speed: Optional[float] = None,
        perturbation: Optional[RadialPerturbation] = None,
        pulse: bool = True,
    ) -> Circle:
        if radius is None:
            radius = self.stream.next_in_range(*SPAWN_RADIUS)
        if perturbation is None:
            perturbation = _PERTURBATIONS[self.stream.next_in_range(0, len(_PERTURBATIONS) - 1)]
        if rotate_speed is None:
            rotate_speed = self._rotate_speed()
        circle = Circle(
            position,
            radius,
            color=self._color(),
            perturbation=perturbation,
            perturb_lobes=self.stream.next_in_range(3, 8),
        )
        self.scene.add(circle)
        self.scene.attach(RotateBehavior(circle, rotate_speed))
        if pulse:
            self.scene.attach(
                ScaleBehavior(
                    circle,
                    base_scale=1.0,
                    dance_amplitude=SPAWN_SCALE_AMPLITUDE,
                    dance_frequency=SPAWN_SCALE_FREQUENCY,
                )
            )
        logger.debug("Spawned circle r=%.1f at (%.1f, %.1f)", radius, position[0], position[1])
        return circle

    def spawn_triangle(self, position, *, size: Optional[float] = None, rotate_speed: Optional[float] = None) -> Triangle:
        if size is None:
            size = self.stream.next_in_range(*SPAWN_RADIUS)
        if rotate_speed is None:
            rotate_speed = self._rotate_speed()
        offsets = [(-size, -size * 0.6), (size, -size * 0.6), (0.0, size)]
        triangle = Triangle(
            position,
            [(o, self._color()) for o in offsets],
            pivot_centroid=True,
        )
        self.scene.add(triangle)
        self.scene.attach(RotateBehavior(triangle, rotate_speed))
        logger.debug("Spawned triangle size=%.1f at (%.1f, %.1f)", size, position[0], position[1])
        return triangle

    def spawn_tree(self, position, *, seed: Optional[int] = None, dance: bool = True, **params) -> FractalTree:
        if seed is None:
            seed = self.stream.next_int()
        tree = FractalTree(position, seed=seed, stream=self.stream, palette=TREE_COLORS, **params)
        self.scene.add(tree)
        if dance:
            self.scene.attach(TreeDanceBehavior(tree))
        logger.debug("Spawned tree seed=%d depth=%d", seed, tree.depth)
        return tree

    def spawn_sine_wave(self, position, *, length: float = 200.0, amplitude: float = 20.0,
                        frequency: float = 0.05, shift_rate: float = 3.0) -> SineWave:
        wave = SineWave(position, length, amplitude, frequency, color=self._color())
        self.scene.add(wave)
        self.scene.attach(SineWaveBehavior(wave, shift_rate))
        return wave

    def spawn_marker(self, waypoints: Sequence[Tuple[float, float]], *, move_delay: float = 0.5,
                     size: float = 8.0) -> Point:
        if not waypoints:
            raise SceneConfigError("A marker needs at least one waypoint.")
        marker = Point(waypoints[0], size=size, color=self._color())
        self.scene.add(marker)
        self.scene.attach(PathFollowingBehavior(marker, waypoints, move_delay))
        return marker


__all__ = ["Spawner"]
