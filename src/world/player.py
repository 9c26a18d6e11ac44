"""Player avatar: keyboard-driven movement and pointer aiming."""

from __future__ import annotations

from enum import Enum
from typing import Set

from pygame.math import Vector2

from config import PLAYER_COLOR, PLAYER_SIZE, PLAYER_SPEED
from core.transforms import aim_angle
from shapes.triangle import Triangle


class Direction(Enum):
    UP = (0, 1)
    DOWN = (0, -1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


class Player:
    def __init__(self, position=(0.0, 0.0), *, speed: float = PLAYER_SPEED, size: float = PLAYER_SIZE, color=PLAYER_COLOR):
        self.position = Vector2(position)
        self.speed = float(speed)
        self.aim = 90.0  # degrees, atan2 convention
        self._held: Set[Direction] = set()
        # Local triangle points along +Y; rotated by aim - 90 when drawn
        self.avatar = Triangle.uniform(
            self.position,
            [(-size * 0.6, -size * 0.5), (size * 0.6, -size * 0.5), (0.0, size)],
            color,
            pivot_centroid=False,
        )

    # -------------------------------------------------------------- input
    def on_key_down(self, direction: Direction) -> None:
        self._held.add(direction)

    def on_key_up(self, direction: Direction) -> None:
        self._held.discard(direction)

    def on_pointer_move(self, world_position) -> None:
        self.aim = aim_angle(self.position, world_position)

    # ------------------------------------------------------------- update
    @property
    def velocity(self) -> Vector2:
        """Unit direction of the held keys (zero when none or opposing)."""
        v = Vector2(0, 0)
        for d in self._held:
            v += Vector2(d.value)
        if v.length_squared() > 0:
            v.normalize_ip()
        return v

    def update(self, delta: float) -> None:
        self.position += self.velocity * (self.speed * delta)

    def draw(self, renderer) -> None:
        self.avatar.move_to(self.position)
        self.avatar.angle = self.aim - 90.0
        self.avatar.draw(renderer)


__all__ = ["Direction", "Player"]
