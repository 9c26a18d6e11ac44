from __future__ import annotations

from pygame.math import Vector2


class Shape2D:
    """Common base for scene entities: a world position that can be moved."""

    def __init__(self, position=None):
        self.position = Vector2(position) if position is not None else Vector2(0, 0)

    def move_to(self, position) -> None:
        self.position.update(position[0], position[1])

    def translate(self, dx: float, dy: float) -> None:
        self.position.x += dx
        self.position.y += dy
