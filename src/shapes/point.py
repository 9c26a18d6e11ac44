from __future__ import annotations

from config import DEFAULT_POINT_SIZE
from core.errors import SceneConfigError
from shapes.base import Shape2D


class Point(Shape2D):
    """A single dot; the marker shape moved along waypoint paths."""

    def __init__(self, position=None, size: float = 6.0, color=(0.0, 0.0, 0.0)):
        super().__init__(position)
        if size <= 0:
            raise SceneConfigError("A point must have a positive size.")
        self.size = float(size)
        self.color = tuple(color)

    def draw(self, renderer) -> None:
        renderer.set_color(self.color)
        renderer.set_point_size(self.size)
        renderer.points([(self.position.x, self.position.y)])
        renderer.set_point_size(DEFAULT_POINT_SIZE)
