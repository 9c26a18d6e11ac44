from __future__ import annotations

from typing import Optional, Sequence, Tuple

from config import DEFAULT_LINE_WIDTH
from core.errors import SceneConfigError
from shapes.base import Shape2D

Vertex = Tuple[float, float]
Color = Tuple[float, float, float]


class Triangle(Shape2D):
    """Three (offset, colour) vertices drawn around ``position``.

    With ``pivot_centroid`` the rotation and scale happen around the
    centroid of the offsets instead of the local origin. The centroid is
    computed on first use and cached; later vertex edits do not move it.
    """

    def __init__(
        self,
        position=None,
        vertices: Sequence[Tuple[Vertex, Color]] = (),
        *,
        angle: float = 0.0,
        scale: float = 1.0,
        pivot_centroid: bool = False,
        filled: bool = True,
        width: float = DEFAULT_LINE_WIDTH,
    ):
        super().__init__(position)
        if len(vertices) != 3:
            raise SceneConfigError(
                f"A triangle needs exactly 3 vertices, got {len(vertices)}"
            )
        self.vertices = [(tuple(offset), tuple(color)) for offset, color in vertices]
        self.angle = float(angle)
        self.scale = float(scale)
        self.pivot_centroid = pivot_centroid
        self.filled = filled
        self.width = float(width)
        self._centroid: Optional[Vertex] = None

    @classmethod
    def uniform(cls, position, offsets: Sequence[Vertex], color: Color, **kwargs) -> "Triangle":
        return cls(position, [(o, color) for o in offsets], **kwargs)

    @property
    def centroid(self) -> Vertex:
        if self._centroid is None:
            xs = [o[0] for o, _ in self.vertices]
            ys = [o[1] for o, _ in self.vertices]
            self._centroid = (sum(xs) / 3.0, sum(ys) / 3.0)
        return self._centroid

    @property
    def pivot(self) -> Vertex:
        return self.centroid if self.pivot_centroid else (0.0, 0.0)

    def draw(self, renderer) -> None:
        offsets = [o for o, _ in self.vertices]
        colors = [c for _, c in self.vertices]
        px, py = self.pivot
        with renderer.transform():
            renderer.translate(self.position.x + px, self.position.y + py)
            renderer.rotate(self.angle)
            renderer.scale(self.scale, self.scale)
            renderer.translate(-px, -py)
            renderer.set_color(colors[0])
            if self.filled:
                renderer.polygon(offsets, colors)
            else:
                renderer.set_line_width(self.width)
                renderer.line_loop(offsets)


__all__ = ["Triangle"]
