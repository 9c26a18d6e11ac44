from __future__ import annotations

from typing import List, Tuple

import numpy as np

from config import DEFAULT_LINE_WIDTH, MIN_PRECISION, SINE_UNITS_PER_SAMPLE
from core.errors import SceneConfigError
from shapes.base import Shape2D


class SineWave(Shape2D):
    """A sine ribbon anchored at ``position`` running ``length`` units along +X.

    ``frequency`` is in radians per world unit; ``phase_shift`` is advanced
    by ``SineWaveBehavior`` to make the ribbon travel.
    """

    def __init__(
        self,
        position=None,
        length: float = 200.0,
        amplitude: float = 20.0,
        frequency: float = 0.05,
        phase_shift: float = 0.0,
        color=(0.0, 0.0, 0.0),
        width: float = 2.0,
    ):
        super().__init__(position)
        if length <= 0:
            raise SceneConfigError(f"Sine wave length must be positive, got {length}")
        self.length = float(length)
        self.amplitude = float(amplitude)
        self.frequency = float(frequency)
        self.phase_shift = float(phase_shift)
        self.color = tuple(color)
        self.width = float(width)

    @property
    def samples(self) -> int:
        return max(MIN_PRECISION, int(self.length / SINE_UNITS_PER_SAMPLE) + 1)

    def local_vertices(self) -> List[Tuple[float, float]]:
        xs = np.linspace(0.0, self.length, self.samples)
        ys = self.amplitude * np.sin(self.frequency * xs + self.phase_shift)
        return list(zip(xs.tolist(), ys.tolist()))

    def draw(self, renderer) -> None:
        verts = self.local_vertices()
        with renderer.transform():
            renderer.translate(self.position.x, self.position.y)
            renderer.set_color(self.color)
            renderer.set_line_width(self.width)
            renderer.line_strip(verts)
            renderer.set_line_width(DEFAULT_LINE_WIDTH)


__all__ = ["SineWave"]
