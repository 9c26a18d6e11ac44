"""Circle entity with optional radial perturbation.

The outline is sampled at ``precision`` angles. A perturbation function
multiplies the radius per angle, turning the circle into a wobbling blob
(sinusoidal) or a stepped star (quantized sinusoidal).
"""

from __future__ import annotations

import math
from enum import Enum
from typing import List, Optional, Tuple

import numpy as np

from config import CIRCLE_UNITS_PER_VERTEX, DEFAULT_LINE_WIDTH, MIN_PRECISION
from core.errors import SceneConfigError
from shapes.base import Shape2D


class RadialPerturbation(Enum):
    NONE = "none"
    SINE = "sine"
    QUANTIZED_SINE = "quantized_sine"


def derived_precision(radius: float) -> int:
    """Vertex count for a circle of ``radius``, never below MIN_PRECISION."""
    return max(MIN_PRECISION, int(2.0 * math.pi * radius / CIRCLE_UNITS_PER_VERTEX))


class Circle(Shape2D):
    def __init__(
        self,
        position=None,
        radius: float = 20.0,
        *,
        angle: float = 0.0,
        scale: float = 1.0,
        color=(0.0, 0.0, 0.0),
        perturbation: RadialPerturbation = RadialPerturbation.NONE,
        perturb_amplitude: float = 0.2,
        perturb_lobes: int = 6,
        perturb_steps: int = 3,
        precision: Optional[int] = None,
        filled: bool = True,
        width: float = DEFAULT_LINE_WIDTH,
    ):
        super().__init__(position)
        if radius <= 0:
            raise SceneConfigError(f"Circle radius must be positive, got {radius}")
        if precision is not None and precision < MIN_PRECISION:
            raise SceneConfigError(
                f"Circle precision must be at least {MIN_PRECISION}, got {precision}"
            )
        if perturb_steps < 1:
            raise SceneConfigError("Quantized perturbation needs at least one step.")
        self.radius = float(radius)
        self.angle = float(angle)
        self.scale = float(scale)
        self.color = tuple(color)
        self.perturbation = perturbation
        self.perturb_amplitude = float(perturb_amplitude)
        self.perturb_lobes = int(perturb_lobes)
        self.perturb_steps = int(perturb_steps)
        self.fixed_precision = precision
        self.filled = filled
        self.width = float(width)

    @property
    def precision(self) -> int:
        if self.fixed_precision is not None:
            return self.fixed_precision
        return derived_precision(self.radius)

    def radial_multiplier(self, theta: np.ndarray) -> np.ndarray:
        if self.perturbation is RadialPerturbation.NONE:
            return np.ones_like(theta)
        wave = np.sin(self.perturb_lobes * theta)
        if self.perturbation is RadialPerturbation.QUANTIZED_SINE:
            wave = np.round(wave * self.perturb_steps) / self.perturb_steps
        return 1.0 + self.perturb_amplitude * wave

    def local_vertices(self) -> List[Tuple[float, float]]:
        theta = np.linspace(0.0, 2.0 * math.pi, self.precision, endpoint=False)
        r = self.radius * self.radial_multiplier(theta)
        xs = r * np.cos(theta)
        ys = r * np.sin(theta)
        return list(zip(xs.tolist(), ys.tolist()))

    def draw(self, renderer) -> None:
        verts = self.local_vertices()
        with renderer.transform():
            renderer.translate(self.position.x, self.position.y)
            renderer.rotate(self.angle)
            renderer.scale(self.scale, self.scale)
            renderer.set_color(self.color)
            if self.filled:
                renderer.polygon(verts)
            else:
                renderer.set_line_width(self.width)
                renderer.line_loop(verts)


__all__ = ["Circle", "RadialPerturbation", "derived_precision"]
