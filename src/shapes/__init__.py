"""Shapes package: the drawable entity variants.

Callers import the concrete shapes from here::

    from shapes import Circle, FractalTree
"""

from .base import Shape2D
from .point import Point
from .circle import Circle, RadialPerturbation
from .triangle import Triangle
from .sine_wave import SineWave
from .fractal_tree import Branch, FractalTree, generate, randomness_factor

__all__ = [
    "Shape2D",
    "Point",
    "Circle",
    "RadialPerturbation",
    "Triangle",
    "SineWave",
    "Branch",
    "FractalTree",
    "generate",
    "randomness_factor",
]
