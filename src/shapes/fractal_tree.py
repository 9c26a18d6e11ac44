"""Deterministic recursive fractal tree.

Each node emits one branch segment and then splits into two children. The
children's seeds are drawn from the shared stream reseeded with the node's
own seed (``RandomStream.with_seed``), so the branching pattern is a pure
function of the tree parameters and the root seed: redrawing the tree every
frame yields identical geometry and leaves the shared stream untouched.

The generator returns plain data (a list of ``Branch`` records in the
tree's frame) instead of issuing draw calls while recursing; the entity's
``draw`` walks that list and sets colour and line width per segment.

Per child the randomness factor ``r(s)`` maps the child seed into
``[1 - random_range, 1 + random_range]`` and scales the split angle, the
next length and the next width. ``random_range = 0`` gives a symmetric tree.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from config import (
    DEFAULT_LINE_WIDTH,
    TREE_COLORS,
    TREE_DEPTH,
    TREE_LENGTH,
    TREE_RANDOM_RANGE,
    TREE_SPLIT_ANGLE,
    TREE_SPLIT_DECAY,
    TREE_WIDTH,
)
from core.errors import SceneConfigError
from core.rng import RandomStream
from shapes.base import Shape2D

Vertex = Tuple[float, float]
Color = Tuple[float, float, float]


@dataclass(frozen=True)
class Branch:
    start: Vertex
    end: Vertex
    width: float
    color: Color
    depth: int


def randomness_factor(seed: int, random_range: float) -> float:
    """Deterministic multiplier in [1 - random_range, 1 + random_range]."""
    return (1.0 - random_range) + 2.0 * random_range * ((seed % 101) / 100.0)


def generate(
    length: float,
    depth: int,
    width: float,
    seed: int,
    *,
    split_angle: float,
    split_decay: float,
    random_range: float,
    stream: RandomStream,
    palette: Sequence[Color] = TREE_COLORS,
    origin: Vertex = (0.0, 0.0),
    heading: float = 90.0,
) -> List[Branch]:
    """Grow a tree and return its branches in paint order (parent before children).

    With the defaults the trunk runs from the local origin to ``(0, length)``.
    ``heading`` is in degrees, counter-clockwise from +X.
    """
    if not palette:
        raise SceneConfigError("Fractal tree palette is empty.")
    branches: List[Branch] = []

    def draw_child_seeds(local: RandomStream) -> Tuple[int, int]:
        return local.next_int(), local.next_int()

    def grow(x: float, y: float, angle: float, length: float, depth: int, width: float, seed: int) -> None:
        if depth <= 0:
            return
        rad = math.radians(angle)
        end = (x + length * math.cos(rad), y + length * math.sin(rad))
        branches.append(Branch((x, y), end, width, tuple(palette[seed % len(palette)]), depth))
        if depth == 1:
            return

        s1, s2 = stream.with_seed(seed, draw_child_seeds)
        r1 = randomness_factor(s1, random_range)
        r2 = randomness_factor(s2, random_range)
        grow(end[0], end[1], angle + split_angle * r1,
             length * split_decay * r1, depth - 1, width * split_decay * r1, s1)
        grow(end[0], end[1], angle - split_angle * r2,
             length * split_decay * r2, depth - 1, width * split_decay * r2, s2)

    grow(origin[0], origin[1], heading, length, int(depth), width, seed)
    return branches


class FractalTree(Shape2D):
    """Scene entity wrapping ``generate``.

    ``length``, ``depth``, ``split_angle`` and ``random_range`` are the
    *current* values; ``TreeDanceBehavior`` rewrites them every frame from
    the base values it keeps itself.
    """

    def __init__(
        self,
        position=None,
        *,
        heading: float = 90.0,
        depth: int = TREE_DEPTH,
        length: float = TREE_LENGTH,
        split_angle: float = TREE_SPLIT_ANGLE,
        split_decay: float = TREE_SPLIT_DECAY,
        width: float = TREE_WIDTH,
        random_range: float = TREE_RANDOM_RANGE,
        seed: int = 0,
        palette: Sequence[Color] = TREE_COLORS,
        stream: Optional[RandomStream] = None,
    ):
        super().__init__(position)
        if depth < 0:
            raise SceneConfigError(f"Tree depth must not be negative, got {depth}")
        if depth == 0 and length != 0:
            raise SceneConfigError("Tree with depth 0 cannot have a trunk length.")
        if length < 0:
            raise SceneConfigError(f"Tree length must not be negative, got {length}")
        if not 0.0 <= random_range <= 1.0:
            raise SceneConfigError(f"Tree random range must be in [0, 1], got {random_range}")
        if split_decay <= 0:
            raise SceneConfigError(f"Tree split decay must be positive, got {split_decay}")
        if not palette:
            raise SceneConfigError("Fractal tree palette is empty.")
        self.heading = float(heading)
        self.depth = int(depth)
        self.length = float(length)
        self.split_angle = float(split_angle)
        self.split_decay = float(split_decay)
        self.width = float(width)
        self.random_range = float(random_range)
        self.seed = int(seed)
        self.palette = [tuple(c) for c in palette]
        self.stream = stream if stream is not None else RandomStream()

    def segments(self) -> List[Branch]:
        return generate(
            self.length,
            self.depth,
            self.width,
            self.seed,
            split_angle=self.split_angle,
            split_decay=self.split_decay,
            random_range=self.random_range,
            stream=self.stream,
            palette=self.palette,
            origin=(self.position.x, self.position.y),
            heading=self.heading,
        )

    def draw(self, renderer) -> None:
        for branch in self.segments():
            renderer.set_line_width(branch.width)
            renderer.set_color(branch.color)
            renderer.lines([branch.start, branch.end])
        # Line width is shared GL state
        renderer.set_line_width(DEFAULT_LINE_WIDTH)


__all__ = ["Branch", "FractalTree", "generate", "randomness_factor"]
