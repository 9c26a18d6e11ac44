"""Screen/world coordinate helpers.

World space has its origin at the centre of the window with Y pointing up;
pygame reports pointer positions with the origin top-left and Y down.
"""

from __future__ import annotations

import math
from typing import Tuple


def screen_to_world(screen_x: float, screen_y: float, width: float, height: float) -> Tuple[float, float]:
    world_x = screen_x - width / 2.0
    world_y = (height - screen_y) - height / 2.0
    return world_x, world_y


def world_to_screen(world_x: float, world_y: float, width: float, height: float) -> Tuple[float, float]:
    return world_x + width / 2.0, height - (world_y + height / 2.0)


def aim_angle(origin, target) -> float:
    """Angle in degrees of the vector origin -> target (atan2 convention)."""
    dx = target[0] - origin[0]
    dy = target[1] - origin[1]
    return math.degrees(math.atan2(dy, dx))


__all__ = ["screen_to_world", "world_to_screen", "aim_angle"]
