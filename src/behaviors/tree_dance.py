"""Oscillates a fractal tree's shape around its configured base values.

Each attribute has its own amplitude, frequency and enable flag. Enabled
attributes follow ``base + amplitude * sin(frequency * elapsed)``; disabled
ones are written back to their base value, so switching a dance off
restores the configured tree. The base values live here, never on the tree.

Switching RANDOMNESS off forces the tree's random range to 0, which makes
the tree symmetric regardless of its configured range.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from behaviors.base import Behavior
from shapes.fractal_tree import FractalTree

logger = logging.getLogger(__name__)


class DanceAttribute(Enum):
    SPLIT_ANGLE = "split_angle"
    DEPTH = "depth"
    LENGTH = "length"
    RANDOMNESS = "randomness"


@dataclass
class Oscillation:
    amplitude: float = 0.0
    frequency: float = 1.0
    enabled: bool = True

    def value(self, base: float, elapsed: float) -> float:
        if not self.enabled:
            return base
        return base + self.amplitude * math.sin(self.frequency * elapsed)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class TreeDanceBehavior(Behavior):
    requires = FractalTree

    def __init__(
        self,
        target: FractalTree,
        *,
        split_angle: Optional[Oscillation] = None,
        depth: Optional[Oscillation] = None,
        length: Optional[Oscillation] = None,
        randomness: Optional[Oscillation] = None,
    ) -> None:
        super().__init__(target)
        self.base_split_angle = target.split_angle
        self.base_depth = target.depth
        self.base_length = target.length
        self.base_random_range = target.random_range
        self.oscillations: Dict[DanceAttribute, Oscillation] = {
            DanceAttribute.SPLIT_ANGLE: split_angle or Oscillation(amplitude=10.0, frequency=1.0),
            DanceAttribute.DEPTH: depth or Oscillation(amplitude=0.0, frequency=0.5),
            DanceAttribute.LENGTH: length or Oscillation(amplitude=0.0, frequency=1.0),
            DanceAttribute.RANDOMNESS: randomness or Oscillation(amplitude=0.0, frequency=1.0),
        }

    def is_enabled(self, attribute: DanceAttribute) -> bool:
        return self.oscillations[attribute].enabled

    def toggle(self, attribute: Optional[DanceAttribute] = None) -> bool:
        """Flip one attribute's flag, or the whole behavior when no attribute is given."""
        if attribute is None:
            return super().toggle()
        osc = self.oscillations[attribute]
        osc.enabled = not osc.enabled
        logger.info("Tree dance %s %s", attribute.value, "on" if osc.enabled else "off")
        return osc.enabled

    def update(self, elapsed: float, delta: float) -> None:
        tree = self.target
        osc = self.oscillations
        tree.split_angle = osc[DanceAttribute.SPLIT_ANGLE].value(self.base_split_angle, elapsed)
        tree.length = max(0.0, osc[DanceAttribute.LENGTH].value(self.base_length, elapsed))
        depth = osc[DanceAttribute.DEPTH].value(float(self.base_depth), elapsed)
        tree.depth = max(0, round_half_up(depth))

        randomness = osc[DanceAttribute.RANDOMNESS]
        if randomness.enabled:
            tree.random_range = min(1.0, max(0.0, randomness.value(self.base_random_range, elapsed)))
        else:
            tree.random_range = 0.0


__all__ = ["DanceAttribute", "Oscillation", "TreeDanceBehavior", "round_half_up"]
