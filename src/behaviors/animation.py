"""Simple continuous animations.

Rotate and SineWave integrate a constant rate over ``delta``; Scale is a
pure function of the absolute elapsed time and keeps no state between
frames.
"""

from __future__ import annotations

import math

from behaviors.base import Behavior
from core.drawable import Rotatable, Scalable
from shapes.sine_wave import SineWave


class RotateBehavior(Behavior):
    requires = Rotatable

    def __init__(self, target, rotate_speed: float) -> None:
        super().__init__(target)
        self.rotate_speed = float(rotate_speed)  # degrees per second

    def update(self, elapsed: float, delta: float) -> None:
        self.target.angle += self.rotate_speed * delta


class ScaleBehavior(Behavior):
    requires = Scalable

    def __init__(
        self,
        target,
        *,
        base_scale: float = 1.0,
        dance_amplitude: float = 0.2,
        dance_frequency: float = 1.0,
    ) -> None:
        super().__init__(target)
        self.base_scale = float(base_scale)
        self.dance_amplitude = float(dance_amplitude)
        self.dance_frequency = float(dance_frequency)

    def scale_at(self, elapsed: float) -> float:
        return self.base_scale + self.dance_amplitude * math.sin(self.dance_frequency * elapsed)

    def update(self, elapsed: float, delta: float) -> None:
        self.target.scale = self.scale_at(elapsed)


class SineWaveBehavior(Behavior):
    requires = SineWave

    def __init__(self, target, shift_rate: float) -> None:
        super().__init__(target)
        self.shift_rate = float(shift_rate)  # radians per second

    def reverse(self) -> None:
        self.shift_rate = -self.shift_rate

    def update(self, elapsed: float, delta: float) -> None:
        self.target.phase_shift += self.shift_rate * delta


__all__ = ["RotateBehavior", "ScaleBehavior", "SineWaveBehavior"]
