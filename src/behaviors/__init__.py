"""Behaviors package: per-frame update units that animate entities.

    from behaviors import RotateBehavior, TreeDanceBehavior
"""

from .base import Behavior
from .animation import RotateBehavior, ScaleBehavior, SineWaveBehavior
from .tree_dance import DanceAttribute, Oscillation, TreeDanceBehavior
from .path_following import PathFollowingBehavior

__all__ = [
    "Behavior",
    "RotateBehavior",
    "ScaleBehavior",
    "SineWaveBehavior",
    "DanceAttribute",
    "Oscillation",
    "TreeDanceBehavior",
    "PathFollowingBehavior",
]
