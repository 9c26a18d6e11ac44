"""World package: re-export common symbols for simpler imports.

Callers can import public types from `world` directly, e.g.:

    from world import PlaygroundScene, Player, Spawner

This file intentionally keeps the public surface small and stable while the
implementation files remain under `world/*.py`.
"""

from .player import Direction, Player
from .spawner import Spawner
from .playground import PlaygroundScene

__all__ = [
    "Direction",
    "Player",
    "Spawner",
    "PlaygroundScene",
]
