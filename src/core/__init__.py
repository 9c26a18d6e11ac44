"""Engine core: clock, random stream, capabilities, scene registry and scheduling.

The OpenGL backend (``core.renderer``) and the window loop (``core.engine``)
are not re-exported so headless code can import the core without a GL
context.
"""

from .clock import Clock, ManualTime
from .drawable import Drawable, Movable, Rotatable, Scalable, require_capability
from .errors import CapabilityError, SceneConfigError
from .rng import RandomStream, new_stream
from .scene import Scene
from .scheduler import FrameScheduler

__all__ = [
    "Clock",
    "ManualTime",
    "Drawable",
    "Movable",
    "Rotatable",
    "Scalable",
    "require_capability",
    "CapabilityError",
    "SceneConfigError",
    "RandomStream",
    "new_stream",
    "Scene",
    "FrameScheduler",
]
