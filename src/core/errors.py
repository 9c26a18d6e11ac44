"""Exceptions raised while wiring a scene together.

Both are raised at construction/attach time so a bad configuration never
reaches the frame loop.
"""


class SceneConfigError(ValueError):
    """An entity or behavior was configured with degenerate parameters."""


class CapabilityError(TypeError):
    """A behavior was attached to an entity lacking a required capability."""


__all__ = ["SceneConfigError", "CapabilityError"]
