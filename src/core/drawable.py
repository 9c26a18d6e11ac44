from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from core.errors import CapabilityError

if TYPE_CHECKING:
    from pygame.math import Vector2
    from core.renderer import Renderer


@runtime_checkable
class Drawable(Protocol):
    def draw(self, renderer: "Renderer") -> None: ...  # noqa: D401


@runtime_checkable
class Rotatable(Protocol):
    angle: float  # degrees


@runtime_checkable
class Scalable(Protocol):
    scale: float


@runtime_checkable
class Movable(Protocol):
    position: "Vector2"

    def move_to(self, position) -> None: ...


def require_capability(entity: object, capability: type, who: str = "behavior") -> None:
    """Raise CapabilityError unless ``entity`` implements ``capability``."""
    if not isinstance(entity, capability):
        raise CapabilityError(
            f"{who} requires a {capability.__name__} target, "
            f"got {type(entity).__name__}"
        )


__all__ = ["Drawable", "Rotatable", "Scalable", "Movable", "require_capability"]
