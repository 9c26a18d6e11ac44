from __future__ import annotations

from core.drawable import require_capability


class Behavior:
    """Per-frame update unit bound to exactly one target entity.

    Subclasses name the minimal capability they need in ``requires``; the
    target is checked once here, when the behavior is attached.
    """

    requires: type = object

    def __init__(self, target) -> None:
        require_capability(target, self.requires, type(self).__name__)
        self.target = target
        self.enabled = True

    def toggle(self) -> bool:
        self.enabled = not self.enabled
        return self.enabled

    def update(self, elapsed: float, delta: float) -> None:
        raise NotImplementedError
