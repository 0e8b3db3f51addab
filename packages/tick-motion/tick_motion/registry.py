"""EasingRegistry class."""
from __future__ import annotations

from tick_motion.easing import EASINGS
from tick_motion.types import EasingFunction


class EasingRegistry:
    """Maps easing names to curve functions, used to snapshot and restore tweens.

    Functions are matched by identity, so a curve must be registered under a
    name before a tween using it can be snapshotted.
    """

    def __init__(self, include_builtins: bool = True) -> None:
        self._easings: dict[str, EasingFunction] = {}
        if include_builtins:
            self._easings.update(EASINGS)

    def register(self, name: str, fn: EasingFunction) -> None:
        """Register a named easing. Overwrites if already registered."""
        self._easings[name] = fn

    def unregister(self, name: str) -> None:
        """Remove a named easing. Raises KeyError if not registered."""
        if name not in self._easings:
            raise KeyError(name)
        del self._easings[name]

    def get(self, name: str) -> EasingFunction:
        """Look up an easing. Raises KeyError if not registered."""
        if name not in self._easings:
            raise KeyError(name)
        return self._easings[name]

    def has(self, name: str) -> bool:
        """Check if easing name is registered."""
        return name in self._easings

    def name_of(self, fn: EasingFunction) -> str | None:
        """Return the name *fn* is registered under, or None."""
        for name, registered in self._easings.items():
            if registered is fn:
                return name
        return None

    def names(self) -> list[str]:
        """List all registered easing names."""
        return list(self._easings)


default_registry = EasingRegistry()
