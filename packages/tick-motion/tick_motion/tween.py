"""Tween - a single timed interpolation between two values."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any

from tick_motion.easing import linear
from tick_motion.registry import EasingRegistry, default_registry
from tick_motion.types import EasingFunction, SnapshotError, check_snapshot_field


@dataclass
class Tween:
    """Eases from ``begin`` to ``end`` over ``duration`` using ``easing``.

    ``time`` is always clamped to ``[0, duration]``. ``overflow`` holds the
    signed time that the last ``set_time`` fell outside that range: negative
    below zero, positive past the duration. With ``reverse`` set, updates move
    time backwards and the tween counts as finished at ``time <= 0``.

    A reversed tween that has never moved sits at ``time == 0`` and so reports
    finished on its first update. Call ``reset()`` after flipping ``reverse``
    to start from the far end.
    """

    begin: float
    end: float
    duration: float
    easing: EasingFunction = linear
    reverse: bool = False
    time: float = field(default=0.0, init=False)
    overflow: float = field(default=0.0, init=False)
    change: float = field(default=0.0, init=False)

    def __post_init__(self) -> None:
        if self.duration <= 0:
            raise ValueError(f"duration must be positive, got {self.duration}")
        self.change = self.end - self.begin

    def set_time(self, time: float) -> tuple[float, bool]:
        """Jump to *time*. Returns (value, finished)."""
        if time <= 0:
            self.overflow = time
            self.time = 0.0
            current = self.begin
        elif time >= self.duration:
            self.overflow = time - self.duration
            self.time = self.duration
            current = self.end
        else:
            self.overflow = 0.0
            self.time = time
            current = self.easing(self.time, self.begin, self.change, self.duration)

        if self.reverse:
            return current, self.time <= 0
        return current, self.time >= self.duration

    def update(self, dt: float) -> tuple[float, bool]:
        """Advance by *dt* in the current direction. Returns (value, finished)."""
        if self.reverse:
            return self.set_time(self.time - dt)
        return self.set_time(self.time + dt)

    def reset(self) -> None:
        """Rewind to the start of the current direction."""
        if self.reverse:
            self.set_time(self.duration)
        else:
            self.set_time(0.0)

    # -- Snapshot / restore --

    def snapshot(self, registry: EasingRegistry | None = None) -> dict[str, Any]:
        reg = registry if registry is not None else default_registry
        name = reg.name_of(self.easing)
        if name is None:
            raise SnapshotError(f"Unregistered easing function: {self.easing!r}")
        return {
            "begin": self.begin,
            "end": self.end,
            "change": self.change,
            "duration": self.duration,
            "time": self.time,
            "overflow": self.overflow,
            "reverse": self.reverse,
            "easing": name,
        }

    @classmethod
    def from_snapshot(
        cls, data: dict[str, Any], registry: EasingRegistry | None = None
    ) -> Tween:
        """Build a new Tween from snapshot data. ``change`` is recomputed."""
        reg = registry if registry is not None else default_registry
        name = check_snapshot_field(data, "easing", (str,), "Tween")
        begin = check_snapshot_field(data, "begin", (int, float), "Tween")
        end = check_snapshot_field(data, "end", (int, float), "Tween")
        duration = check_snapshot_field(data, "duration", (int, float), "Tween")
        reverse = check_snapshot_field(data, "reverse", (bool,), "Tween")
        time = check_snapshot_field(data, "time", (int, float), "Tween")
        overflow = check_snapshot_field(data, "overflow", (int, float), "Tween")

        if not reg.has(name):
            raise SnapshotError(f"Unknown easing: {name!r}")
        if duration <= 0:
            raise SnapshotError(f"Tween duration must be positive, got {duration}")
        if not 0 <= time <= duration:
            raise SnapshotError(f"Tween time {time} is outside [0, {duration}]")

        tween = cls(begin, end, duration, reg.get(name), reverse=reverse)
        tween.time = time
        tween.overflow = overflow
        return tween

    def restore(self, data: dict[str, Any], registry: EasingRegistry | None = None) -> None:
        """Replace this tween's state with snapshot data."""
        restored = Tween.from_snapshot(data, registry)
        for f in dataclasses.fields(self):
            setattr(self, f.name, getattr(restored, f.name))
