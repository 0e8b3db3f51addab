"""Shared type aliases and exceptions for tick-motion."""
from __future__ import annotations

from typing import Any, Callable

EasingFunction = Callable[[float, float, float, float], float]
"""Curve signature ``f(t, b, c, d)``: elapsed time, begin, change, duration."""


class SnapshotError(Exception):
    """Raised on snapshot/restore failures (unknown easing, missing or mistyped fields, bad ranges)."""


def check_snapshot_field(data: Any, key: str, kinds: tuple[type, ...], owner: str) -> Any:
    """Return ``data[key]``, raising SnapshotError if missing or not one of *kinds*.

    bool is only accepted where it is listed explicitly.
    """
    if not isinstance(data, dict):
        raise SnapshotError(f"{owner} snapshot must be a dict, got {type(data).__name__}")
    if key not in data:
        raise SnapshotError(f"Missing {owner.lower()} field: {key!r}")
    value = data[key]
    if (isinstance(value, bool) and bool not in kinds) or not isinstance(value, kinds):
        raise SnapshotError(f"{owner} field {key!r} has wrong type: {value!r}")
    return value
