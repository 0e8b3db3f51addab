"""tick-motion - Eased tweens and chained tween sequences driven by frame deltas."""
from __future__ import annotations

from tick_motion.easing import EASINGS
from tick_motion.registry import EasingRegistry, default_registry
from tick_motion.sequence import Sequence
from tick_motion.tween import Tween
from tick_motion.types import EasingFunction, SnapshotError

__all__ = [
    "Tween",
    "Sequence",
    "EASINGS",
    "EasingRegistry",
    "default_registry",
    "EasingFunction",
    "SnapshotError",
]
