"""Sequence - ordered playback of tweens with looping, reversal and yoyo."""
from __future__ import annotations

import copy
from typing import Any

from tick_motion.registry import EasingRegistry
from tick_motion.tween import Tween
from tick_motion.types import SnapshotError, check_snapshot_field


class Sequence:
    """Plays tweens one after another, carrying leftover time across tweens.

    The sequence owns copies of the tweens it is given, so advancing a
    sequence never moves a tween the caller still holds.

    ``index`` names the active tween. After the sequence finishes it is left
    one step past the end it ran off (``len(tweens)`` going forward, ``-1``
    going backward in non-yoyo mode) and the next ``update`` resolves it.

    ``loop`` is the number of passes to play; ``-1`` loops forever. In yoyo
    mode a pass is a full trip out to the end and back to the start, and the
    loop is only counted when the start is reached.
    """

    def __init__(self, *tweens: Tween) -> None:
        self._tweens: list[Tween] = [copy.copy(t) for t in tweens]
        self._index: int = 0
        self._yoyo: bool = False
        self._reverse: bool = False
        self._loop: int = 1
        self._loop_remaining: int = 1

    def __len__(self) -> int:
        return len(self._tweens)

    @property
    def tweens(self) -> tuple[Tween, ...]:
        return tuple(self._tweens)

    @property
    def index(self) -> int:
        return self._index

    @property
    def loop(self) -> int:
        return self._loop

    @property
    def loop_remaining(self) -> int:
        return self._loop_remaining

    @property
    def yoyo(self) -> bool:
        return self._yoyo

    @property
    def reverse(self) -> bool:
        return self._reverse

    def add(self, *tweens: Tween) -> None:
        """Append copies of *tweens* in order."""
        self._tweens.extend(copy.copy(t) for t in tweens)

    def remove(self, index: int) -> None:
        """Remove the tween at *index*. Out-of-range (including negative) is a no-op."""
        if 0 <= index < len(self._tweens):
            del self._tweens[index]

    def has_tweens(self) -> bool:
        return len(self._tweens) > 0

    def set_index(self, index: int) -> None:
        """Rewind the active tween and make *index* active.

        *index* is not range-checked here; an out-of-range index is treated
        as a finished pass on the next ``update``.
        """
        if 0 <= self._index < len(self._tweens):
            self._activate(self._index)
        self._index = index

    def set_loop(self, amount: int) -> None:
        """Set the loop count and the remaining loops. ``-1`` loops forever."""
        self._loop = amount
        self._loop_remaining = amount

    def set_yoyo(self, yoyo: bool) -> None:
        self._yoyo = yoyo

    def set_reverse(self, reverse: bool) -> None:
        """Change playback direction, continuing from the active tween's current time."""
        if self._tweens:
            self._index = min(max(self._index, 0), len(self._tweens) - 1)
            self._tweens[self._index].reverse = reverse
        self._reverse = reverse

    def reset(self) -> None:
        """Restore the loop count, rewind every tween and return to the first one."""
        self._loop_remaining = self._loop
        for tween in self._tweens:
            tween.reset()
        self._index = 0

    def update(self, dt: float) -> tuple[float, bool, bool]:
        """Advance playback by *dt*.

        Returns ``(value, tween_completed, sequence_completed)``.
        ``tween_completed`` is True when at least one tween finished during
        this call. ``sequence_completed`` is True when the call ended on a
        finished pass. An empty sequence returns ``(0.0, False, True)``.

        Time left over when a tween finishes is carried into the next tween
        in the current direction, so one call may cross several tweens and
        loop boundaries.
        """
        if not self._tweens:
            return 0.0, False, True

        completed = False
        remaining = dt

        while True:
            count = len(self._tweens)
            if self._index < 0 or self._index >= count:
                final = self._cross_boundary(remaining)
                if final is not None:
                    return final, completed, True

            tween = self._tweens[self._index]
            value, finished = tween.update(remaining)
            if not finished:
                return value, completed, False

            completed = True
            # Direction is carried by the index step, only the magnitude moves on.
            remaining = abs(tween.overflow)
            self._index += -1 if self._reverse else 1
            if 0 <= self._index < count:
                self._activate(self._index)

    def _activate(self, index: int) -> None:
        tween = self._tweens[index]
        tween.reverse = self._reverse
        tween.reset()

    def _consume_loop(self) -> bool:
        """Count one finished pass. Returns True when no passes are left."""
        if self._loop_remaining >= 1:
            self._loop_remaining -= 1
        return self._loop_remaining == 0

    def _cross_boundary(self, remaining: float) -> float | None:
        """Resolve an index that ran off either end of the tween list.

        Returns the value to report when the sequence stops here, otherwise
        moves onto the next tween to play and returns None.
        """
        last = len(self._tweens) - 1
        past_end = self._index > last

        if self._yoyo:
            if past_end:
                # Bounce back off the end. Loops are counted at the start only.
                self._reverse = True
                self._index = last
                self._activate(last)
                return None
            self._reverse = False
            self._index = 0
            exhausted = self._consume_loop()
            if exhausted or remaining == 0:
                if not exhausted:
                    self._activate(0)
                return self._tweens[0].begin
            self._activate(0)
            return None

        exhausted = self._consume_loop()
        if exhausted or remaining == 0:
            final = self._tweens[last].end if past_end else self._tweens[0].begin
            if not exhausted:
                # Landed exactly on the boundary with passes left: line up
                # the next pass so it is not counted a second time.
                self._index = 0 if past_end else last
                self._activate(self._index)
            return final

        self._index = 0 if past_end else last
        self._activate(self._index)
        return None

    # -- Snapshot / restore --

    def snapshot(self, registry: EasingRegistry | None = None) -> dict[str, Any]:
        return {
            "tweens": [t.snapshot(registry) for t in self._tweens],
            "index": self._index,
            "yoyo": self._yoyo,
            "reverse": self._reverse,
            "loop": self._loop,
            "loop_remaining": self._loop_remaining,
        }

    def restore(self, data: dict[str, Any], registry: EasingRegistry | None = None) -> None:
        """Replace this sequence's state with snapshot data.

        Raises SnapshotError on missing or mistyped fields or unrestorable tweens, in
        which case the sequence is left unchanged.
        """
        tween_data = check_snapshot_field(data, "tweens", (list,), "Sequence")
        index = check_snapshot_field(data, "index", (int,), "Sequence")
        yoyo = check_snapshot_field(data, "yoyo", (bool,), "Sequence")
        reverse = check_snapshot_field(data, "reverse", (bool,), "Sequence")
        loop = check_snapshot_field(data, "loop", (int,), "Sequence")
        loop_remaining = check_snapshot_field(data, "loop_remaining", (int,), "Sequence")
        if loop < -1 or loop_remaining < -1:
            raise SnapshotError(
                f"Loop counts must be >= -1, got loop={loop}, loop_remaining={loop_remaining}"
            )

        tweens = [Tween.from_snapshot(td, registry) for td in tween_data]

        self._tweens = tweens
        self._index = index
        self._yoyo = yoyo
        self._reverse = reverse
        self._loop = loop
        self._loop_remaining = loop_remaining
