"""Snapshot and restore -- pause a sequence mid-flight and resume it elsewhere.

Demonstrates:
- Taking a JSON-compatible snapshot of a running Sequence
- Registering a custom easing so it can be named in the snapshot
- Restoring into a fresh Sequence
- Proving the restored sequence continues identically

Run: python -m examples.snapshot
"""

import json

from tick_motion import EasingRegistry, Sequence, Tween
from tick_motion.easing import in_cubic


def step(t: float, b: float, c: float, d: float) -> float:
    """Custom easing: four discrete steps."""
    return b + c * min(int(t / d * 4), 4) / 4


def run(seq: Sequence, frames: int, dt: float) -> list[float]:
    return [round(seq.update(dt)[0], 4) for _ in range(frames)]


def main() -> None:
    print("=== Snapshot & Restore ===\n")

    registry = EasingRegistry()
    registry.register("step", step)

    seq = Sequence(
        Tween(0.0, 1.0, 1.0, in_cubic),
        Tween(1.0, 0.0, 1.0, step),
    )
    seq.set_loop(-1)

    run(seq, 5, 0.3)
    snap_json = json.dumps(seq.snapshot(registry))
    print(f"Snapshot after 5 frames ({len(snap_json)} bytes)")

    result_a = run(seq, 8, 0.3)
    print(f"Original continues: {result_a}")

    restored = Sequence()
    restored.restore(json.loads(snap_json), registry)
    result_b = run(restored, 8, 0.3)
    print(f"Restored continues: {result_b}")

    print()
    assert result_a == result_b, f"Replay mismatch: {result_a} != {result_b}"
    print("Restored sequence matches original:  PASS")


if __name__ == "__main__":
    main()
