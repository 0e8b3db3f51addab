"""Frame loop -- drive a yoyo-ing sequence with a fixed frame delta.

Demonstrates:
- Building a Sequence from eased Tweens
- Calling update() once per frame with the frame delta
- Reading the value and the two completion flags
- Yoyo playback with a finite loop count

Run: python -m examples.basics
"""

from tick_motion import Sequence, Tween
from tick_motion.easing import in_out_quad, linear, out_bounce

FRAME_DT = 0.25


def main() -> None:
    print("=== Frame Loop ===\n")

    # Rise, hold, then drop with a bounce.
    seq = Sequence(
        Tween(0.0, 100.0, 1.0, in_out_quad),
        Tween(100.0, 100.0, 0.5, linear),
        Tween(100.0, 0.0, 1.0, out_bounce),
    )
    seq.set_yoyo(True)
    seq.set_loop(2)

    frame = 0
    while True:
        frame += 1
        value, tween_done, seq_done = seq.update(FRAME_DT)
        marks = []
        if tween_done:
            marks.append("tween done")
        if seq.reverse:
            marks.append("reversed")
        print(
            f"  frame {frame:3d}  |  index={seq.index}  |  value={value:7.2f}"
            f"  |  loops left={seq.loop_remaining}  {', '.join(marks)}"
        )
        if seq_done:
            break

    print(f"\nDone after {frame} frames ({frame * FRAME_DT:.2f}s).")


if __name__ == "__main__":
    main()
