"""
Microbenchmark: time per frame vs number of balls in play.
Run:
  python benchmarks/bench_frames.py
"""
import time
import numpy as np
from breakout_core import GameConfig, GameSession
from breakout_core.core.invariants import brick_accounting_ok
from breakout_core.profiler import Profiler


def run(n_balls: int, frames: int = 600):
    prof = Profiler()
    session = GameSession(GameConfig(multi_ball=True), profiler=prof, clock=lambda: 0.0)

    rng = np.random.default_rng(12345)  # determinism (launch jitter only)
    for _ in range(n_balls):
        ball = session.launch_ball()
        angle = float(rng.uniform(-0.6, 0.6))
        speed = ball.speed
        ball.velocity[:] = (np.sin(angle) * speed, -np.cos(angle) * speed)

    t0 = time.perf_counter()
    for i in range(frames):
        session.step(now_ms=i * session.config.frame_time_ms)
    t1 = time.perf_counter()

    assert brick_accounting_ok(session.grid)
    per_frame = (t1 - t0) / frames
    return per_frame, prof.stats.summary()


if __name__ == "__main__":
    for n in [1, 5, 10, 25, 50]:
        per_frame, summary = run(n)
        print(f"balls={n:3d}  frame={1e3*per_frame:8.3f} ms  frames/s={1/per_frame:8.1f}")
        for k in ["paddle", "balls", "completion", "transition"]:
            if k in summary:
                print(" ", k, summary[k])
        print()
