# examples/autoplay.py
# Headless run of level 1 with a paddle that simply tracks the lowest ball.
import logging

from breakout_core import GameSession, PaddleDirection, RecordingSink, CollisionKind
from breakout_core.renderer import DebugRenderer

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

sink = RecordingSink()
session = GameSession(sink=sink)
renderer = DebugRenderer()

session.launch_ball()
for _ in range(60 * 60):
    ball = max(session.balls, key=lambda b: b.position[1])
    if not ball.moving:
        session.launch_ball()
    target = ball.position[0]
    center = session.paddle.center_x
    if target > center + 4:
        session.move_paddle(PaddleDirection.RIGHT)
    elif target < center - 4:
        session.move_paddle(PaddleDirection.LEFT)
    else:
        session.move_paddle(PaddleDirection.NONE)
    session.step()
    if session.finished:
        break

renderer.render_snapshot(session.snapshot())
print("level:", session.level, "score:", session.score)
print("bricks hit:", len(sink.collisions(CollisionKind.BRICK)))
print("paddle hits:", len(sink.collisions(CollisionKind.PADDLE)))
