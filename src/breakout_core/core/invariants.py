# MIT License (see LICENSE)
"""
Helpers for checking simulation invariants.

Used by the tests and the benchmark to verify correctness over long runs:
collision responses keep ball speed constant, the paddle never leaves the
canvas and brick counters agree with brick visibility.
"""
from __future__ import annotations

from ..grid import BrickGrid
from ..types import Ball, Paddle
from ..util import norm


def ball_speed(ball: Ball) -> float:
    """Euclidean norm of the ball velocity: sqrt(dx² + dy²)."""
    return norm(ball.velocity)


def moving_ball_speeds(balls: list[Ball]) -> list[float]:
    return [ball_speed(b) for b in balls if b.moving]


def paddle_in_bounds(paddle: Paddle, width: float) -> bool:
    return 0.0 <= paddle.x <= width - paddle.width


def ball_within_walls(ball: Ball, width: float, eps: float = 1e-9) -> bool:
    """Ball centre lies in [radius, width - radius]."""
    x = float(ball.position[0])
    return ball.radius - eps <= x <= width - ball.radius + eps


def brick_accounting_ok(grid: BrickGrid) -> bool:
    """
    Counters agree with the grid.
    
    active_count equals the number of visible bricks, never exceeds
    total_count and is zero exactly when no brick is visible.
    """
    visible = sum(1 for _ in grid.visible())
    return (
        grid.active_count == visible
        and 0 <= grid.active_count <= grid.total_count
        and (grid.active_count == 0) == (visible == 0)
    )
