# MIT License (see LICENSE)
"""
Ball-paddle collision.

The paddle does not reflect the ball like a mirror. The hit position
across the paddle picks the outgoing direction instead:

    hit   = (ball.x - paddle.x) / paddle.width          in [0, 1]
    angle = (2 * hit - 1) * max_angle                    in [-max, +max]
    v'    = (sin(angle), -cos(angle)) * |v|

so a centre hit goes straight up and edge hits leave at +-max_angle from
vertical. Speed is preserved.
"""
from __future__ import annotations
import logging
import math
from dataclasses import dataclass

import numpy as np

from ..types import Ball, Paddle
from .response import enforce_min_vertical_speed

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PaddleHit:
    """Details of a resolved paddle bounce."""
    hit_position: float
    angle: float
    velocity: np.ndarray


def paddle_contact(ball: Ball, paddle: Paddle) -> bool:
    """
    Ball bottom edge below the paddle top while the centre is over the paddle.
    
    The horizontal span check is strict: a centre exactly on a paddle
    corner does not count.
    """
    x, y = ball.position
    return (
        y + ball.radius > paddle.y
        and paddle.x < x < paddle.x + paddle.width
    )


def paddle_bounce(
    ball: Ball,
    paddle: Paddle,
    max_angle: float = math.pi / 3,
    min_vertical_ratio: float = 0.3,
) -> PaddleHit:
    """
    Compute the outgoing velocity for a ball hitting the paddle.
    
    Args:
        ball: Ball in contact with the paddle (not modified).
        paddle: The paddle.
        max_angle: Deflection at the paddle edges, in radians.
        min_vertical_ratio: Floor on |dy| / speed.
        
    Returns:
        PaddleHit with the fractional hit position, the launch angle and the
        new velocity.
    """
    hit_position = (float(ball.position[0]) - paddle.x) / paddle.width
    angle = (hit_position * 2 - 1) * max_angle
    speed = ball.speed
    v = np.array([math.sin(angle) * speed, -math.cos(angle) * speed], dtype=np.float64)
    v = enforce_min_vertical_speed(v, min_vertical_ratio)
    return PaddleHit(hit_position=hit_position, angle=angle, velocity=v)


def resolve_paddle(
    ball: Ball,
    paddle: Paddle,
    max_angle: float = math.pi / 3,
    min_vertical_ratio: float = 0.3,
) -> PaddleHit | None:
    """Apply the paddle bounce in place if the ball is touching the paddle."""
    if not paddle_contact(ball, paddle):
        return None
    hit = paddle_bounce(ball, paddle, max_angle, min_vertical_ratio)
    ball.velocity = hit.velocity.copy()
    logger.debug(
        "Ball hit paddle at position %.2f, angle: %.1f deg",
        hit.hit_position, math.degrees(hit.angle),
    )
    return hit
