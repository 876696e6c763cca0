# MIT License (see LICENSE)
"""
Ball-brick collision detection and response.

Detection: a circle overlaps an axis-aligned rectangle iff the point of the
rectangle closest to the circle centre (per-axis clamp) lies within the
radius.

Response: the ball is reflected about the normal pointing from that closest
point to the centre, v' = v - 2 (v·n) n, then rescaled to the incoming
speed. Degenerate cases fall back deterministically:
    - centre on/inside the rectangle (zero normal): use the dominant axis of
      the velocity as the normal;
    - zero-length or non-finite reflection: full inversion (-dx, -dy);
    - non-finite incoming velocity: relaunch along the normal at the
      fallback speed, so the ball is valid again on the next frame.

Only the first overlapping brick in row-major order is resolved per ball
per frame.
"""
from __future__ import annotations
import logging
import math

import numpy as np

from ..constants import BALL_SPEED, NORMAL_EPS
from ..grid import BrickGrid
from ..types import Ball, Brick
from ..util import is_finite_vec, norm, reflect, unit
from .response import enforce_min_vertical_speed

logger = logging.getLogger(__name__)


def closest_point(center: np.ndarray, brick: Brick) -> np.ndarray:
    """Point of the brick rectangle closest to center."""
    cx = max(brick.x, min(float(center[0]), brick.right))
    cy = max(brick.y, min(float(center[1]), brick.bottom))
    return np.array([cx, cy], dtype=np.float64)


def ball_overlaps_brick(ball: Ball, brick: Brick) -> bool:
    """Circle-rectangle overlap test; touching counts as a hit."""
    d = ball.position - closest_point(ball.position, brick)
    return math.hypot(d[0], d[1]) <= ball.radius


def collision_normal(ball: Ball, brick: Brick) -> np.ndarray:
    """
    Unit normal from the brick surface towards the ball centre.
    
    If the centre is on or inside the rectangle the normal is taken from
    the velocity's dominant axis instead.
    """
    n = ball.position - closest_point(ball.position, brick)
    if abs(n[0]) < NORMAL_EPS and abs(n[1]) < NORMAL_EPS:
        dx, dy = float(ball.velocity[0]), float(ball.velocity[1])
        if abs(dx) > abs(dy):
            n = np.array([1.0 if dx > 0 else -1.0, 0.0], dtype=np.float64)
        else:
            n = np.array([0.0, 1.0 if dy > 0 else -1.0], dtype=np.float64)

    n = unit(n)
    if n.any():
        return n
    # Unreachable with the fallback above; keep a vertical normal as last resort
    return np.array([0.0, -1.0 if ball.velocity[1] > 0 else 1.0], dtype=np.float64)


def brick_bounce(
    ball: Ball,
    brick: Brick,
    fallback_speed: float = BALL_SPEED * math.sqrt(2),
) -> np.ndarray:
    """
    Speed-preserving reflection of the ball velocity off a brick.
    
    Args:
        ball: Ball overlapping the brick (not modified).
        brick: The brick that was hit.
        fallback_speed: Speed given to the ball when its incoming velocity
            is not finite and has to be replaced.
    
    Returns:
        The new velocity.
    """
    v = ball.velocity
    n = collision_normal(ball, brick)
    if not is_finite_vec(v):
        logger.warning("Invalid incoming velocity %s, relaunching along normal %s", v, n)
        return n * fallback_speed

    r = reflect(v, n)
    speed = norm(v)
    r_len = norm(r)
    if r_len < NORMAL_EPS:
        logger.warning("Zero reflection length detected, using simple bounce")
        return -v
    out = r / r_len * speed
    if not is_finite_vec(out):
        logger.warning(
            "Invalid velocity calculated (normal=%s, reflection=%s), using simple bounce",
            n, r,
        )
        return -v

    logger.debug(
        "Normal vector: (%.2f, %.2f); velocity (%.2f, %.2f) -> (%.2f, %.2f)",
        n[0], n[1], v[0], v[1], out[0], out[1],
    )
    return out


def find_brick_collision(ball: Ball, grid: BrickGrid) -> Brick | None:
    """First visible brick the ball overlaps, scanning row by row."""
    for brick in grid.visible():
        if ball_overlaps_brick(ball, brick):
            return brick
    return None


def resolve_bricks(
    ball: Ball,
    grid: BrickGrid,
    min_vertical_ratio: float = 0.3,
    fallback_speed: float = BALL_SPEED * math.sqrt(2),
) -> Brick | None:
    """
    Resolve at most one brick hit for this ball.
    
    Bounces the ball, applies the vertical speed floor and destroys the
    brick. Scoring is left to the caller.
    
    Returns:
        The destroyed brick, or None.
    """
    brick = find_brick_collision(ball, grid)
    if brick is None:
        return None
    logger.debug("Collision detected with brick at row %d, col %d", brick.row, brick.col)
    v = brick_bounce(ball, brick, fallback_speed)
    ball.velocity = enforce_min_vertical_speed(v, min_vertical_ratio)
    grid.destroy(brick)
    return brick
