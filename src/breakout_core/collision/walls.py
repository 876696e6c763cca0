# MIT License (see LICENSE)
"""
Boundary collisions: side walls, ceiling and the open bottom edge.

Responses clamp the ball back inside the boundary and invert one velocity
component, so speed is preserved exactly.
"""
from __future__ import annotations

from ..types import Ball


def resolve_side_walls(ball: Ball, width: float) -> bool:
    """
    Bounce off the left (x = 0) or right (x = width) wall.
    
    Returns:
        True if the ball touched a side wall this frame.
    """
    r = ball.radius
    if ball.position[0] + r > width:
        ball.position[0] = width - r
        ball.velocity[0] = -ball.velocity[0]
        return True
    if ball.position[0] - r < 0:
        ball.position[0] = r
        ball.velocity[0] = -ball.velocity[0]
        return True
    return False


def resolve_top_wall(ball: Ball) -> bool:
    """Bounce off the ceiling at y = 0. Returns True on contact."""
    r = ball.radius
    if ball.position[1] - r < 0:
        ball.position[1] = r
        ball.velocity[1] = -ball.velocity[1]
        return True
    return False


def exited_bottom(ball: Ball, height: float) -> bool:
    """True once the whole ball (its top edge) is below the bottom edge."""
    return ball.position[1] - ball.radius > height
