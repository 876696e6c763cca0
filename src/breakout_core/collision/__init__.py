# MIT License (see LICENSE)
"""
Collision detection and response subsystem.

This subpackage provides:
    - Walls: side walls, ceiling and the open bottom edge.
    - Paddle: angle-based bounce keyed to the hit position.
    - Bricks: circle-rectangle detection and normal reflection.
    - Response: the minimum vertical speed floor shared by the above.

Typical usage:
    from breakout_core.collision import resolve_paddle, resolve_bricks
    
    if resolve_paddle(ball, paddle):
        ...
    brick = resolve_bricks(ball, grid)
"""
from .walls import resolve_side_walls, resolve_top_wall, exited_bottom
from .paddle import PaddleHit, paddle_contact, paddle_bounce, resolve_paddle
from .bricks import (
    closest_point,
    ball_overlaps_brick,
    collision_normal,
    brick_bounce,
    find_brick_collision,
    resolve_bricks,
)
from .response import enforce_min_vertical_speed

__all__ = [
    # Walls
    "resolve_side_walls",
    "resolve_top_wall",
    "exited_bottom",
    # Paddle
    "PaddleHit",
    "paddle_contact",
    "paddle_bounce",
    "resolve_paddle",
    # Bricks
    "closest_point",
    "ball_overlaps_brick",
    "collision_normal",
    "brick_bounce",
    "find_brick_collision",
    "resolve_bricks",
    # Response
    "enforce_min_vertical_speed",
]
