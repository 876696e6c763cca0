# MIT License (see LICENSE)
"""
Velocity post-processing shared by paddle and brick responses.
"""
from __future__ import annotations
import math

import numpy as np

from ..util import norm


def enforce_min_vertical_speed(velocity: np.ndarray, ratio: float) -> np.ndarray:
    """
    Keep |dy| >= ratio * speed while holding the speed fixed.
    
    A ball travelling almost horizontally would bounce between the side
    walls for a very long time. If the vertical component is below the
    floor it is raised to the floor (keeping its sign, 0 counts as
    downward) and the horizontal component is rescaled, keeping its sign,
    so that |v| is unchanged.
    
    Args:
        velocity: [dx, dy] to correct.
        ratio: Floor as a fraction of the speed, in [0, 1).
        
    Returns:
        Corrected velocity (a new array).
    """
    dx, dy = float(velocity[0]), float(velocity[1])
    speed = norm(velocity)
    min_vertical = speed * ratio
    if abs(dy) >= min_vertical:
        return np.array([dx, dy], dtype=np.float64)

    dy = math.copysign(min_vertical, -1.0 if dy < 0 else 1.0)
    dx = math.copysign(math.sqrt(speed * speed - min_vertical * min_vertical), dx)
    return np.array([dx, dy], dtype=np.float64)
