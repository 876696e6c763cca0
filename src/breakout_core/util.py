# MIT License (see LICENSE)
"""
Utility functions for vector math and numeric operations.

All vector helpers operate on 2D vectors represented as numpy arrays of
shape (2,). Screen coordinates are used throughout: +x to the right,
+y downward, so "up" is negative y.
"""
from __future__ import annotations
import math
import os

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.
    
    Used throughout the codebase so that tuple/list inputs for positions
    and velocities end up with consistent numeric precision.
    """
    return np.array(x, dtype=np.float64)


def norm2(v: np.ndarray) -> float:
    """Squared magnitude of a 2D vector."""
    return float(v[0] * v[0] + v[1] * v[1])


def norm(v: np.ndarray) -> float:
    """Magnitude (length) of a 2D vector."""
    return float(np.sqrt(norm2(v)))


def unit(v: np.ndarray, eps: float = 1e-12) -> np.ndarray:
    """
    Return a unit vector in the same direction as v.
    
    Returns the zero vector if |v| < eps to avoid division by zero.
    """
    n = norm(v)
    if n < eps:
        return np.zeros(2, dtype=np.float64)
    return v / n


def reflect(v: np.ndarray, n: np.ndarray) -> np.ndarray:
    """
    Mirror v about a surface with unit normal n: v' = v - 2 (v·n) n.
    
    n must already be normalized; |v'| == |v| up to rounding.
    """
    return v - 2.0 * float(np.dot(v, n)) * n


def is_finite_vec(v: np.ndarray) -> bool:
    """True if every component is a finite number (no NaN / inf)."""
    return bool(np.all(np.isfinite(v)))


def clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(x, hi))


def ease_in_out_cubic(t: float) -> float:
    """
    Cubic ease-in-out on [0, 1].
    
    Inputs outside [0, 1] are clamped so the curve never overshoots.
    """
    t = clamp(t, 0.0, 1.0)
    if t < 0.5:
        return 4.0 * t * t * t
    return 1.0 - math.pow(-2.0 * t + 2.0, 3) / 2.0


def multi_ball_enabled() -> bool:
    """Check if debug multi-ball mode is enabled via environment variable."""
    return os.environ.get("BREAKOUT_CORE_MULTI_BALL", "0") == "1"
