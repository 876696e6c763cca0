import math
import numpy as np
import pytest
from breakout_core.collision import enforce_min_vertical_speed


def test_shallow_velocity_is_steepened():
    """|dy| < 0.3|v|: dy -> 0.3|v|, dx -> sqrt(|v|^2 - dy^2), signs kept."""
    v = np.array([5.0, 0.1])
    speed = np.linalg.norm(v)
    out = enforce_min_vertical_speed(v, 0.3)
    assert abs(out[1]) == pytest.approx(0.3 * speed)
    assert np.linalg.norm(out) == pytest.approx(speed)
    assert out[0] > 0 and out[1] > 0


def test_signs_are_kept():
    v = np.array([-5.0, -0.1])
    out = enforce_min_vertical_speed(v, 0.3)
    assert out[0] < 0 and out[1] < 0
    assert np.linalg.norm(out) == pytest.approx(np.linalg.norm(v))


def test_horizontal_velocity_turns_downward():
    """dy = 0 counts as downward: (4, 0) -> (sqrt(16 - 1.44), 1.2)."""
    out = enforce_min_vertical_speed(np.array([4.0, 0.0]), 0.3)
    assert out[1] == pytest.approx(1.2)
    assert out[0] == pytest.approx(math.sqrt(16 - 1.44))


def test_steep_velocity_unchanged():
    v = np.array([1.0, -5.0])
    assert np.allclose(enforce_min_vertical_speed(v, 0.3), v)


def test_zero_velocity_unchanged():
    assert np.allclose(enforce_min_vertical_speed(np.zeros(2), 0.3), [0.0, 0.0])
