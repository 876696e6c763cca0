import numpy as np
import pytest
from breakout_core.util import ease_in_out_cubic, norm, reflect, unit


def test_norm_and_unit():
    """|(3, 4)| = 5 and its unit vector is (0.6, 0.8)."""
    v = np.array([3.0, 4.0])
    assert norm(v) == 5.0
    assert np.allclose(unit(v), [0.6, 0.8])


def test_unit_of_zero_vector_is_zero():
    assert not unit(np.zeros(2)).any()


def test_reflect_preserves_length():
    """v' = v - 2 (v·n) n keeps |v| for any unit n."""
    v = np.array([2.0, -5.0])
    n = unit(np.array([1.0, 1.0]))
    assert norm(reflect(v, n)) == pytest.approx(norm(v))


def test_ease_in_out_cubic_is_clamped():
    assert ease_in_out_cubic(-1.0) == 0.0
    assert ease_in_out_cubic(0.5) == pytest.approx(0.5)
    assert ease_in_out_cubic(2.0) == 1.0
    assert ease_in_out_cubic(0.25) == pytest.approx(4 * 0.25 ** 3)
