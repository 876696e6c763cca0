import math
import numpy as np
import pytest
from breakout_core.types import Ball, Paddle
from breakout_core.collision import paddle_contact, paddle_bounce, resolve_paddle


def make_paddle():
    return Paddle(x=350.0, y=550.0, width=100.0, height=20.0, speed=8.0)


def test_center_hit_goes_straight_up():
    """hit=0.5 -> angle=0 -> v' = (0, -|v|)"""
    paddle = make_paddle()
    ball = Ball(position=(400.0, 545.0), radius=8.0, velocity=(3.0, 4.0), moving=True)
    hit = paddle_bounce(ball, paddle)
    assert hit.hit_position == pytest.approx(0.5)
    assert hit.angle == pytest.approx(0.0)
    assert np.allclose(hit.velocity, [0.0, -5.0])


def test_edge_hit_deflects_sixty_degrees():
    """hit -> 1: angle -> +60 deg, v' = |v| (sin 60, -cos 60)."""
    paddle = make_paddle()
    ball = Ball(position=(449.999, 545.0), radius=8.0, velocity=(0.0, 5.0), moving=True)
    hit = paddle_bounce(ball, paddle)
    assert hit.angle == pytest.approx(math.pi / 3, abs=1e-3)
    assert np.allclose(hit.velocity, [5 * math.sin(math.pi / 3), -2.5], atol=1e-3)


def test_left_side_goes_left():
    """hit < 0.5 gives a negative angle: the ball leaves up and to the left."""
    paddle = make_paddle()
    ball = Ball(position=(360.0, 545.0), radius=8.0, velocity=(2.0, 5.0), moving=True)
    hit = paddle_bounce(ball, paddle)
    assert hit.velocity[0] < 0
    assert hit.velocity[1] < 0


def test_paddle_bounce_preserves_speed():
    """|v'| == |v| and |dy'| >= 0.3 |v| across the whole paddle."""
    paddle = make_paddle()
    for x in np.linspace(351.0, 449.0, 25):
        ball = Ball(position=(x, 545.0), radius=8.0, velocity=(1.5, 3.5), moving=True)
        speed = ball.speed
        hit = paddle_bounce(ball, paddle)
        assert np.linalg.norm(hit.velocity) == pytest.approx(speed, abs=1e-9)
        assert abs(hit.velocity[1]) >= 0.3 * speed - 1e-9


def test_contact_requires_center_over_paddle():
    """Contact: y + r > paddle.y and paddle.x < x < paddle.x + width (strict)."""
    paddle = make_paddle()
    on_corner = Ball(position=(350.0, 545.0), radius=8.0)
    beside = Ball(position=(340.0, 545.0), radius=8.0)
    above = Ball(position=(400.0, 540.0), radius=8.0)
    over = Ball(position=(400.0, 545.0), radius=8.0)
    assert not paddle_contact(on_corner, paddle)
    assert not paddle_contact(beside, paddle)
    assert not paddle_contact(above, paddle)
    assert paddle_contact(over, paddle)


def test_resolve_paddle_updates_ball():
    paddle = make_paddle()
    ball = Ball(position=(400.0, 545.0), radius=8.0, velocity=(0.0, 4.0), moving=True)
    assert resolve_paddle(ball, paddle) is not None
    assert np.allclose(ball.velocity, [0.0, -4.0])

    miss = Ball(position=(100.0, 545.0), radius=8.0, velocity=(0.0, 4.0), moving=True)
    assert resolve_paddle(miss, paddle) is None
    assert np.allclose(miss.velocity, [0.0, 4.0])


def test_paddle_clamped_to_canvas():
    """x stays in [0, 800 - 100] however long the paddle moves."""
    paddle = make_paddle()
    paddle.dx = 8.0
    for _ in range(100):
        paddle.move(800.0)
    assert paddle.x == 700.0
    paddle.dx = -8.0
    for _ in range(100):
        paddle.move(800.0)
    assert paddle.x == 0.0
