import dataclasses
import pytest
from breakout_core import GameConfig, PlayingField


def test_defaults():
    """800x600 canvas at 60 FPS: one frame every 1000 / 60 ms."""
    config = GameConfig()
    assert (config.canvas_width, config.canvas_height) == (800.0, 600.0)
    assert config.fps == 60
    assert config.frame_time_ms == pytest.approx(1000 / 60)
    assert config.combo_window_ms == 1000.0
    assert config.max_multiplier == 8
    assert not config.multi_ball


def test_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        GameConfig().fps = 30


def test_multi_ball_env(monkeypatch):
    """Only the exact value "1" enables multi-ball."""
    monkeypatch.setenv("BREAKOUT_CORE_MULTI_BALL", "1")
    assert GameConfig().multi_ball
    monkeypatch.setenv("BREAKOUT_CORE_MULTI_BALL", "yes")
    assert not GameConfig().multi_ball


@pytest.mark.parametrize("override", [
    {"fps": 0},
    {"ball_speed": -1.0},
    {"canvas_width": 0.0},
    {"max_multiplier": 0},
    {"min_vertical_speed_ratio": 1.0},
    {"transition_advance_fraction": 0.0},
    {"min_brick_padding": -2.0},
])
def test_invalid_values_rejected(override):
    with pytest.raises(ValueError):
        GameConfig(**override)


def test_field_from_config():
    """Container = (40, 80, 800 - 2*40, floor((600 - 80 - 100) * 0.75))."""
    field = PlayingField.from_config(GameConfig())
    assert (field.x, field.y, field.width, field.height) == (40.0, 80.0, 720.0, 315)
    assert field.right == 760.0
    assert field.bottom == 395.0


def test_field_from_smaller_canvas():
    field = PlayingField.from_config(GameConfig(canvas_width=400.0, canvas_height=300.0))
    assert field.width == 320.0
    assert field.height == 90
