import pytest
from breakout_core import GameConfig, GameSession, RecordingSink
from breakout_core.levels import LevelCatalog, LevelDefinition


@pytest.fixture(autouse=True)
def _single_ball_mode(monkeypatch):
    monkeypatch.delenv("BREAKOUT_CORE_MULTI_BALL", raising=False)


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def session(sink):
    return GameSession(config=GameConfig(), sink=sink, clock=lambda: 0.0)


@pytest.fixture
def two_level_catalog():
    return LevelCatalog({
        1: LevelDefinition(rows=1, cols=3, name="tiny"),
        2: LevelDefinition(rows=1, cols=3, name="tiny again"),
    })


def hit_brick(session, brick, now_ms):
    """Place the first ball just under a brick, moving up, and step once."""
    ball = session.balls[0]
    ball.moving = True
    ball.position[:] = (brick.x + brick.width / 2, brick.bottom + ball.radius)
    ball.velocity[:] = (0.0, -2.0)
    session.step(now_ms=now_ms)


def clear_level(session, start_ms=0.0):
    for i, brick in enumerate(list(session.grid.visible())):
        hit_brick(session, brick, start_ms + i * 100)
