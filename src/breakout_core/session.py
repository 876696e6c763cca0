# MIT License (see LICENSE)
"""
The game session and frame loop.

GameSession owns all mutable game state (paddle, balls, brick grid, combo,
score, transition) and advances it one frame at a time:

    1. Drain due timers (combo decay).
    2. Frame gate: calls arriving faster than the frame interval are
       coalesced into nothing.
    3. If a level transition is running, advance it instead of the physics.
    4. Otherwise:
         a. Move and clamp the paddle.
         b. For each ball: ride the paddle while resting, or integrate and
            resolve walls, paddle, bottom exit and at most one brick.
         c. Check level completion and start the transition / end the game.

Structure:
    - The driver creates a GameSession (level 1 is loaded).
    - Input layer calls move_paddle() / launch_ball().
    - Driver calls tick(now_ms) once per rendered frame.
    - Renderer reads snapshot().
"""
from __future__ import annotations
import contextlib
import enum
import logging
import math
import time
from dataclasses import dataclass
from typing import Callable

from .collision.bricks import resolve_bricks
from .collision.paddle import resolve_paddle
from .collision.walls import exited_bottom, resolve_side_walls, resolve_top_wall
from .config import GameConfig
from .core.combo import ComboTracker, ShakeCue
from .core.timers import TimerQueue
from .events import CollisionKind, EventSink
from .grid import BrickGrid, build_brick_grid
from .levels import LevelCatalog, default_catalog
from .profiler import Profiler
from .snapshot import (
    BallView,
    BrickView,
    ComboView,
    FrameSnapshot,
    PaddleView,
    ShakeView,
    TransitionView,
)
from .transition import LevelTransition
from .types import Ball, Paddle, PlayingField, make_ball

logger = logging.getLogger(__name__)


class PaddleDirection(enum.Enum):
    LEFT = -1
    NONE = 0
    RIGHT = 1


@dataclass
class ScreenShake:
    """Active screen shake; duration counts down once per gameplay frame."""
    intensity: float = 0.0
    duration: int = 0

    def trigger(self, cue: ShakeCue) -> None:
        self.intensity = cue.intensity
        self.duration = cue.duration

    def update(self) -> None:
        if self.duration > 0:
            self.duration -= 1


def monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class GameSession:
    """
    One playthrough of the game.

    Attributes:
        config: Immutable session configuration.
        catalog: Levels available to this session.
        sink: Receiver for audio / effect cues.
        field: Brick container, fixed for the session.
        paddle: The paddle.
        balls: Balls in play, never empty.
        grid: Brick grid of the current level.
        combo: Combo tracker (its decay timer lives in `timers`).
        transition: Level transition state machine.
        shake: Current screen shake.
        score: Score of the playthrough.
        level: Current level number.
        finished: True once the last level has been cleared.
        frame: Number of simulated frames.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        catalog: LevelCatalog | None = None,
        sink: EventSink | None = None,
        clock: Callable[[], float] | None = None,
        profiler: Profiler | None = None,
        level: int = 1,
    ) -> None:
        self.config = config or GameConfig()
        self.catalog = catalog or default_catalog()
        self.sink = sink or EventSink()
        self.clock = clock or monotonic_ms
        self.profiler = profiler

        cfg = self.config
        self.width = cfg.canvas_width
        self.height = cfg.canvas_height
        self.field = PlayingField.from_config(cfg)

        self.timers = TimerQueue()
        self.combo = ComboTracker(
            self.timers,
            window_ms=cfg.combo_window_ms,
            max_multiplier=cfg.max_multiplier,
            points_per_brick=cfg.points_per_brick,
        )
        self.transition = LevelTransition(
            duration=cfg.transition_frames,
            advance_fraction=cfg.transition_advance_fraction,
        )
        self.shake = ScreenShake()
        self.paddle = Paddle.from_config(cfg)
        self.balls: list[Ball] = []
        self.grid: BrickGrid | None = None

        self.score = 0
        self.level = 0
        self.finished = False
        self.frame = 0
        self._last_frame_ms = 0.0

        self.start_level(level)

    # ------------------------------------------------------------------
    # Level lifecycle
    # ------------------------------------------------------------------

    def start_level(self, level: int) -> None:
        """
        (Re)start a level.

        Starting level 1 begins a new playthrough: score and combo reset.
        Other levels keep both.

        Raises:
            ValueError: If the level is not in the catalog.
        """
        self.catalog.get(level)
        self.transition.cancel()
        self._load_level(level)

    def _load_level(self, level: int) -> None:
        definition = self.catalog.get(level)
        if level == 1:
            self.score = 0
            self.combo.reset()

        self.level = level
        self.finished = False
        self.grid = build_brick_grid(
            definition,
            self.field,
            aspect_ratio=self.config.brick_aspect_ratio,
            min_padding=self.config.min_brick_padding,
        )
        self.paddle.recenter(self.width)
        self.balls = [make_ball(self.paddle, self.config)]
        logger.info(
            "Level %d initialized with %dx%d grid, %d bricks",
            level, definition.rows, definition.cols, self.grid.total_count,
        )

    def is_level_complete(self) -> bool:
        return self.grid.is_complete()

    # ------------------------------------------------------------------
    # Input intents
    # ------------------------------------------------------------------

    @property
    def accepts_input(self) -> bool:
        return not (self.finished or self.transition.active)

    def move_paddle(self, direction: PaddleDirection) -> None:
        """
        Set the paddle velocity from a move intent.

        NONE (key released) always stops the paddle, even while input is
        otherwise ignored, so it cannot keep sliding after a transition.
        """
        if not isinstance(direction, PaddleDirection):
            raise TypeError(f"Unknown paddle direction: {direction!r}")
        if direction is not PaddleDirection.NONE and not self.accepts_input:
            return
        self.paddle.dx = direction.value * self.paddle.speed

    def launch_ball(self) -> Ball | None:
        """
        Launch a resting ball.

        In multi-ball mode every launch adds a fresh ball and launches it.
        Otherwise only a resting first ball is launched.

        Returns:
            The launched ball, or None if nothing was launched.
        """
        if not self.accepts_input:
            return None
        if self.config.multi_ball:
            ball = make_ball(self.paddle, self.config)
            self.balls.append(ball)
            self._launch(ball)
            logger.debug("New ball added. Total balls: %d", len(self.balls))
            return ball
        if self.balls and not self.balls[0].moving:
            self._launch(self.balls[0])
            return self.balls[0]
        return None

    def _launch(self, ball: Ball) -> None:
        """Initial velocity follows the paddle's motion: 45 degrees or straight up."""
        s = self.config.ball_speed
        ball.moving = True
        if self.paddle.dx > 0:
            ball.velocity[:] = (s, -s)
        elif self.paddle.dx < 0:
            ball.velocity[:] = (-s, -s)
        else:
            # Same speed as the diagonal launches
            ball.velocity[:] = (0.0, -s * math.sqrt(2))

    # ------------------------------------------------------------------
    # Frame loop
    # ------------------------------------------------------------------

    def tick(self, now_ms: float | None = None) -> bool:
        """
        Frame-gated entry point for the driver.

        Args:
            now_ms: Current time in milliseconds (defaults to the clock).

        Returns:
            True if a frame was simulated, False if the call was coalesced.
        """
        now = self.clock() if now_ms is None else float(now_ms)
        self.timers.run_due(now)
        if now - self._last_frame_ms < self.config.frame_time_ms:
            return False
        self._last_frame_ms = now
        self.step(now)
        return True

    def step(self, now_ms: float | None = None) -> None:
        """Advance the simulation by exactly one frame."""
        now = self.clock() if now_ms is None else float(now_ms)
        self.timers.run_due(now)
        if self.finished:
            return
        self.frame += 1

        if self.transition.active:
            with self._phase("transition"):
                if self.transition.update():
                    self._load_level(self.level + 1)
            return

        self.shake.update()
        with self._phase("paddle"):
            self.paddle.move(self.width)
        with self._phase("balls"):
            self._update_balls(now)
        with self._phase("completion"):
            self._check_completion()

    def _phase(self, name: str):
        if self.profiler is None:
            return contextlib.nullcontext()
        return self.profiler.section(name)

    def _update_balls(self, now: float) -> None:
        cfg = self.config
        for ball in list(self.balls):
            if not ball.moving:
                # Ball rides the paddle until launched
                ball.position[0] = self.paddle.center_x
                continue

            ball.integrate()

            if resolve_side_walls(ball, self.width):
                self.sink.on_collision(CollisionKind.WALL, self.combo.multiplier)
            if resolve_top_wall(ball):
                self.sink.on_collision(CollisionKind.WALL, self.combo.multiplier)

            if resolve_paddle(ball, self.paddle, cfg.max_bounce_angle, cfg.min_vertical_speed_ratio):
                self.combo.reset_on_paddle()
                self.sink.on_collision(CollisionKind.PADDLE, self.combo.multiplier)

            if exited_bottom(ball, self.height):
                self.balls.remove(ball)
                logger.debug("Ball removed. Remaining balls: %d", len(self.balls))
                if not self.balls:
                    self.balls.append(make_ball(self.paddle, cfg))
                continue

            brick = resolve_bricks(
                ball, self.grid, cfg.min_vertical_speed_ratio, cfg.ball_speed * math.sqrt(2)
            )
            if brick is not None:
                self._score_brick(now)

    def _score_brick(self, now: float) -> None:
        hit = self.combo.register_hit(now)
        self.score += hit.points
        if hit.shake is not None:
            self.shake.trigger(hit.shake)
            self.sink.on_screen_shake(hit.shake.intensity, hit.shake.duration)
            logger.debug(
                "Screen shake: intensity=%s, duration=%s", hit.shake.intensity, hit.shake.duration
            )
        self.sink.on_collision(CollisionKind.BRICK, hit.multiplier)

    def _check_completion(self) -> None:
        if not self.grid.is_complete():
            return
        logger.info(
            "Level %d complete! All %d bricks destroyed. Max level: %d",
            self.level, self.grid.total_count, self.catalog.max_level,
        )
        self.sink.on_level_complete(self.level, self.score)
        if self.catalog.has_next(self.level):
            self.transition.start(self.level, self.score)
        else:
            self.finished = True
            logger.info("Game complete! Final score: %d", self.score)
            self.sink.on_game_complete(self.score)

    # ------------------------------------------------------------------
    # Renderer view
    # ------------------------------------------------------------------

    def snapshot(self) -> FrameSnapshot:
        """Immutable copy of everything a renderer draws."""
        p = self.paddle
        t = self.transition
        return FrameSnapshot(
            frame=self.frame,
            level=self.level,
            score=self.score,
            finished=self.finished,
            paddle=PaddleView(p.x, p.y, p.width, p.height, p.dx),
            balls=tuple(
                BallView(
                    float(b.position[0]), float(b.position[1]), b.radius,
                    float(b.velocity[0]), float(b.velocity[1]), b.moving,
                )
                for b in self.balls
            ),
            bricks=tuple(
                BrickView(b.row, b.col, b.x, b.y, b.width, b.height, b.visible)
                for b in self.grid
            ),
            active_bricks=self.grid.active_count,
            total_bricks=self.grid.total_count,
            combo=ComboView(self.combo.count, self.combo.multiplier),
            shake=ShakeView(self.shake.intensity, self.shake.duration),
            transition=TransitionView(
                phase=t.phase.value,
                progress=t.progress,
                alpha=t.alpha,
                opacities=tuple(t.opacities.items()),
                level=t.level,
                display_score=t.display_score,
            ),
        )
