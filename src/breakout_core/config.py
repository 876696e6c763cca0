# MIT License (see LICENSE)
"""
Session configuration.

GameConfig gathers every tunable of the simulation core in one immutable
record. The defaults reproduce the classic 800x600 layout; a field bounds
provider (the display layer) usually only overrides the canvas size.
"""
from __future__ import annotations
from dataclasses import dataclass, field

from . import constants as C
from .util import multi_ball_enabled


@dataclass(frozen=True)
class GameConfig:
    """
    Immutable configuration for a GameSession.
    
    Attributes:
        canvas_width, canvas_height: Display surface size. Walls are the
            canvas edges; the ball leaves play through the bottom edge.
        fps: Target frame rate used by the frame gate in GameSession.tick().
        margin_x, margin_top, margin_bottom: Brick container insets.
        container_height_factor: Fraction of the inter-margin height given
            to the brick container.
        paddle_*: Paddle geometry (top-left corner) and per-frame speed.
        ball_radius, ball_speed: Ball geometry and launch speed component.
        ball_rest_gap: Gap between a resting ball's bottom edge and the paddle.
        min_brick_padding, brick_aspect_ratio: Layout engine inputs.
        combo_window_ms: Max gap between brick hits that extends a combo.
        max_multiplier: Cap on the combo score multiplier.
        points_per_brick: Base score for one destroyed brick.
        min_vertical_speed_ratio: Floor on |dy| / speed after a bounce.
        max_bounce_angle: Largest paddle deflection from vertical (radians).
        transition_frames: Length of the level transition in frames.
        transition_advance_fraction: Point of the transition at which the
            next level is built.
        multi_ball: Debug mode where every launch spawns an extra ball.
    """
    canvas_width: float = C.CANVAS_WIDTH
    canvas_height: float = C.CANVAS_HEIGHT
    fps: int = C.FPS

    margin_x: float = C.MARGIN_X
    margin_top: float = C.MARGIN_TOP
    margin_bottom: float = C.MARGIN_BOTTOM
    container_height_factor: float = C.CONTAINER_HEIGHT_FACTOR

    paddle_width: float = C.PADDLE_WIDTH
    paddle_height: float = C.PADDLE_HEIGHT
    paddle_x: float = C.PADDLE_X
    paddle_y: float = C.PADDLE_Y
    paddle_speed: float = C.PADDLE_SPEED

    ball_radius: float = C.BALL_RADIUS
    ball_speed: float = C.BALL_SPEED
    ball_rest_gap: float = C.BALL_REST_GAP

    min_brick_padding: float = C.MIN_BRICK_PADDING
    brick_aspect_ratio: float = C.BRICK_ASPECT_RATIO

    combo_window_ms: float = C.COMBO_WINDOW_MS
    max_multiplier: int = C.MAX_MULTIPLIER
    points_per_brick: int = C.POINTS_PER_BRICK

    min_vertical_speed_ratio: float = C.MIN_VERTICAL_SPEED_RATIO
    max_bounce_angle: float = C.MAX_BOUNCE_ANGLE

    transition_frames: int = C.TRANSITION_FRAMES
    transition_advance_fraction: float = C.TRANSITION_ADVANCE_FRACTION

    multi_ball: bool = field(default_factory=multi_ball_enabled)

    def __post_init__(self) -> None:
        """Reject configurations the simulation cannot run with."""
        positive = (
            "canvas_width", "canvas_height", "fps",
            "paddle_width", "paddle_height", "paddle_speed",
            "ball_radius", "ball_speed",
            "brick_aspect_ratio", "combo_window_ms", "transition_frames",
        )
        for name in positive:
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be > 0, got {getattr(self, name)!r}")
        if self.min_brick_padding < 0:
            raise ValueError("min_brick_padding must be >= 0")
        if self.max_multiplier < 1:
            raise ValueError("max_multiplier must be >= 1")
        if not 0.0 <= self.min_vertical_speed_ratio < 1.0:
            raise ValueError("min_vertical_speed_ratio must be in [0, 1)")
        if not 0.0 < self.transition_advance_fraction <= 1.0:
            raise ValueError("transition_advance_fraction must be in (0, 1]")

    @property
    def frame_time_ms(self) -> float:
        """Minimum wall-clock interval between two simulated frames."""
        return 1000.0 / self.fps
