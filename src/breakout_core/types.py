# MIT License (see LICENSE)
"""
Core entity definitions for the block-breaking simulation.

Defines the plain data the physics step mutates in place:
- PlayingField: the brick container rectangle inset from the canvas.
- Paddle: player-controlled bar along the bottom of the canvas.
- Ball: circle with a per-frame velocity, either resting or moving.
- Brick: one cell of the level grid.

Positions use screen coordinates (+y down). Rectangles are described by
their top-left corner plus width/height; balls by their center.
"""
from __future__ import annotations
import math
from dataclasses import dataclass

import numpy as np

from .config import GameConfig
from .util import f64, norm


# =============================================================================
# Field
# =============================================================================

@dataclass(frozen=True)
class PlayingField:
    """
    Rectangle the brick grid is laid out in.
    
    Attributes:
        x, y: Top-left corner in canvas pixels.
        width, height: Extent in canvas pixels (both > 0).
    """
    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"PlayingField needs a positive size, got {self.width}x{self.height}"
            )

    @classmethod
    def from_canvas(
        cls,
        canvas_width: float,
        canvas_height: float,
        margin_x: float,
        margin_top: float,
        margin_bottom: float,
        height_factor: float = 0.75,
    ) -> "PlayingField":
        """
        Derive the container from the display surface size.
        
        The height is floored to whole pixels.
        """
        width = canvas_width - 2 * margin_x
        height = math.floor((canvas_height - margin_top - margin_bottom) * height_factor)
        return cls(x=margin_x, y=margin_top, width=width, height=height)

    @classmethod
    def from_config(cls, config: GameConfig) -> "PlayingField":
        return cls.from_canvas(
            config.canvas_width,
            config.canvas_height,
            config.margin_x,
            config.margin_top,
            config.margin_bottom,
            config.container_height_factor,
        )

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


# =============================================================================
# Paddle
# =============================================================================

@dataclass
class Paddle:
    """
    The player's paddle.
    
    Attributes:
        x, y: Top-left corner.
        width, height: Size in pixels.
        speed: Horizontal speed applied while a move intent is held.
        dx: Current horizontal velocity in pixels per frame.
    """
    x: float
    y: float
    width: float
    height: float
    speed: float
    dx: float = 0.0

    @classmethod
    def from_config(cls, config: GameConfig) -> "Paddle":
        return cls(
            x=config.paddle_x,
            y=config.paddle_y,
            width=config.paddle_width,
            height=config.paddle_height,
            speed=config.paddle_speed,
        )

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    def move(self, bound_width: float) -> None:
        """Advance by one frame and clamp into [0, bound_width - width]."""
        self.x += self.dx
        if self.x < 0:
            self.x = 0.0
        elif self.x + self.width > bound_width:
            self.x = bound_width - self.width

    def recenter(self, bound_width: float) -> None:
        self.x = bound_width / 2 - self.width / 2


# =============================================================================
# Ball
# =============================================================================

@dataclass(eq=False)
class Ball:
    """
    A ball in play.
    
    Attributes:
        position: Center [x, y].
        radius: Radius in pixels.
        velocity: Per-frame displacement [dx, dy].
        moving: False while the ball rests on the paddle awaiting launch.
    
    Note:
        Position and velocity are converted to float64 arrays on init.
    """
    position: np.ndarray | tuple[float, float]
    radius: float
    velocity: np.ndarray | tuple[float, float] = (0.0, 0.0)
    moving: bool = False

    def __post_init__(self) -> None:
        self.position = f64(self.position)
        self.velocity = f64(self.velocity)

    @property
    def speed(self) -> float:
        """Euclidean norm of the velocity."""
        return norm(self.velocity)

    def integrate(self) -> None:
        """Fixed per-frame step: position += velocity."""
        self.position += self.velocity


def make_ball(paddle: Paddle, config: GameConfig) -> Ball:
    """
    Create a resting ball centred on the paddle.
    
    The ball sits config.ball_rest_gap pixels above the paddle top and has
    zero velocity until launched.
    """
    r = config.ball_radius
    return Ball(
        position=(paddle.center_x, paddle.y - config.ball_rest_gap - r),
        radius=r,
        velocity=(0.0, 0.0),
        moving=False,
    )


# =============================================================================
# Brick
# =============================================================================

@dataclass
class Brick:
    """
    One cell of the brick grid.
    
    Gap cells (excluded by the level pattern) are stored too, with
    visible=False from the start, so the grid stays a full rows x cols
    rectangle indexed [row][col].
    """
    row: int
    col: int
    x: float
    y: float
    width: float
    height: float
    visible: bool = True

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def rect(self) -> tuple[float, float, float, float]:
        """(x, y, width, height)"""
        return (self.x, self.y, self.width, self.height)
