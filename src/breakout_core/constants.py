# MIT License (see LICENSE)
"""
Game constants used throughout the simulation core.

Units are canvas pixels for lengths, pixels per frame for velocities and
milliseconds for wall-clock durations. Frame counts are used for the
non-interactive animations (screen shake, level transition).
"""
from __future__ import annotations
import math

# Nominal frame rate; frames arriving faster than 1000 / FPS ms are coalesced.
FPS: int = 60

# Default display surface.
CANVAS_WIDTH: float = 800.0
CANVAS_HEIGHT: float = 600.0

# Brick container margins, measured from the canvas edges.
# The container only uses 75% of the vertical space left between the margins,
# the rest is open space above the paddle.
MARGIN_X: float = 40.0
MARGIN_TOP: float = 80.0
MARGIN_BOTTOM: float = 100.0
CONTAINER_HEIGHT_FACTOR: float = 0.75

# Brick layout: width:height ratio and minimum gap between neighbouring bricks.
BRICK_ASPECT_RATIO: float = 2.5
MIN_BRICK_PADDING: float = 4.0

# Paddle defaults (top-left corner position).
PADDLE_WIDTH: float = 100.0
PADDLE_HEIGHT: float = 20.0
PADDLE_X: float = 350.0
PADDLE_Y: float = 550.0
PADDLE_SPEED: float = 8.0

# Ball defaults. A resting ball sits BALL_REST_GAP above the paddle top.
BALL_RADIUS: float = 8.0
BALL_SPEED: float = 4.0
BALL_REST_GAP: float = 12.0

# Paddle bounce angle range is [-MAX_BOUNCE_ANGLE, +MAX_BOUNCE_ANGLE] from vertical.
MAX_BOUNCE_ANGLE: float = math.pi / 3

# |dy| is never allowed below this fraction of the ball speed after a bounce.
MIN_VERTICAL_SPEED_RATIO: float = 0.3

# Combo / scoring
COMBO_WINDOW_MS: float = 1000.0
MAX_MULTIPLIER: int = 8
POINTS_PER_BRICK: int = 10
SHAKE_EVERY: int = 5
SHAKE_MAX_INTENSITY: float = 12.0
SHAKE_MAX_DURATION: int = 15

# Level transition (frames at the nominal frame rate).
TRANSITION_FRAMES: int = 300
TRANSITION_ADVANCE_FRACTION: float = 0.7

# Below this magnitude a collision normal is treated as degenerate.
NORMAL_EPS: float = 1e-4
