# MIT License (see LICENSE)
"""
Read-only views of the session state for renderers.

A FrameSnapshot is built from plain floats and tuples, so holding on to it
never aliases the arrays the physics step mutates.
"""
from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class PaddleView:
    x: float
    y: float
    width: float
    height: float
    dx: float


@dataclass(frozen=True)
class BallView:
    x: float
    y: float
    radius: float
    dx: float
    dy: float
    moving: bool


@dataclass(frozen=True)
class BrickView:
    row: int
    col: int
    x: float
    y: float
    width: float
    height: float
    visible: bool


@dataclass(frozen=True)
class ComboView:
    count: int
    multiplier: int


@dataclass(frozen=True)
class ShakeView:
    intensity: float
    duration: int


@dataclass(frozen=True)
class TransitionView:
    phase: str
    progress: float
    alpha: float
    opacities: tuple[tuple[str, float], ...]
    level: int
    display_score: int


@dataclass(frozen=True)
class FrameSnapshot:
    """
    Everything a renderer needs to draw one frame.
    
    Attributes:
        frame: Number of simulated frames so far.
        level: Current level number.
        score: Current score.
        finished: True once the last level has been cleared.
        paddle, balls, bricks: Entity views (bricks include gap cells).
        active_bricks, total_bricks: Brick counters.
        combo, shake, transition: Effect state.
    """
    frame: int
    level: int
    score: int
    finished: bool
    paddle: PaddleView
    balls: tuple[BallView, ...]
    bricks: tuple[BrickView, ...]
    active_bricks: int
    total_bricks: int
    combo: ComboView
    shake: ShakeView
    transition: TransitionView
