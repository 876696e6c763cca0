# MIT License (see LICENSE)
"""
Renderer adapters for drawing session snapshots.

This module provides an abstract base class for rendering and a few
concrete implementations. The simulation core has no rendering
dependency; adapters only ever read FrameSnapshot objects.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, TextIO
import dataclasses
import sys

from ..snapshot import (
    BallView,
    BrickView,
    ComboView,
    FrameSnapshot,
    PaddleView,
    TransitionView,
)


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.
    
    Subclasses implement the drawing hooks for a graphics backend
    (pygame, a web canvas bridge, a terminal...).
    
    Usage:
        renderer = MyRenderer()
        renderer.render_snapshot(session.snapshot())
    """

    @abstractmethod
    def begin_frame(self, frame: int) -> None:
        """Begin a new frame; frame is the session frame counter."""
        ...

    @abstractmethod
    def draw_paddle(self, paddle: PaddleView) -> None:
        ...

    @abstractmethod
    def draw_ball(self, ball: BallView) -> None:
        ...

    @abstractmethod
    def draw_brick(self, brick: BrickView) -> None:
        """Draw one visible brick."""
        ...

    @abstractmethod
    def draw_overlay(self, transition: TransitionView, combo: ComboView, score: int) -> None:
        """Draw score, combo counter and the transition fade."""
        ...

    @abstractmethod
    def end_frame(self) -> None:
        ...

    def render_snapshot(self, snapshot: FrameSnapshot) -> None:
        """
        Draw a whole frame: bricks still in play, paddle, balls, overlay.
        """
        self.begin_frame(snapshot.frame)
        for brick in snapshot.bricks:
            if brick.visible:
                self.draw_brick(brick)
        self.draw_paddle(snapshot.paddle)
        for ball in snapshot.balls:
            self.draw_ball(ball)
        self.draw_overlay(snapshot.transition, snapshot.combo, snapshot.score)
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Console/text renderer for development and testing.
    
    Output:
        === Frame 42 ===
        paddle @ (350.0, 550.0) 100x20 dx=8.0
        ball @ (400.0, 500.0) r=8 v=(0.00, -5.66) moving
        bricks: 79
        score=10 combo=1x1 transition=idle
    """

    def __init__(self, output: TextIO | None = None, verbose: bool = False):
        """
        Args:
            output: Output stream (defaults to sys.stdout).
            verbose: If True, print one line per brick instead of a count.
        """
        self.output = output or sys.stdout
        self.verbose = verbose
        self._bricks = 0

    def begin_frame(self, frame: int) -> None:
        self._bricks = 0
        self.output.write(f"=== Frame {frame} ===\n")

    def draw_paddle(self, paddle: PaddleView) -> None:
        self.output.write(
            f"paddle @ ({paddle.x:.1f}, {paddle.y:.1f}) "
            f"{paddle.width:.0f}x{paddle.height:.0f} dx={paddle.dx:.1f}\n"
        )

    def draw_ball(self, ball: BallView) -> None:
        state = "moving" if ball.moving else "resting"
        self.output.write(
            f"ball @ ({ball.x:.1f}, {ball.y:.1f}) r={ball.radius:g} "
            f"v=({ball.dx:.2f}, {ball.dy:.2f}) {state}\n"
        )

    def draw_brick(self, brick: BrickView) -> None:
        self._bricks += 1
        if self.verbose:
            self.output.write(
                f"brick [{brick.row}][{brick.col}] @ ({brick.x:.1f}, {brick.y:.1f})\n"
            )

    def draw_overlay(self, transition: TransitionView, combo: ComboView, score: int) -> None:
        self.output.write(f"bricks: {self._bricks}\n")
        line = f"score={score} combo={combo.count}x{combo.multiplier} transition={transition.phase}"
        if transition.phase != "idle":
            line += f" alpha={transition.alpha:.2f}"
        self.output.write(line + "\n")

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """No-op renderer, useful for headless runs and benchmarks."""

    def begin_frame(self, frame: int) -> None:
        pass

    def draw_paddle(self, paddle: PaddleView) -> None:
        pass

    def draw_ball(self, ball: BallView) -> None:
        pass

    def draw_brick(self, brick: BrickView) -> None:
        pass

    def draw_overlay(self, transition: TransitionView, combo: ComboView, score: int) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Renderer that records frame data for later retrieval.
    
    Example:
        renderer = BufferedRenderer()
        for _ in range(100):
            session.step()
            renderer.render_snapshot(session.snapshot())
        
        for frame in renderer.frames:
            print(frame["frame"], len(frame["bricks"]))
    """

    def __init__(self):
        self.frames: list[dict[str, Any]] = []
        self._current_frame: dict[str, Any] | None = None

    def begin_frame(self, frame: int) -> None:
        self._current_frame = {
            "frame": frame,
            "paddle": None,
            "balls": [],
            "bricks": [],
            "overlay": None,
        }

    def draw_paddle(self, paddle: PaddleView) -> None:
        if self._current_frame is not None:
            self._current_frame["paddle"] = dataclasses.asdict(paddle)

    def draw_ball(self, ball: BallView) -> None:
        if self._current_frame is not None:
            self._current_frame["balls"].append(dataclasses.asdict(ball))

    def draw_brick(self, brick: BrickView) -> None:
        if self._current_frame is not None:
            self._current_frame["bricks"].append((brick.row, brick.col))

    def draw_overlay(self, transition: TransitionView, combo: ComboView, score: int) -> None:
        if self._current_frame is not None:
            self._current_frame["overlay"] = {
                "phase": transition.phase,
                "alpha": transition.alpha,
                "combo": combo.count,
                "multiplier": combo.multiplier,
                "score": score,
            }

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def clear(self) -> None:
        self.frames.clear()
