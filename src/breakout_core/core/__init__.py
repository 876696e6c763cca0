# MIT License (see LICENSE)
"""
Core game-rule components.

This subpackage provides:
    - Timers: single-threaded cancellable delayed callbacks.
    - Combo: combo count, score multiplier and decay.
    - Invariants: checks used to verify long simulation runs.

Typical usage:
    from breakout_core.core import TimerQueue, ComboTracker
    
    timers = TimerQueue()
    combo = ComboTracker(timers)
    hit = combo.register_hit(now_ms)
    timers.run_due(later_ms)
"""
from .timers import TimerHandle, TimerQueue
from .combo import ComboTracker, ComboHit, ShakeCue, shake_for_count
from .invariants import (
    ball_speed,
    moving_ball_speeds,
    paddle_in_bounds,
    ball_within_walls,
    brick_accounting_ok,
)

__all__ = [
    # Timers
    "TimerHandle",
    "TimerQueue",
    # Combo
    "ComboTracker",
    "ComboHit",
    "ShakeCue",
    "shake_for_count",
    # Invariants
    "ball_speed",
    "moving_ball_speeds",
    "paddle_in_bounds",
    "ball_within_walls",
    "brick_accounting_ok",
]
