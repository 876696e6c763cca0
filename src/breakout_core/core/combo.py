# MIT License (see LICENSE)
"""
Combo and score multiplier tracking.

Consecutive brick hits less than `window_ms` apart build a combo:

    multiplier = min(count // 3 + 1, max_multiplier)

Every hit (re)arms a decay timer; if no further hit lands within the
window the combo drops back to count=0, multiplier=1 on its own. A paddle
hit resets the combo immediately and cancels the pending decay.

The decay callback only touches combo fields.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass

from .. import constants as C
from .timers import TimerHandle, TimerQueue

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShakeCue:
    """Screen shake request: pixel intensity and duration in frames."""
    intensity: float
    duration: int


@dataclass(frozen=True)
class ComboHit:
    """Result of registering one brick destruction."""
    count: int
    multiplier: int
    points: int
    extended: bool
    shake: ShakeCue | None = None


def shake_for_count(count: int) -> ShakeCue | None:
    """
    Shake cue emitted at every SHAKE_EVERY-th combo hit.
    
    Level 1 at 5 hits, 2 at 10 and so on; intensity grows by 2 px and the
    duration by 2 frames per level, both capped.
    """
    if count < C.SHAKE_EVERY or count % C.SHAKE_EVERY != 0:
        return None
    level = count // C.SHAKE_EVERY
    intensity = min(3 + level * 2, C.SHAKE_MAX_INTENSITY)
    duration = min(5 + level * 2, C.SHAKE_MAX_DURATION)
    return ShakeCue(intensity=float(intensity), duration=int(duration))


class ComboTracker:
    """
    Combo state machine.
    
    Attributes:
        count: Hits in the current combo.
        multiplier: Current score multiplier in [1, max_multiplier].
        last_hit_ms: Time of the last brick hit, None before the first.
    """

    def __init__(
        self,
        timers: TimerQueue,
        window_ms: float = C.COMBO_WINDOW_MS,
        max_multiplier: int = C.MAX_MULTIPLIER,
        points_per_brick: int = C.POINTS_PER_BRICK,
    ) -> None:
        self.timers = timers
        self.window_ms = float(window_ms)
        self.max_multiplier = int(max_multiplier)
        self.points_per_brick = int(points_per_brick)
        self.count = 0
        self.multiplier = 1
        self.last_hit_ms: float | None = None
        self._decay: TimerHandle | None = None

    def multiplier_for(self, count: int) -> int:
        return min(count // 3 + 1, self.max_multiplier)

    def register_hit(self, now_ms: float) -> ComboHit:
        """
        Record a brick destruction at now_ms and return the points earned.
        
        Hits within the window extend the combo; otherwise a new combo
        starts at count=1 with multiplier 1.
        """
        shake = None
        extended = (
            self.last_hit_ms is not None
            and now_ms - self.last_hit_ms < self.window_ms
        )
        if extended:
            self.count += 1
            self.multiplier = self.multiplier_for(self.count)
            shake = shake_for_count(self.count)
            logger.debug("Combo increased to %d, multiplier: %d", self.count, self.multiplier)
        else:
            self.count = 1
            self.multiplier = 1
            logger.debug("Combo reset - too much time passed")

        self.last_hit_ms = now_ms
        self._arm_decay(now_ms)

        return ComboHit(
            count=self.count,
            multiplier=self.multiplier,
            points=self.points_per_brick * self.multiplier,
            extended=extended,
            shake=shake,
        )

    def reset_on_paddle(self) -> None:
        """A paddle hit ends the combo and cancels the pending decay."""
        self._cancel_decay()
        self.count = 0
        self.multiplier = 1

    def reset(self) -> None:
        """Full reset for a new playthrough."""
        self._cancel_decay()
        self.count = 0
        self.multiplier = 1
        self.last_hit_ms = None

    @property
    def decay_pending(self) -> bool:
        return self._decay is not None and not self._decay.cancelled

    def _arm_decay(self, now_ms: float) -> None:
        self._cancel_decay()
        self._decay = self.timers.call_at(now_ms + self.window_ms, self._on_decay)

    def _cancel_decay(self) -> None:
        if self._decay is not None:
            self._decay.cancel()
            self._decay = None

    def _on_decay(self) -> None:
        self._decay = None
        if self.count:
            logger.debug("Combo expired at count %d", self.count)
        self.count = 0
        self.multiplier = 1
