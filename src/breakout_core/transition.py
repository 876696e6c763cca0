# MIT License (see LICENSE)
"""
Level transition state machine.

    IDLE --start()--> TRANSITIONING_IN --(advance point)--> TRANSITIONING_OUT --(duration)--> IDLE

The transition is purely frame driven: each update() advances one frame.
While fading in, three messages ("level complete", score, "next level")
ramp up at 10%, 20% and 30% of the duration. At the advance point (70% by
default) update() reports that the next level must be built, so its
entities are live while the screen is still black; the fade out then
reveals them.
"""
from __future__ import annotations
import enum
from dataclasses import dataclass

from .util import ease_in_out_cubic

MESSAGE_STARTS: dict[str, float] = {
    "level_complete": 0.1,
    "score": 0.2,
    "next_level": 0.3,
}


class TransitionPhase(enum.Enum):
    IDLE = "idle"
    TRANSITIONING_IN = "transitioning_in"
    TRANSITIONING_OUT = "transitioning_out"


def message_opacity(progress: float, start: float) -> float:
    """Opacity ramp: 0 until start, then rising 3x as fast as progress, capped at 1."""
    if progress <= start:
        return 0.0
    return min(1.0, (progress - start) * 3)


@dataclass
class LevelTransition:
    """
    Attributes:
        duration: Total length in frames.
        advance_fraction: Fraction of duration at which the next level starts.
        phase: Current TransitionPhase.
        current: Frames elapsed since start().
        alpha: Black overlay opacity in [0, 1].
        opacities: Message name -> opacity in [0, 1].
        level: The level that was just completed.
        display_score: Score shown on the "level complete" card.
    """
    duration: int = 300
    advance_fraction: float = 0.7
    phase: TransitionPhase = TransitionPhase.IDLE
    current: int = 0
    alpha: float = 0.0
    level: int = 0
    display_score: int = 0

    def __post_init__(self) -> None:
        self.opacities: dict[str, float] = {name: 0.0 for name in MESSAGE_STARTS}

    @property
    def active(self) -> bool:
        return self.phase is not TransitionPhase.IDLE

    @property
    def progress(self) -> float:
        return self.current / self.duration

    @property
    def advance_frame(self) -> int:
        """Frame on which the next level is built."""
        return round(self.duration * self.advance_fraction)

    def start(self, level: int, score: int) -> None:
        """Begin fading in over the completed level."""
        self.phase = TransitionPhase.TRANSITIONING_IN
        self.current = 0
        self.alpha = 0.0
        self.level = level
        self.display_score = score
        self.opacities = {name: 0.0 for name in MESSAGE_STARTS}

    def update(self) -> bool:
        """
        Advance one frame.
        
        Returns:
            True exactly once per transition: on the frame the next level
            should be built.
        """
        if not self.active:
            return False

        self.current += 1
        progress = self.progress

        if self.phase is TransitionPhase.TRANSITIONING_IN:
            self.alpha = ease_in_out_cubic(progress * 2)
            for name, start in MESSAGE_STARTS.items():
                self.opacities[name] = message_opacity(progress, start)
            if self.current >= self.advance_frame:
                self.phase = TransitionPhase.TRANSITIONING_OUT
                return True
            return False

        self.alpha = ease_in_out_cubic(2 - progress * 2)
        if self.current >= self.duration:
            self.phase = TransitionPhase.IDLE
            self.alpha = 0.0
        return False

    def cancel(self) -> None:
        """Drop any transition in progress (e.g. a level picked from a menu)."""
        self.phase = TransitionPhase.IDLE
        self.current = 0
        self.alpha = 0.0
        self.opacities = {name: 0.0 for name in MESSAGE_STARTS}
