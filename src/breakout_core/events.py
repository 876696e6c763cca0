# MIT License (see LICENSE)
"""
Event sinks for the collaborators around the simulation core.

The core never plays audio or shakes the screen itself; it reports cues to
an EventSink. The base class ignores every event, so collaborators only
override what they care about.
"""
from __future__ import annotations
import enum
from dataclasses import dataclass
from typing import Any


class CollisionKind(enum.Enum):
    WALL = "wall"
    PADDLE = "paddle"
    BRICK = "brick"


class EventSink:
    """
    No-op receiver for simulation cues.
    
    Subclass and override the hooks needed, e.g. an audio layer only
    implements on_collision and picks a pitch from the kind and multiplier.
    """

    def on_collision(self, kind: CollisionKind, multiplier: int) -> None:
        pass

    def on_screen_shake(self, intensity: float, duration: int) -> None:
        pass

    def on_level_complete(self, level: int, score: int) -> None:
        pass

    def on_game_complete(self, score: int) -> None:
        pass


@dataclass(frozen=True)
class RecordedEvent:
    name: str
    args: tuple[Any, ...]


class RecordingSink(EventSink):
    """
    Sink that keeps every event in arrival order.
    
    Example:
        sink = RecordingSink()
        session = GameSession(sink=sink)
        ...
        assert sink.collisions(CollisionKind.PADDLE)
    """

    def __init__(self) -> None:
        self.events: list[RecordedEvent] = []

    def on_collision(self, kind: CollisionKind, multiplier: int) -> None:
        self.events.append(RecordedEvent("collision", (kind, multiplier)))

    def on_screen_shake(self, intensity: float, duration: int) -> None:
        self.events.append(RecordedEvent("screen_shake", (intensity, duration)))

    def on_level_complete(self, level: int, score: int) -> None:
        self.events.append(RecordedEvent("level_complete", (level, score)))

    def on_game_complete(self, score: int) -> None:
        self.events.append(RecordedEvent("game_complete", (score,)))

    def named(self, name: str) -> list[RecordedEvent]:
        return [e for e in self.events if e.name == name]

    def collisions(self, kind: CollisionKind | None = None) -> list[RecordedEvent]:
        return [
            e for e in self.named("collision")
            if kind is None or e.args[0] is kind
        ]

    def clear(self) -> None:
        self.events.clear()
