# MIT License (see LICENSE)
"""
breakout_core - Simulation core of a single-player block-breaking game.

This package advances the game state frame by frame and resolves the
collisions between balls, the paddle, the brick grid and the canvas
boundary. Rendering, audio and input devices are external collaborators:
the core receives intents, emits cues and exposes read-only snapshots.

Main entry points:
    - GameSession: Owns the game state and runs the frame loop.
    - GameConfig: Immutable tunables (canvas size, speeds, combo window...).
    - LevelCatalog / LevelDefinition: Level shapes and brick patterns.
    - EventSink: Receiver for collision / effect cues.

Submodules:
    - collision: Wall, paddle and brick collision response.
    - core: Timers, combo tracking and invariant checks.
    - io: JSON configuration and snapshot serialization.
    - renderer: Optional visualization adapters.

Example:
    from breakout_core import GameSession, PaddleDirection
    
    session = GameSession()
    session.move_paddle(PaddleDirection.RIGHT)
    session.launch_ball()
    session.step()
"""
from .session import GameSession, PaddleDirection
from .config import GameConfig
from .levels import LevelCatalog, LevelDefinition, default_catalog
from .events import CollisionKind, EventSink, RecordingSink
from .types import PlayingField, Paddle, Ball, Brick

__all__ = [
    # Session
    "GameSession",
    "PaddleDirection",
    "GameConfig",
    # Levels
    "LevelCatalog",
    "LevelDefinition",
    "default_catalog",
    # Events
    "CollisionKind",
    "EventSink",
    "RecordingSink",
    # Entities
    "PlayingField",
    "Paddle",
    "Ball",
    "Brick",
]
