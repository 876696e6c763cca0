# MIT License (see LICENSE)
"""
Frame-phase profiling.

Measures how long the phases of GameSession.step() take (paddle, balls,
completion, transition) without external dependencies.

Example:
    profiler = Profiler()
    session = GameSession(profiler=profiler)
    for _ in range(600):
        session.step()
    print(profiler.stats.summary())
"""
from __future__ import annotations
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class ProfileStats:
    """Timing samples per phase name, in seconds."""
    samples: dict[str, list[float]] = field(default_factory=dict)

    def add(self, name: str, dt: float) -> None:
        self.samples.setdefault(name, []).append(dt)

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Per-phase statistics.
        
        Returns:
            Dict mapping phase name to {'n', 'mean_ms', 'max_ms', 'total_ms'}.
        """
        out = {}
        for name, times in self.samples.items():
            n = len(times)
            out[name] = {
                "n": n,
                "mean_ms": 1e3 * (sum(times) / n),
                "max_ms": 1e3 * max(times),
                "total_ms": 1e3 * sum(times),
            }
        return out


class Profiler:
    """Context-manager based timer for named frame phases."""

    def __init__(self) -> None:
        self.stats = ProfileStats()

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self.stats.add(name, time.perf_counter() - t0)
