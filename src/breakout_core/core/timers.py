# MIT License (see LICENSE)
"""
Single-threaded delayed callbacks driven by a monotonic clock.

The combo decay must fire on wall-clock time even when frames are skipped,
but must never interleave with a physics step. TimerQueue gives both: the
frame driver drains it with run_due(now) between steps, on the same thread.

Cancellation is by handle: rescheduling means cancelling the old handle and
keeping the new one, so a stale callback can never fire.
"""
from __future__ import annotations
import heapq
import itertools
from dataclasses import dataclass, field
from typing import Callable


@dataclass(order=True)
class TimerHandle:
    """
    A scheduled callback.
    
    Ordered by (deadline, seq) so the heap pops the earliest deadline first
    and equal deadlines in scheduling order.
    """
    deadline: float
    seq: int
    callback: Callable[[], None] = field(compare=False)
    cancelled: bool = field(default=False, compare=False)

    def cancel(self) -> None:
        self.cancelled = True


class TimerQueue:
    """
    Heap of TimerHandles.
    
    Example:
        timers = TimerQueue()
        handle = timers.call_at(now + 1000, on_timeout)
        ...
        handle.cancel()         # never fires
        timers.run_due(now_ms)  # fires everything with deadline <= now_ms
    """

    def __init__(self) -> None:
        self._heap: list[TimerHandle] = []
        self._seq = itertools.count()

    def call_at(self, deadline: float, callback: Callable[[], None]) -> TimerHandle:
        """Schedule callback to run at the first run_due(now) with now >= deadline."""
        handle = TimerHandle(float(deadline), next(self._seq), callback)
        heapq.heappush(self._heap, handle)
        return handle

    def run_due(self, now: float) -> int:
        """
        Fire every pending callback whose deadline has passed.
        
        Returns:
            Number of callbacks fired (cancelled ones are dropped silently).
        """
        fired = 0
        while self._heap and self._heap[0].deadline <= now:
            handle = heapq.heappop(self._heap)
            if handle.cancelled:
                continue
            handle.callback()
            fired += 1
        return fired

    @property
    def pending(self) -> int:
        """Number of scheduled, not cancelled callbacks."""
        return sum(1 for h in self._heap if not h.cancelled)

    def clear(self) -> None:
        for h in self._heap:
            h.cancel()
        self._heap.clear()
