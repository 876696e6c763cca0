from breakout_core.core import TimerQueue


def test_fires_in_deadline_order():
    """Callbacks fire in deadline order, only once their deadline <= now."""
    timers = TimerQueue()
    fired = []
    timers.call_at(300, lambda: fired.append("c"))
    timers.call_at(100, lambda: fired.append("a"))
    timers.call_at(200, lambda: fired.append("b"))
    assert timers.run_due(250) == 2
    assert fired == ["a", "b"]
    assert timers.pending == 1
    timers.run_due(300)
    assert fired == ["a", "b", "c"]


def test_equal_deadlines_fire_in_scheduling_order():
    """Ties are broken by scheduling order."""
    timers = TimerQueue()
    fired = []
    for name in "xyz":
        timers.call_at(50, lambda n=name: fired.append(n))
    timers.run_due(50)
    assert fired == ["x", "y", "z"]


def test_cancelled_handle_never_fires():
    """Cancelled handles are dropped silently."""
    timers = TimerQueue()
    fired = []
    handle = timers.call_at(10, lambda: fired.append(1))
    handle.cancel()
    assert timers.pending == 0
    assert timers.run_due(100) == 0
    assert fired == []


def test_nothing_fires_before_deadline():
    timers = TimerQueue()
    fired = []
    timers.call_at(1000, lambda: fired.append(1))
    assert timers.run_due(999.9) == 0
    assert timers.pending == 1


def test_clear_drops_everything():
    timers = TimerQueue()
    handle = timers.call_at(1, lambda: None)
    timers.clear()
    assert handle.cancelled
    assert timers.pending == 0
    assert timers.run_due(10) == 0
