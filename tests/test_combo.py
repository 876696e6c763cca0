import pytest
from breakout_core.core import ComboTracker, ShakeCue, TimerQueue
from breakout_core.core.combo import shake_for_count


@pytest.fixture
def timers():
    return TimerQueue()


@pytest.fixture
def combo(timers):
    return ComboTracker(timers)


def test_rapid_hits_build_multiplier(combo):
    """
    Hits 100 ms apart:
          count      1, 2, 3, 4, 5
          multiplier min(count // 3 + 1, 8) = 1, 1, 2, 2, 2
          points     10 * multiplier, total 80
    The fifth hit emits the first shake cue (3 + 2, 5 + 2).
    """
    hits = [combo.register_hit(t) for t in (0, 100, 200, 300, 400)]
    assert [h.count for h in hits] == [1, 2, 3, 4, 5]
    assert [h.multiplier for h in hits] == [1, 1, 2, 2, 2]
    assert sum(h.points for h in hits) == 80
    assert hits[0].extended is False
    assert all(h.extended for h in hits[1:])
    assert [h.shake for h in hits[:4]] == [None] * 4
    assert hits[4].shake == ShakeCue(intensity=5.0, duration=7)


def test_gap_of_full_window_starts_new_combo(combo):
    """Extension needs gap < window; a gap of exactly 1000 ms restarts at count 1."""
    combo.register_hit(0)
    combo.register_hit(500)
    hit = combo.register_hit(1500)
    assert hit.count == 1
    assert hit.multiplier == 1
    assert not hit.extended


def test_multiplier_capped(combo):
    """30 // 3 + 1 = 11 is capped at max_multiplier = 8."""
    assert combo.multiplier_for(21) == 8
    assert combo.multiplier_for(100) == 8
    for t in range(30):
        hit = combo.register_hit(t * 10)
    assert hit.count == 30
    assert hit.multiplier == 8
    assert hit.points == 80


@pytest.mark.parametrize("count, expected", [
    (5, ShakeCue(5.0, 7)),
    (10, ShakeCue(7.0, 9)),
    (25, ShakeCue(12.0, 15)),
    (40, ShakeCue(12.0, 15)),
    (3, None),
    (0, None),
])
def test_shake_for_count(count, expected):
    """intensity = min(3 + 2L, 12), duration = min(5 + 2L, 15) with L = count // 5."""
    assert shake_for_count(count) == expected


def test_decay_fires_after_window(combo, timers):
    """Decay fires at last_hit + window, not before."""
    combo.register_hit(0)
    combo.register_hit(100)
    timers.run_due(1099)
    assert combo.count == 2
    timers.run_due(1100)
    assert combo.count == 0
    assert combo.multiplier == 1
    assert not combo.decay_pending


def test_each_hit_rearms_decay(combo, timers):
    """The deadline moves with every hit; the stale timer never fires."""
    combo.register_hit(0)
    combo.register_hit(500)
    assert timers.run_due(1000) == 0
    assert combo.count == 2
    assert timers.run_due(1500) == 1
    assert combo.count == 0


def test_paddle_reset_cancels_decay(combo, timers):
    """Paddle hit: (count, multiplier) = (0, 1) and no decay pending."""
    for t in (0, 100, 200):
        combo.register_hit(t)
    combo.reset_on_paddle()
    assert (combo.count, combo.multiplier) == (0, 1)
    assert not combo.decay_pending
    assert timers.pending == 0
    # last hit time is kept, so the next hit extends from zero
    hit = combo.register_hit(300)
    assert hit.count == 1
    assert hit.extended


def test_full_reset_forgets_last_hit(combo):
    combo.register_hit(0)
    combo.reset()
    assert combo.last_hit_ms is None
    assert not combo.register_hit(10).extended
