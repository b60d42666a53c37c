"""Tests for the pure countdown engine."""

import pytest

from core.duration import SHORT_MAX_SECONDS
from core.timer_engine import CountdownEngine, CountdownSnapshot


def test_engine_defaults():
    engine = CountdownEngine()
    assert engine.target_seconds == 10
    assert engine.remaining_seconds == 10
    assert engine.is_running is False
    assert engine.max_seconds == 36000


def test_engine_clamps_initial_target():
    engine = CountdownEngine(target_seconds=99999, max_seconds=SHORT_MAX_SECONDS)
    assert engine.target_seconds == SHORT_MAX_SECONDS
    assert engine.remaining_seconds == SHORT_MAX_SECONDS


def test_engine_rejects_bad_max():
    with pytest.raises(ValueError):
        CountdownEngine(max_seconds=0)


def test_snapshot_is_frozen_copy():
    engine = CountdownEngine(target_seconds=5)
    snap = engine.snapshot()
    assert snap == CountdownSnapshot(
        target_seconds=5, remaining_seconds=5, is_running=False, max_seconds=36000
    )
    engine.remaining_seconds = 2
    assert snap.remaining_seconds == 5


def test_tick_ignored_while_idle():
    engine = CountdownEngine(target_seconds=5)
    assert engine.tick() is False
    assert engine.remaining_seconds == 5


def test_tick_completes_on_reaching_zero():
    engine = CountdownEngine(target_seconds=2)
    engine.is_running = True
    assert engine.tick() is False
    assert engine.remaining_seconds == 1
    assert engine.tick() is True
    assert engine.remaining_seconds == 0
    assert engine.is_running is False


def test_tick_from_zero_completes_without_decrement():
    engine = CountdownEngine(target_seconds=3)
    engine.remaining_seconds = 0
    engine.is_running = True
    assert engine.tick() is True
    assert engine.remaining_seconds == 0


def test_set_target_syncs_remaining():
    engine = CountdownEngine()
    engine.remaining_seconds = 3
    engine.set_target(42)
    assert engine.target_seconds == 42
    assert engine.remaining_seconds == 42


def test_set_target_out_of_range():
    engine = CountdownEngine(max_seconds=SHORT_MAX_SECONDS)
    with pytest.raises(ValueError):
        engine.set_target(SHORT_MAX_SECONDS + 1)
    with pytest.raises(ValueError):
        engine.set_target(0)
    assert engine.target_seconds == 10


def test_rewind():
    engine = CountdownEngine(target_seconds=8)
    engine.remaining_seconds = 1
    engine.rewind()
    assert engine.remaining_seconds == 8
