"""Tests for TkScheduler against a fake widget exposing after/after_cancel."""

from core.scheduler import TkScheduler
from services.countdown_service import CountdownService


class FakeWidget:
    def __init__(self):
        self.pending = {}
        self.cancelled = []
        self._next = 0

    def after(self, ms, func, *args):
        self._next += 1
        job = f"after#{self._next}"
        self.pending[job] = (ms, func, args)
        return job

    def after_cancel(self, job):
        self.cancelled.append(job)
        self.pending.pop(job, None)

    def run_pending(self):
        jobs = list(self.pending.items())
        self.pending.clear()
        for _, (_, func, args) in jobs:
            func(*args)


def test_schedule_arms_one_call():
    widget = FakeWidget()
    calls = []
    handle = TkScheduler(widget).schedule_repeating(1000, lambda: calls.append(1))
    assert len(widget.pending) == 1
    assert list(widget.pending.values())[0][0] == 1000
    assert handle.job in widget.pending
    assert calls == []


def test_rearms_after_each_call():
    widget = FakeWidget()
    calls = []
    TkScheduler(widget).schedule_repeating(1000, lambda: calls.append(1))
    for _ in range(3):
        widget.run_pending()
        # only ever one pending call
        assert len(widget.pending) == 1
    assert calls == [1, 1, 1]


def test_cancel_removes_pending_call():
    widget = FakeWidget()
    sched = TkScheduler(widget)
    calls = []
    handle = sched.schedule_repeating(1000, lambda: calls.append(1))
    job = handle.job
    sched.cancel(handle)
    assert widget.pending == {}
    assert widget.cancelled == [job]
    widget.run_pending()
    assert calls == []


def test_cancel_twice_is_noop():
    widget = FakeWidget()
    sched = TkScheduler(widget)
    handle = sched.schedule_repeating(1000, lambda: None)
    sched.cancel(handle)
    sched.cancel(handle)
    sched.cancel(None)
    assert len(widget.cancelled) == 1


def test_callback_cancelling_itself_stops_rearm():
    widget = FakeWidget()
    sched = TkScheduler(widget)
    box = {}

    def cb():
        sched.cancel(box["handle"])

    box["handle"] = sched.schedule_repeating(1000, cb)
    widget.run_pending()
    assert widget.pending == {}


def test_service_on_tk_scheduler_runs_to_completion():
    widget = FakeWidget()
    service = CountdownService(TkScheduler(widget), target_seconds=3)
    done = []
    service.set_on_complete(done.append)

    service.start()
    for _ in range(10):
        widget.run_pending()

    assert service.remaining_seconds == 0
    assert service.is_running is False
    assert widget.pending == {}
    assert len(done) == 1
