"""Shared fixtures: in-memory storage and a hand-driven scheduler."""

import pytest

from core.scheduler import Scheduler, TickHandle
from services.countdown_service import CountdownService
from storage.db import Database
from storage.repos import AppStateRepo


class ManualScheduler(Scheduler):
    """Delivers ticks only when the test calls fire()."""

    def __init__(self):
        self.scheduled = []
        self.cancelled = []

    @property
    def active(self):
        return [h for h in self.scheduled if not h.cancelled]

    def schedule_repeating(self, interval_ms, callback):
        handle = TickHandle(interval_ms, callback)
        self.scheduled.append(handle)
        return handle

    def cancel(self, handle):
        if handle is None or handle.cancelled:
            return
        handle.cancelled = True
        self.cancelled.append(handle)

    def fire(self, times=1):
        for _ in range(times):
            for handle in self.active:
                handle.callback()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def service(scheduler):
    return CountdownService(scheduler)


@pytest.fixture
def db():
    database = Database(":memory:")
    database.init_schema()
    yield database
    database.close()


@pytest.fixture
def state_repo(db):
    return AppStateRepo(db)
