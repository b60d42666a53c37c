# -*- coding: utf-8 -*-

import logging
from typing import Callable, Optional

from core.duration import (
    DEFAULT_SECONDS,
    MAX_SECONDS,
    MIN_SECONDS,
    InvalidDuration,
    clean_duration_input,
    format_display,
    parse_duration,
)
from core.scheduler import Scheduler, TickHandle
from core.timer_engine import CountdownEngine, CountdownSnapshot
from domain.models import DurationCheck

log = logging.getLogger(__name__)

TICK_INTERVAL_MS = 1000


class CountdownService:
    """
    Orchestrates:
    - CountdownEngine state
    - the single repeating tick source
    - duration validation for the input dialog
    - callbacks for UI
    """

    def __init__(
        self,
        scheduler: Scheduler,
        target_seconds: int = DEFAULT_SECONDS,
        max_seconds: int = MAX_SECONDS,
    ):
        self.scheduler = scheduler
        self.engine = CountdownEngine(target_seconds=target_seconds, max_seconds=max_seconds)

        self._tick_handle: Optional[TickHandle] = None

        self._on_tick: Optional[Callable[[CountdownSnapshot], None]] = None
        self._on_state_change: Optional[Callable[[CountdownSnapshot], None]] = None
        self._on_complete: Optional[Callable[[CountdownSnapshot], None]] = None

    # ----- Callbacks -----
    def set_on_tick(self, fn: Callable[[CountdownSnapshot], None]) -> None:
        self._on_tick = fn

    def set_on_state_change(self, fn: Callable[[CountdownSnapshot], None]) -> None:
        self._on_state_change = fn

    def set_on_complete(self, fn: Callable[[CountdownSnapshot], None]) -> None:
        self._on_complete = fn

    def _emit_tick(self) -> None:
        if self._on_tick:
            self._on_tick(self.engine.snapshot())

    def _emit_state_change(self) -> None:
        if self._on_state_change:
            self._on_state_change(self.engine.snapshot())

    def _emit_complete(self) -> None:
        if self._on_complete:
            self._on_complete(self.engine.snapshot())

    # ----- State -----
    def snapshot(self) -> CountdownSnapshot:
        return self.engine.snapshot()

    @property
    def target_seconds(self) -> int:
        return self.engine.target_seconds

    @property
    def remaining_seconds(self) -> int:
        return self.engine.remaining_seconds

    @property
    def is_running(self) -> bool:
        return self.engine.is_running

    @property
    def max_seconds(self) -> int:
        return self.engine.max_seconds

    @property
    def can_reset(self) -> bool:
        return self.is_running or self.remaining_seconds != self.target_seconds

    @property
    def can_edit_duration(self) -> bool:
        return not self.is_running

    @property
    def display_text(self) -> str:
        return format_display(self.remaining_seconds)

    # ----- Public API -----
    def start(self) -> None:
        # never two tick sources at once
        self._cancel_tick()
        self._tick_handle = self.scheduler.schedule_repeating(TICK_INTERVAL_MS, self.tick)
        self.engine.is_running = True
        log.debug("started at %ss", self.remaining_seconds)
        self._emit_state_change()

    def pause(self) -> None:
        was_running = self.is_running or self._tick_handle is not None
        self._cancel_tick()
        self.engine.is_running = False
        if was_running:
            log.debug("paused at %ss", self.remaining_seconds)
            self._emit_state_change()

    def reset(self) -> None:
        self.pause()
        self.engine.rewind()
        self._emit_state_change()

    def toggle_running(self) -> None:
        if self.is_running:
            self.pause()
        else:
            self.start()

    def tick(self) -> None:
        """
        Called once per second by the scheduler while running.
        """
        if not self.is_running:
            return

        completed = self.engine.tick()
        self._emit_tick()

        if completed:
            self.pause()
            log.info("countdown of %ss complete", self.target_seconds)
            self._emit_complete()

    def set_target_seconds(self, seconds: int) -> bool:
        """
        Returns False (state unchanged) while running or when out of range.
        """
        if self.is_running or not self.engine.in_range(seconds):
            return False
        self.engine.set_target(seconds)
        self._emit_state_change()
        return True

    def step_target(self, delta: int) -> bool:
        if self.is_running:
            return False
        seconds = min(max(self.target_seconds + int(delta), MIN_SECONDS), self.max_seconds)
        if seconds == self.target_seconds:
            return False
        return self.set_target_seconds(seconds)

    def validate_duration_input(self, raw: str) -> DurationCheck:
        return clean_duration_input(raw, self.max_seconds)

    def can_commit(self, text: str) -> bool:
        if self.is_running:
            return False
        try:
            parse_duration(text, self.max_seconds)
        except InvalidDuration:
            return False
        return True

    def commit_duration(self, text: str) -> None:
        """
        Raises InvalidDuration and leaves state untouched unless text is an
        integer in range and the countdown is idle.
        """
        try:
            seconds = parse_duration(text, self.max_seconds)
        except InvalidDuration:
            log.warning("rejected duration %r", text)
            raise
        if not self.set_target_seconds(seconds):
            log.warning("rejected duration %r while running", text)
            raise InvalidDuration(
                text,
                self.max_seconds,
                message="Duration can't be changed while the countdown is running",
            )
        log.debug("duration set to %ss", seconds)

    def try_commit_duration(self, text: str) -> bool:
        """
        Non-raising commit for the stepper's typed text.
        Anything commit_duration would reject leaves the target untouched.
        """
        if not self.can_commit(text):
            return False
        self.commit_duration(text)
        return True

    def close(self) -> None:
        """Screen teardown: no tick may fire after this."""
        self._cancel_tick()
        self.engine.is_running = False

    # ----- Tick source internals -----
    def _cancel_tick(self) -> None:
        if self._tick_handle is not None:
            try:
                self.scheduler.cancel(self._tick_handle)
            finally:
                self._tick_handle = None
