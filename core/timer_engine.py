# -*- coding: utf-8 -*-

from dataclasses import dataclass

from core.duration import DEFAULT_SECONDS, MAX_SECONDS, MIN_SECONDS, clamp_seconds


@dataclass(frozen=True)
class CountdownSnapshot:
    target_seconds: int
    remaining_seconds: int
    is_running: bool
    max_seconds: int


class CountdownEngine:
    """
    Pure countdown state (no Tkinter, no scheduling).
    The service owns the tick source and calls tick() each second.
    """

    def __init__(self, target_seconds: int = DEFAULT_SECONDS, max_seconds: int = MAX_SECONDS):
        if max_seconds < MIN_SECONDS:
            raise ValueError("max_seconds must be positive")
        self.max_seconds = int(max_seconds)
        self.target_seconds = clamp_seconds(target_seconds, self.max_seconds)
        self.remaining_seconds = self.target_seconds
        self.is_running = False

    def snapshot(self) -> CountdownSnapshot:
        return CountdownSnapshot(
            target_seconds=self.target_seconds,
            remaining_seconds=self.remaining_seconds,
            is_running=self.is_running,
            max_seconds=self.max_seconds,
        )

    def in_range(self, seconds: int) -> bool:
        return MIN_SECONDS <= seconds <= self.max_seconds

    def set_target(self, seconds: int) -> None:
        if not self.in_range(seconds):
            raise ValueError(f"target out of range: {seconds}")
        # idle edits keep both values in sync
        self.target_seconds = int(seconds)
        self.remaining_seconds = self.target_seconds

    def rewind(self) -> None:
        self.remaining_seconds = self.target_seconds

    def tick(self) -> bool:
        """
        Returns True if the countdown completed on this tick.
        Completion happens on the tick that reaches zero, or on the first
        tick after starting from zero.
        """
        if not self.is_running:
            return False

        if self.remaining_seconds > 0:
            self.remaining_seconds -= 1

        if self.remaining_seconds > 0:
            return False

        self.is_running = False
        return True
