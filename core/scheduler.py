# -*- coding: utf-8 -*-

from typing import Callable, Optional


class TickHandle:
    """Opaque handle for one repeating callback."""

    def __init__(self, interval_ms: int, callback: Callable[[], None]):
        self.interval_ms = int(interval_ms)
        self.callback = callback
        self.cancelled = False
        self.job = None  # backend-specific id of the next pending call


class Scheduler:
    def schedule_repeating(
        self, interval_ms: int, callback: Callable[[], None]
    ) -> TickHandle:
        raise NotImplementedError

    def cancel(self, handle: Optional[TickHandle]) -> None:
        raise NotImplementedError


class TkScheduler(Scheduler):
    """
    Repeating callbacks on the Tk event loop.
    Each call is re-armed only after the previous one returned, so ticks
    never overlap and are at least interval_ms apart.
    """

    def __init__(self, widget):
        self.widget = widget

    def schedule_repeating(
        self, interval_ms: int, callback: Callable[[], None]
    ) -> TickHandle:
        handle = TickHandle(interval_ms, callback)
        handle.job = self.widget.after(handle.interval_ms, self._fire, handle)
        return handle

    def _fire(self, handle: TickHandle) -> None:
        handle.job = None
        if handle.cancelled:
            return
        handle.callback()
        # callback may have cancelled us (pause on completion)
        if not handle.cancelled:
            handle.job = self.widget.after(handle.interval_ms, self._fire, handle)

    def cancel(self, handle: Optional[TickHandle]) -> None:
        if handle is None or handle.cancelled:
            return
        handle.cancelled = True
        if handle.job is not None:
            self.widget.after_cancel(handle.job)
            handle.job = None
