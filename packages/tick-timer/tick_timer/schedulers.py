"""Scheduler implementations: real-time threads and manually advanced time."""
from __future__ import annotations

import heapq
import logging
import threading
from dataclasses import dataclass
from typing import Callable

from tick_timer.types import ScheduleHandle

logger = logging.getLogger(__name__)


class ThreadScheduler:
    """Runs each schedule on its own daemon thread.

    The period is waited out *after* each callback returns, so callbacks
    drift by however long they take. Timing is best effort, not accurate.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._next_handle: ScheduleHandle = 1
        self._stops: dict[ScheduleHandle, threading.Event] = {}
        self._threads: dict[ScheduleHandle, threading.Thread] = {}

    @property
    def active(self) -> int:
        """Number of schedules that have not been cancelled."""
        with self._lock:
            return len(self._stops)

    def schedule(self, period: float, callback: Callable[[], None]) -> ScheduleHandle:
        if period <= 0:
            raise ValueError("period must be positive")
        stop = threading.Event()
        with self._lock:
            handle = self._next_handle
            self._next_handle += 1
            thread = threading.Thread(
                target=self._run,
                args=(handle, period, callback, stop),
                name=f"tick-timer-{handle}",
                daemon=True,
            )
            self._stops[handle] = stop
            self._threads[handle] = thread
        thread.start()
        logger.debug("Scheduled handle %d every %ss", handle, period)
        return handle

    def cancel(self, handle: ScheduleHandle) -> None:
        with self._lock:
            stop = self._stops.pop(handle, None)
        if stop is not None:
            stop.set()
            logger.debug("Cancelled handle %d", handle)

    def shutdown(self, timeout: float | None = None) -> None:
        """Cancel every live schedule and wait for their threads to exit.

        A callback already running finishes before this returns, unless
        shutdown is called from that callback's own thread.
        """
        with self._lock:
            handles = list(self._stops)
            threads = list(self._threads.values())
        for handle in handles:
            self.cancel(handle)
        current = threading.current_thread()
        for thread in threads:
            if thread is not current and thread.is_alive():
                thread.join(timeout)

    def _run(
        self,
        handle: ScheduleHandle,
        period: float,
        callback: Callable[[], None],
        stop: threading.Event,
    ) -> None:
        try:
            while not stop.wait(period):
                try:
                    callback()
                except Exception:
                    # Nobody to propagate to on this thread.
                    logger.exception("Callback for handle %d raised, cancelling", handle)
                    self.cancel(handle)
                    return
        finally:
            with self._lock:
                self._threads.pop(handle, None)


@dataclass(slots=True)
class _Entry:
    period: float
    callback: Callable[[], None]


class ManualScheduler:
    """Virtual-time scheduler. Time only moves when ``advance`` is called.

    Callbacks run synchronously inside ``advance``, in due order. Ties go
    to whichever was queued first.
    """

    def __init__(self) -> None:
        self._now = 0.0
        self._next_handle: ScheduleHandle = 1
        self._seq = 0
        self._entries: dict[ScheduleHandle, _Entry] = {}
        self._queue: list[tuple[float, int, ScheduleHandle]] = []

    @property
    def now(self) -> float:
        return self._now

    @property
    def active(self) -> int:
        """Number of schedules that have not been cancelled."""
        return len(self._entries)

    def schedule(self, period: float, callback: Callable[[], None]) -> ScheduleHandle:
        if period <= 0:
            raise ValueError("period must be positive")
        handle = self._next_handle
        self._next_handle += 1
        self._entries[handle] = _Entry(period=period, callback=callback)
        self._push(self._now + period, handle)
        logger.debug("Scheduled handle %d every %ss", handle, period)
        return handle

    def cancel(self, handle: ScheduleHandle) -> None:
        if self._entries.pop(handle, None) is not None:
            logger.debug("Cancelled handle %d", handle)

    def advance(self, seconds: float) -> None:
        """Move virtual time forward, firing every callback that falls due."""
        if seconds < 0:
            raise ValueError("cannot advance by a negative amount")
        target = self._now + seconds
        while self._queue and self._queue[0][0] <= target:
            due, _, handle = heapq.heappop(self._queue)
            entry = self._entries.get(handle)
            if entry is None:
                continue  # cancelled
            self._now = due
            # Requeue first so the callback can cancel its own schedule.
            self._push(due + entry.period, handle)
            entry.callback()
        self._now = target

    def _push(self, due: float, handle: ScheduleHandle) -> None:
        heapq.heappush(self._queue, (due, self._seq, handle))
        self._seq += 1
