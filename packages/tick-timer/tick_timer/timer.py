"""Timer - countdown / count-up state machine driven by a Scheduler.

The timer is Stopped or Running. ``start`` schedules ``tick`` every
``abs(increment)`` seconds, ``stop`` cancels it, ``reset`` rewinds
``current_time`` without touching the schedule. Reaching ``end_time``
fires ``on_end`` once and stops the timer; it can be started again.

Time is not accurate: it is only as good as the scheduler's cadence.
"""
from __future__ import annotations

import logging
import threading
from typing import Callable

from tick_timer.schedulers import ThreadScheduler
from tick_timer.types import Scheduler, ScheduleHandle, TimerConfig

logger = logging.getLogger(__name__)

TimeCallback = Callable[[float], None]


def _noop_tick(time: float) -> None:
    pass


def _noop() -> None:
    pass


class Timer:
    def __init__(
        self,
        start_time: float = 10,
        end_time: float = 0,
        increment: float = 1,
        infinite: bool = False,
        autostart: bool = False,
        on_tick: TimeCallback | None = None,
        on_end: Callable[[], None] | None = None,
        scheduler: Scheduler | None = None,
    ) -> None:
        if increment == 0:
            raise ValueError("increment must be non-zero")
        self.start_time = start_time
        self.end_time = end_time
        self.infinite = infinite
        self.current_time = start_time
        self.autostart = autostart
        self.on_tick: TimeCallback = on_tick if on_tick is not None else _noop_tick
        self.on_end: Callable[[], None] = on_end if on_end is not None else _noop

        self._scheduler: Scheduler = scheduler if scheduler is not None else ThreadScheduler()
        self._handle: ScheduleHandle | None = None
        self._generation = 0
        # Ticks may arrive on a scheduler thread.
        self._lock = threading.RLock()

        # Direction comes from the bounds, never from the sign of increment.
        if start_time <= end_time:
            if start_time == end_time:
                self.infinite = True
            self.increment = abs(increment)
        else:
            self.increment = -abs(increment)

        if self.autostart:
            self.start()

    @classmethod
    def from_config(cls, config: TimerConfig, scheduler: Scheduler | None = None) -> Timer:
        return cls(
            start_time=config.start_time,
            end_time=config.end_time,
            increment=config.increment,
            infinite=config.infinite,
            autostart=config.autostart,
            on_tick=config.on_tick,
            on_end=config.on_end,
            scheduler=scheduler,
        )

    @property
    def running(self) -> bool:
        return self._handle is not None

    @property
    def counting_up(self) -> bool:
        return self.start_time <= self.end_time

    @property
    def scheduler(self) -> Scheduler:
        return self._scheduler

    def tick(self) -> None:
        """Advance one step. Normally invoked by the scheduler, once per period."""
        with self._lock:
            self.current_time += self.increment
            self.on_tick(self.current_time)

            if self.infinite:
                return
            if self.counting_up:
                done = self.current_time >= self.end_time
            else:
                done = self.current_time <= self.end_time
            if done:
                logger.debug("Timer reached end_time %s", self.end_time)
                self.on_end()
                self.stop()

    def start(self, callback: TimeCallback | None = None) -> None:
        """Start or resume ticking. Does nothing if already running."""
        with self._lock:
            if self._handle is not None:
                return
            self._generation += 1
            generation = self._generation
            self._handle = self._scheduler.schedule(
                abs(self.increment), lambda: self._scheduled_tick(generation)
            )
            logger.debug("Timer started at %s", self.current_time)
            if callback is not None:
                callback(self.current_time)

    def stop(self, callback: TimeCallback | None = None) -> None:
        """Stop ticking. Safe to call when already stopped."""
        with self._lock:
            if self._handle is not None:
                self._scheduler.cancel(self._handle)
                self._handle = None
                logger.debug("Timer stopped at %s", self.current_time)
            if callback is not None:
                callback(self.current_time)

    def reset(self, callback: TimeCallback | None = None) -> None:
        """Rewind current_time to start_time. A running timer keeps running."""
        with self._lock:
            self.current_time = self.start_time
            if callback is not None:
                callback(self.current_time)

    def _scheduled_tick(self, generation: int) -> None:
        with self._lock:
            # Drop ticks from a schedule that has since been cancelled.
            if self._handle is None or generation != self._generation:
                return
            try:
                self.tick()
            except BaseException:
                # A raising tick ends the schedule.
                if self._handle is not None:
                    self._scheduler.cancel(self._handle)
                    self._handle = None
                raise
