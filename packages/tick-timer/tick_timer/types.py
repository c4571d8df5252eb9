"""Shared types for tick-timer."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol, runtime_checkable

ScheduleHandle = int


@runtime_checkable
class Scheduler(Protocol):
    """Periodic callback facility a Timer runs on.

    ``schedule`` arranges for ``callback`` to be invoked every ``period``
    seconds until the returned handle is passed to ``cancel``.
    Cancelling an unknown or already-cancelled handle is a no-op.
    """

    def schedule(self, period: float, callback: Callable[[], None]) -> ScheduleHandle:
        ...

    def cancel(self, handle: ScheduleHandle) -> None:
        ...


@dataclass(frozen=True)
class TimerConfig:
    """Immutable timer configuration.

    Attributes:
        start_time: Initial and reset value of ``current_time``, in seconds.
        end_time: Completion threshold, in seconds.
        increment: Step size per tick. Only the magnitude is used; the sign
            is derived from ``start_time`` and ``end_time``.
        infinite: Never complete. Forced on when start and end are equal.
        autostart: Start the timer at the end of construction.
        on_tick: Called with the new current time after every tick.
        on_end: Called once when the timer completes.
    """

    start_time: float = 10
    end_time: float = 0
    increment: float = 1
    infinite: bool = False
    autostart: bool = False
    on_tick: Callable[[float], None] | None = None
    on_end: Callable[[], None] | None = None
