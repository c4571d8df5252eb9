"""tick-timer - Countdown and count-up timers with pluggable scheduling."""
from __future__ import annotations

from tick_timer.formatting import get_formatted_time, get_time_min_sec
from tick_timer.schedulers import ManualScheduler, ThreadScheduler
from tick_timer.timer import Timer
from tick_timer.types import Scheduler, ScheduleHandle, TimerConfig

__all__ = [
    "Timer",
    "TimerConfig",
    "Scheduler",
    "ScheduleHandle",
    "ThreadScheduler",
    "ManualScheduler",
    "get_time_min_sec",
    "get_formatted_time",
]
