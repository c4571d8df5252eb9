"""Seconds to minutes/seconds conversion."""
from __future__ import annotations

import math


def get_time_min_sec(time: float) -> tuple[int, int]:
    """Split ``time`` (seconds) into ``(minutes, seconds)`` within one hour.

    Hours are discarded: ``time`` is reduced modulo 3600 first. The
    reduction uses Python's floor modulo, so negative input wraps into
    the previous hour instead of producing negative components.
    """
    remainder = time % 3600
    return math.floor(remainder / 60), math.floor(remainder % 60)


def get_formatted_time(time: float, separator: str = ":") -> str:
    """Format ``time`` as minutes, ``separator`` and two-digit seconds."""
    minutes, seconds = get_time_min_sec(time)
    return f"{minutes}{separator}{seconds:02d}"
