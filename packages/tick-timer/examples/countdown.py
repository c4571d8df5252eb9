"""Countdown -- a five second countdown on the real-time scheduler.

Demonstrates:
- Creating a countdown Timer (start_time > end_time)
- Formatting the remaining time with get_formatted_time
- Waiting for completion from the main thread

Run: python -m examples.countdown
"""

import threading

from tick_timer import Timer, get_formatted_time
from tick_timer.log import configure_logging


def main() -> None:
    configure_logging(debug=True)
    print("=== Countdown ===\n")

    done = threading.Event()

    timer = Timer(
        start_time=5,
        end_time=0,
        on_tick=lambda t: print(f"  {get_formatted_time(t)}"),
        on_end=done.set,
    )
    timer.start(lambda t: print(f"  start at {get_formatted_time(t)}"))

    done.wait()
    print(f"\nDone. Timer running: {timer.running}")


if __name__ == "__main__":
    main()
