"""Logging setup for scripts using tick-timer.

The library itself only emits records through module loggers.
"""
import logging

LOG_FORMAT = "%(asctime)s [%(levelname)5s] %(name)s: %(message)s"


def configure_logging(debug: bool = False) -> None:
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
