"""Tests for configure_logging."""
import logging

from tick_timer.log import LOG_FORMAT, configure_logging


def test_configure_logging_info_by_default(monkeypatch):
    """Without debug, basicConfig gets INFO and the shared format."""
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))

    configure_logging()

    assert calls == [{"level": logging.INFO, "format": LOG_FORMAT}]


def test_configure_logging_debug(monkeypatch):
    """debug=True selects DEBUG."""
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))

    configure_logging(debug=True)

    assert calls[0]["level"] == logging.DEBUG
