from __future__ import annotations

import logging

from pythonjsonlogger.json import JsonFormatter

from country_browser.logging_config import configure_logging


def test_json_format_is_default(monkeypatch):
    monkeypatch.delenv("COUNTRY_BROWSER_LOG_FORMAT", raising=False)

    configure_logging()

    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, JsonFormatter)


def test_plain_format_from_env(monkeypatch):
    monkeypatch.setenv("COUNTRY_BROWSER_LOG_FORMAT", "plain")

    configure_logging()

    formatter = logging.getLogger().handlers[0].formatter
    assert not isinstance(formatter, JsonFormatter)


def test_force_format_wins_and_quiets_httpx(monkeypatch):
    monkeypatch.setenv("COUNTRY_BROWSER_LOG_FORMAT", "plain")

    configure_logging(level=logging.DEBUG, force_format="json")

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert isinstance(root.handlers[0].formatter, JsonFormatter)
    assert logging.getLogger("httpx").level == logging.WARNING
