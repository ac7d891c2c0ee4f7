from __future__ import annotations

import logging

import pytest

from logging_config import ContextualFormatter
from services.scraper import build_default_scraper
from settings import get_settings


@pytest.fixture(autouse=True)
def _clear_caches():
    get_settings.cache_clear()
    build_default_scraper.cache_clear()
    yield
    get_settings.cache_clear()
    build_default_scraper.cache_clear()


def test_defaults(monkeypatch) -> None:
    for name in (
        "SCRAPER_SOURCE",
        "SCRAPER_HTML_PARSER",
        "SCRAPER_REQUEST_TIMEOUT",
        "SCRAPER_USER_AGENT",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings.source is None
    assert settings.html_parser == "lxml"
    assert settings.request_timeout == 30.0
    assert settings.user_agent.startswith("jestad-scraper")
    assert settings.log_level == "INFO"


def test_environment_overrides_apply(monkeypatch) -> None:
    monkeypatch.setenv("SCRAPER_SOURCE", " https://dashboard.example.org/readings ")
    monkeypatch.setenv("SCRAPER_HTML_PARSER", "html.parser")
    monkeypatch.setenv("SCRAPER_REQUEST_TIMEOUT", "2.5")
    monkeypatch.setenv("SCRAPER_USER_AGENT", "probe/1.0")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = get_settings()
    scraper = build_default_scraper()

    try:
        assert settings.source == "https://dashboard.example.org/readings"
        assert settings.log_level == "DEBUG"
        assert scraper.parser == "html.parser"
        assert scraper.fetcher._client.timeout.read == 2.5
        assert scraper.fetcher._client.headers["User-Agent"] == "probe/1.0"
    finally:
        scraper.close()


@pytest.mark.parametrize("value", ["", "soon", "0", "-4"])
def test_invalid_timeout_falls_back_to_default(monkeypatch, value: str) -> None:
    monkeypatch.setenv("SCRAPER_REQUEST_TIMEOUT", value)

    assert get_settings().request_timeout == 30.0


def test_blank_source_is_unset(monkeypatch) -> None:
    monkeypatch.setenv("SCRAPER_SOURCE", "   ")

    assert get_settings().source is None


def test_contextual_formatter_appends_extras() -> None:
    formatter = ContextualFormatter(fmt="%(levelname)s %(message)s")
    record = logging.LogRecord(
        name="extraction.driver",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg="Skipping table row",
        args=(),
        exc_info=None,
    )
    record.row_number = 4
    record.reason = "invalid rssi 'x': not a decimal number"
    record.cell_count = 5

    assert formatter.format(record) == (
        "WARNING Skipping table row | row_number=4 "
        "reason=\"invalid rssi 'x': not a decimal number\" cell_count=5"
    )
