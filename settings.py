from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional


_SOURCE_ENV = "SCRAPER_SOURCE"
_PARSER_ENV = "SCRAPER_HTML_PARSER"
_TIMEOUT_ENV = "SCRAPER_REQUEST_TIMEOUT"
_USER_AGENT_ENV = "SCRAPER_USER_AGENT"
_LOG_LEVEL_ENV = "LOG_LEVEL"

DEFAULT_USER_AGENT = "jestad-scraper/0.1"


@dataclass(frozen=True)
class Settings:
    source: Optional[str]
    html_parser: str
    request_timeout: float
    user_agent: str
    log_level: str


def _read_str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or default


def _read_optional_env(name: str, default: Optional[str]) -> Optional[str]:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or None


def _read_timeout(default: float) -> float:
    value = os.getenv(_TIMEOUT_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        parsed = float(candidate)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    return candidate.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings(
        source=_read_optional_env(_SOURCE_ENV, None),
        html_parser=_read_str_env(_PARSER_ENV, "lxml"),
        request_timeout=_read_timeout(30.0),
        user_agent=_read_str_env(_USER_AGENT_ENV, DEFAULT_USER_AGENT),
        log_level=_read_log_level("INFO"),
    )
