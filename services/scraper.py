"""Orchestration of document retrieval and table extraction."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional, Union

from extraction import ExtractionReport, extract, parse_document
from extraction.document import DEFAULT_PARSER
from services.fetcher import DocumentFetcher
from settings import get_settings

logger = logging.getLogger(__name__)


class ScraperService:
    """Turns a dashboard URL, path or raw markup into decoded readings."""

    def __init__(self, fetcher: DocumentFetcher, parser: str = DEFAULT_PARSER) -> None:
        self.fetcher = fetcher
        self.parser = parser

    def scrape(self, source: str) -> ExtractionReport:
        """Fetch ``source`` and extract its readings.

        Retrieval and parse failures propagate as ``DocumentError``.
        """
        data = self.fetcher.fetch(source)
        return self.extract_bytes(data, source=source)

    def extract_bytes(
        self, data: Union[bytes, str], source: Optional[str] = None
    ) -> ExtractionReport:
        document = parse_document(data, features=self.parser)
        report = extract(document)
        logger.info(
            "Extracted readings",
            extra={
                "source": source,
                "reading_count": len(report.readings),
                "skipped_count": len(report.skipped),
            },
        )
        return report

    def close(self) -> None:
        self.fetcher.close()


@lru_cache
def build_default_scraper() -> ScraperService:
    """Factory that wires the scraper from environment settings."""
    settings = get_settings()
    fetcher = DocumentFetcher(
        timeout=settings.request_timeout,
        user_agent=settings.user_agent,
    )
    return ScraperService(fetcher=fetcher, parser=settings.html_parser)
