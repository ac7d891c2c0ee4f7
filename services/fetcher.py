"""Retrieval of dashboard documents from URLs or local files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlparse

import httpx

from extraction.exceptions import DocumentFetchError

logger = logging.getLogger(__name__)

_HTTP_SCHEMES = {"http", "https"}


def is_remote(source: str) -> bool:
    return urlparse(source).scheme in _HTTP_SCHEMES


class DocumentFetcher:
    """Reads raw document bytes over HTTP(S) or from the filesystem."""

    def __init__(
        self,
        timeout: float = 30.0,
        user_agent: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        headers = {"User-Agent": user_agent} if user_agent else None
        self._client = httpx.Client(
            timeout=timeout,
            headers=headers,
            follow_redirects=True,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def fetch(self, source: str) -> bytes:
        if is_remote(source):
            return self._fetch_url(source)
        return self._read_file(source)

    def _fetch_url(self, url: str) -> bytes:
        try:
            response = self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            logger.error(
                "Document request failed",
                extra={"source": url, "status_code": status_code},
            )
            raise DocumentFetchError(
                f"error reading {url!r}: HTTP status {status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            logger.error("Document request failed", extra={"source": url, "reason": str(exc)})
            raise DocumentFetchError(f"error reading {url!r}: {exc}") from exc
        logger.debug(
            "Fetched document",
            extra={"source": url, "status_code": response.status_code},
        )
        return response.content

    @staticmethod
    def _read_file(source: str) -> bytes:
        parsed = urlparse(source)
        path = Path(unquote(parsed.path)) if parsed.scheme == "file" else Path(source)
        try:
            return path.read_bytes()
        except OSError as exc:
            raise DocumentFetchError(f"error reading {source!r}: {exc.strerror or exc}") from exc
