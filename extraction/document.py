"""HTML tree construction for dashboard pages."""

from __future__ import annotations

from typing import Union

from bs4 import BeautifulSoup, ParserRejectedMarkup

from extraction.exceptions import DocumentError

DEFAULT_PARSER = "lxml"


def parse_document(markup: Union[bytes, str], features: str = DEFAULT_PARSER) -> BeautifulSoup:
    """Parse ``markup`` into a navigable tree.

    Raises ``DocumentError`` when the parser rejects the markup.
    """
    try:
        return BeautifulSoup(markup, features)
    except ParserRejectedMarkup as exc:
        raise DocumentError(f"Unable to parse document: {exc}") from exc
