"""Exceptions raised while retrieving and extracting dashboard documents."""


class ScraperError(Exception):
    """Base exception for the scraper."""


class DocumentError(ScraperError):
    """The document could not be read or parsed; extraction is aborted."""


class DocumentFetchError(DocumentError):
    """The document could not be retrieved from its source."""


class RowDecodeError(ScraperError):
    """A single table row could not be decoded and must be skipped."""


class FieldFormatError(RowDecodeError):
    """A cell's text did not match the format expected for its field."""

    def __init__(self, field: str, text: str, detail: str) -> None:
        super().__init__(f"invalid {field} {text!r}: {detail}")
        self.field = field
        self.text = text


class RowShapeError(RowDecodeError):
    """A decoder was handed the wrong number of cells."""


class OrphanGatewayError(RowDecodeError):
    """A gateway continuation row appeared before any reading row."""
