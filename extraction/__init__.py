"""Table extraction engine for the sensor dashboard."""

from extraction.document import parse_document
from extraction.driver import ExtractionReport, SkippedRow, extract, extract_readings

__all__ = [
    "ExtractionReport",
    "SkippedRow",
    "extract",
    "extract_readings",
    "parse_document",
]
