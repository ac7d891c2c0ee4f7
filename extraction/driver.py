"""Extraction of readings from the dashboard table."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from bs4 import Tag

from extraction.decoders import decode_gateway, decode_reading
from extraction.exceptions import OrphanGatewayError, RowDecodeError
from extraction.locator import iter_table_rows, locate_table_rows
from extraction.rows import (
    FullReading,
    GatewayContinuation,
    HeaderRow,
    Unrecognized,
    classify_row,
)
from models.records import Reading

logger = logging.getLogger(__name__)

_ROW_TEXT_LIMIT = 200


@dataclass(slots=True)
class SkippedRow:
    """A table row that contributed nothing to the result."""

    row_number: int
    reason: str
    cell_count: int
    row_text: str


@dataclass
class ExtractionReport:
    readings: List[Reading] = field(default_factory=list)
    skipped: List[SkippedRow] = field(default_factory=list)


def _row_text(row: Tag) -> str:
    text = " ".join(row.get_text(" ").split())
    if len(text) > _ROW_TEXT_LIMIT:
        return text[: _ROW_TEXT_LIMIT - 3] + "..."
    return text


class _TableExtraction:
    """Single-pass state for one table; readings only ever grow by appending."""

    def __init__(self) -> None:
        self.report = ExtractionReport()
        # Set while the most recent full row failed to decode; its continuation
        # rows have no reading to attach to.
        self.last_reading_failed = False

    def skip(self, row: Tag, row_number: int, cell_count: int, reason: str) -> None:
        skipped = SkippedRow(
            row_number=row_number,
            reason=reason,
            cell_count=cell_count,
            row_text=_row_text(row),
        )
        self.report.skipped.append(skipped)
        logger.warning(
            "Skipping table row",
            extra={
                "row_number": row_number,
                "reason": reason,
                "cell_count": cell_count,
                "row_text": skipped.row_text,
            },
        )

    def add_reading(self, kind: FullReading) -> None:
        try:
            reading = decode_reading(kind.cells)
        except RowDecodeError:
            self.last_reading_failed = True
            raise
        self.last_reading_failed = False
        self.report.readings.append(reading)

    def add_gateway(self, kind: GatewayContinuation) -> None:
        if not self.report.readings:
            raise OrphanGatewayError("gateway row without a preceding reading row")
        if self.last_reading_failed:
            raise OrphanGatewayError("gateway row follows a reading row that was skipped")
        self.report.readings[-1].add_gateway(decode_gateway(kind.cells))

    def consume(self, row: Tag, row_number: int) -> None:
        kind = classify_row(row)
        if isinstance(kind, HeaderRow):
            return
        if isinstance(kind, Unrecognized):
            self.skip(row, row_number, len(kind.cells), "unexpected number of cells")
            return
        try:
            if isinstance(kind, FullReading):
                self.add_reading(kind)
            else:
                self.add_gateway(kind)
        except RowDecodeError as exc:
            self.skip(row, row_number, len(kind.cells), str(exc))


def extract(document: Tag) -> ExtractionReport:
    """Decode every row of the first table in ``document``.

    A document without a table yields an empty report. Rows that cannot be
    decoded are recorded in ``skipped`` and logged, never raised.
    """
    container = locate_table_rows(document)
    extraction = _TableExtraction()
    if container is None:
        logger.info("No table found in document")
        return extraction.report

    for row_number, row in enumerate(iter_table_rows(container), start=1):
        extraction.consume(row, row_number)
    return extraction.report


def extract_readings(document: Tag) -> List[Reading]:
    return extract(document).readings
