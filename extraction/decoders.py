"""Decoding of classified table cells into readings and gateways."""

from __future__ import annotations

from typing import Sequence

from bs4 import Tag

from extraction.coercion import (
    parse_counter,
    parse_decimal,
    parse_distance,
    parse_measurement,
    parse_position,
    parse_radio_settings,
    parse_timestamp,
)
from extraction.exceptions import RowShapeError
from extraction.identifiers import resolve_sensor_id
from models.records import Gateway, Reading

GATEWAY_CELL_COUNT = 5
READING_CELL_COUNT = 16

# Column positions within a full reading row.
_ID = 0
_TIMESTAMP = 1
_TEMPERATURE = 2
_HUMIDITY = 3
_VOLTAGE = 7
_FIRMWARE = 8
_POSITION = 9
_FRAME_COUNTER = 10
_PRIMARY_GATEWAY = 11


def cell_text(cell: Tag) -> str:
    return cell.get_text().strip()


def link_text(cell: Tag) -> str:
    """Label of the first link inside ``cell``, or ``""`` when there is none."""
    link = cell.find("a")
    if link is None:
        return ""
    return link.get_text().strip()


def _require_cells(cells: Sequence[Tag], expected: int, kind: str) -> None:
    if len(cells) != expected:
        raise RowShapeError(f"{kind} needs {expected} cells, got {len(cells)}")


def decode_gateway(cells: Sequence[Tag]) -> Gateway:
    """Build a gateway from the five gateway columns."""
    _require_cells(cells, GATEWAY_CELL_COUNT, "gateway")
    name_cell, distance_cell, rssi_cell, lsnr_cell, radio_cell = cells
    return Gateway(
        name=link_text(name_cell),
        distance=parse_distance(cell_text(distance_cell)),
        rssi=parse_decimal(cell_text(rssi_cell), "rssi"),
        lsnr=parse_decimal(cell_text(lsnr_cell), "lsnr"),
        radio_settings=parse_radio_settings(cell_text(radio_cell)),
    )


def decode_reading(cells: Sequence[Tag]) -> Reading:
    """Build a reading, including its primary gateway, from a full row."""
    _require_cells(cells, READING_CELL_COUNT, "reading")
    primary = decode_gateway(cells[_PRIMARY_GATEWAY:])
    return Reading(
        sensor_id=resolve_sensor_id(cells[_ID]),
        timestamp=parse_timestamp(cell_text(cells[_TIMESTAMP])),
        temperature=parse_measurement(cell_text(cells[_TEMPERATURE]), "temperature"),
        humidity=parse_measurement(cell_text(cells[_HUMIDITY]), "humidity"),
        voltage=parse_measurement(cell_text(cells[_VOLTAGE]), "voltage"),
        firmware=cell_text(cells[_FIRMWARE]),
        position=parse_position(link_text(cells[_POSITION])),
        frame_counter=parse_counter(cell_text(cells[_FRAME_COUNTER])),
        gateways=[primary],
    )
