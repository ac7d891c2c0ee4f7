"""Conversion of trimmed cell text into typed field values."""

from __future__ import annotations

import re
from datetime import datetime
from typing import Dict, Tuple

from extraction.exceptions import FieldFormatError
from models.records import Position, RadioSettings

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# Plain ASCII notation only; Python would otherwise accept underscores,
# non-ASCII digits and unpadded date parts.
_DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_TIMESTAMP_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}:[0-9]{2}:[0-9]{2}")

# Unit suffix each numeric field carries on the dashboard.
UNIT_SUFFIXES: Dict[str, str] = {
    "temperature": "°C",
    "humidity": "%",
    "voltage": "V",
    "distance": "km",
    "frequency": "MHz",
}

# Shortest distance text that can hold a number and its unit.
_MIN_DISTANCE_LENGTH = len(UNIT_SUFFIXES["distance"]) + 1


def strip_unit(text: str, field: str) -> str:
    """Remove the expected unit suffix of ``field`` from ``text``.

    The suffix must be present; a changed unit format raises instead of
    silently cutting characters off the number.
    """
    suffix = UNIT_SUFFIXES[field]
    candidate = text.strip()
    if not candidate.endswith(suffix):
        raise FieldFormatError(field, text, f"expected unit suffix {suffix!r}")
    return candidate[: -len(suffix)].strip()


def parse_decimal(text: str, field: str) -> float:
    candidate = text.strip()
    if not _DECIMAL_PATTERN.fullmatch(candidate):
        raise FieldFormatError(field, text, "not a decimal number")
    return float(candidate)


def parse_measurement(text: str, field: str) -> float:
    """Parse a decimal value that carries the unit registered for ``field``."""
    return parse_decimal(strip_unit(text, field), field)


def parse_counter(text: str, field: str = "frame_counter") -> int:
    candidate = text.strip()
    if not _INTEGER_PATTERN.fullmatch(candidate):
        raise FieldFormatError(field, text, "not an integer")
    value = int(candidate)
    if value < 0:
        raise FieldFormatError(field, text, "must not be negative")
    return value


def parse_timestamp(text: str) -> datetime:
    candidate = text.strip()
    if not _TIMESTAMP_PATTERN.fullmatch(candidate):
        raise FieldFormatError("timestamp", text, f"expected {TIMESTAMP_FORMAT}")
    try:
        return datetime.strptime(candidate, TIMESTAMP_FORMAT)
    except ValueError as exc:
        raise FieldFormatError("timestamp", text, f"expected {TIMESTAMP_FORMAT}") from exc


def parse_position(text: str) -> Position:
    """Split ``"<lat> <lng>"``; tokens between the first and last are ignored."""
    parts = text.split()
    if not parts:
        raise FieldFormatError("position", text, "empty coordinates")
    lat = parse_decimal(parts[0], "latitude")
    lng = parse_decimal(parts[-1], "longitude")
    return Position(lat=lat, lng=lng)


def parse_distance(text: str) -> float:
    """Parse a gateway distance in km; blank or placeholder text yields 0.0."""
    candidate = text.strip()
    if len(candidate) < _MIN_DISTANCE_LENGTH:
        return 0.0
    distance = parse_measurement(candidate, "distance")
    if distance < 0:
        raise FieldFormatError("distance", text, "must not be negative")
    return distance


def split_radio_settings(text: str) -> Tuple[str, str, str]:
    parts = text.strip().split(",")
    if len(parts) != 3:
        raise FieldFormatError(
            "radio_settings", text, f"expected 3 comma separated parts, got {len(parts)}"
        )
    frequency, sf, cr = (part.strip() for part in parts)
    return frequency, sf, cr


def parse_radio_settings(text: str) -> RadioSettings:
    """Parse ``"868.5MHz,SF9BW125,4/5CR"`` style radio settings."""
    frequency_text, sf, cr = split_radio_settings(text)
    return RadioSettings(
        frequency=parse_measurement(frequency_text, "frequency"),
        sf=sf,
        cr=cr,
    )
