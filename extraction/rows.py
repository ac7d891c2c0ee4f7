"""Structural classification of table rows."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Type, Union

from bs4 import Tag

from extraction.decoders import GATEWAY_CELL_COUNT, READING_CELL_COUNT


@dataclass(frozen=True)
class HeaderRow:
    """A header or blank row carrying no data cells."""


@dataclass(frozen=True)
class GatewayContinuation:
    """An extra gateway for the reading on the nearest preceding full row."""

    cells: List[Tag] = field(default_factory=list)


@dataclass(frozen=True)
class FullReading:
    """A reading together with its primary gateway."""

    cells: List[Tag] = field(default_factory=list)


@dataclass(frozen=True)
class Unrecognized:
    cells: List[Tag] = field(default_factory=list)


RowKind = Union[HeaderRow, GatewayContinuation, FullReading, Unrecognized]

ROW_SHAPES: Dict[int, Type[Union[GatewayContinuation, FullReading]]] = {
    GATEWAY_CELL_COUNT: GatewayContinuation,
    READING_CELL_COUNT: FullReading,
}


def _first_element(row: Tag) -> Tag | None:
    for child in row.children:
        if isinstance(child, Tag):
            return child
    return None


def data_cells(row: Tag) -> List[Tag]:
    """Return the ``td`` children of ``row`` in order; header rows have none."""
    first = _first_element(row)
    if first is None or first.name == "th":
        return []
    return [child for child in row.children if isinstance(child, Tag) and child.name == "td"]


def classify_row(row: Tag) -> RowKind:
    cells = data_cells(row)
    if not cells:
        return HeaderRow()
    shape = ROW_SHAPES.get(len(cells))
    if shape is None:
        return Unrecognized(cells)
    return shape(cells)
