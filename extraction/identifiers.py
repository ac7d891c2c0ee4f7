"""Sensor identifier resolution for the first cell of a reading row.

The identifier cell comes in several shapes: plain text, text following a
leading whitespace node, or the label of a nested link. Each shape is handled
by one strategy, with the label of the first link in the cell as the last
resort; strategies are tried in order and the first non-empty result
wins. Element nodes report their tag name as data, so a bare ``a`` means the
strategy landed on the link element itself rather than on text.
"""

from __future__ import annotations

from typing import Callable, Optional, Tuple

from bs4 import NavigableString, Tag
from bs4.element import PageElement

PLACEHOLDER = "a"

IdStrategy = Callable[[Tag], str]


def _node_data(node: Optional[PageElement]) -> str:
    if node is None:
        return ""
    if isinstance(node, NavigableString):
        return str(node).strip()
    if isinstance(node, Tag):
        return node.name
    return ""


def _first_child(node: Optional[PageElement]) -> Optional[PageElement]:
    if not isinstance(node, Tag) or not node.contents:
        return None
    return node.contents[0]


def _accept(value: str) -> str:
    return value if value and value != PLACEHOLDER else ""


def direct_text(cell: Tag) -> str:
    node = _first_child(cell)
    if isinstance(node, NavigableString):
        return str(node).strip()
    return ""


def sibling_text(cell: Tag) -> str:
    node = _first_child(cell)
    if node is None:
        return ""
    return _accept(_node_data(node.next_sibling))


def nested_link_text(cell: Tag) -> str:
    node = _first_child(cell)
    if node is None:
        return ""
    return _accept(_node_data(_first_child(node.next_sibling)))


def link_label(cell: Tag) -> str:
    link = cell.find("a")
    if link is None:
        return ""
    return _accept(link.get_text().strip())


ID_STRATEGIES: Tuple[IdStrategy, ...] = (
    direct_text,
    sibling_text,
    nested_link_text,
    link_label,
)


def resolve_sensor_id(cell: Tag) -> str:
    """Return the first identifier a strategy yields, or ``""`` if none does."""
    for strategy in ID_STRATEGIES:
        value = strategy(cell)
        if value:
            return value
    return ""
