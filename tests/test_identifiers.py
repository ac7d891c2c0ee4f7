from __future__ import annotations

import pytest
from bs4 import BeautifulSoup, NavigableString, Tag

from extraction.identifiers import (
    ID_STRATEGIES,
    direct_text,
    link_label,
    nested_link_text,
    resolve_sensor_id,
    sibling_text,
)


def _cell(markup: str) -> Tag:
    return BeautifulSoup(f"<table><tr>{markup}</tr></table>", "html.parser").find("td")


def test_strategies_are_tried_in_documented_order() -> None:
    assert ID_STRATEGIES == (direct_text, sibling_text, nested_link_text, link_label)


def test_plain_text_cell() -> None:
    cell = _cell("<td> 242 </td>")

    assert direct_text(cell) == "242"
    assert resolve_sensor_id(cell) == "242"


def test_link_after_whitespace_uses_link_label() -> None:
    cell = _cell('<td> <a href="?sensor=242">242</a></td>')

    assert direct_text(cell) == ""
    assert sibling_text(cell) == ""
    assert nested_link_text(cell) == "242"
    assert resolve_sensor_id(cell) == "242"


def test_text_sibling_is_used_when_first_node_is_blank() -> None:
    cell = _cell("<td></td>")
    cell.append(NavigableString("  "))
    cell.append(NavigableString(" 311 "))

    assert sibling_text(cell) == "311"
    assert resolve_sensor_id(cell) == "311"


def test_placeholder_link_label_is_rejected() -> None:
    cell = _cell('<td> <a href="?sensor=">a</a></td>')

    assert nested_link_text(cell) == ""
    assert resolve_sensor_id(cell) == ""


@pytest.mark.parametrize("markup", ["<td></td>", "<td>   </td>", '<td> <a href="#"></a></td>'])
def test_missing_identifier_resolves_to_empty_string(markup: str) -> None:
    assert resolve_sensor_id(_cell(markup)) == ""


def test_link_as_first_node_falls_back_to_link_label() -> None:
    cell = _cell('<td><a href="?sensor=242">242</a></td>')

    assert direct_text(cell) == ""
    assert sibling_text(cell) == ""
    assert nested_link_text(cell) == ""
    assert link_label(cell) == "242"
    assert resolve_sensor_id(cell) == "242"


def test_link_label_rejects_placeholder() -> None:
    assert link_label(_cell('<td><a href="#">a</a></td>')) == ""
    assert link_label(_cell("<td>plain</td>")) == ""
