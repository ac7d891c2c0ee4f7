"""Shared fixtures for building dashboard tables in tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Iterable, List

import pytest
from bs4 import BeautifulSoup, Tag

DATA_DIR = Path(__file__).resolve().parent / "data"

HEADER_ROW = (
    "<tr><th>Sensor</th><th>Time</th><th>Temp</th><th>Humidity</th><th>Light</th>"
    "<th>PM2.5</th><th>PM10</th><th>Voltage</th><th>Firmware</th><th>Position</th>"
    "<th>Fcnt</th><th>Gateway</th><th>Distance</th><th>RSSI</th><th>LSNR</th>"
    "<th>Radio</th></tr>"
)

_READING_DEFAULTS: Dict[str, str] = {
    "sensor": '<a href="/sensor/242">242</a>',
    "time": "2019-12-05 21:19:33",
    "temp": "6.875&deg;C",
    "humidity": "107.250%",
    "voltage": "3.370V",
    "firmware": "v2",
    "position": "60.430900 5.2325101",
    "fcnt": "28357",
}

_GATEWAY_DEFAULTS: Dict[str, str] = {
    "name": "florvaag-1",
    "distance": "0.104km",
    "rssi": "-47",
    "lsnr": "9.5",
    "radio": "868.5MHz,SF9BW125,4/5CR",
}


def gateway_cells(**overrides: str) -> List[str]:
    values = {**_GATEWAY_DEFAULTS, **overrides}
    return [
        f'<td><a href="http://www.openstreetmap.org/?mlat=60.4&amp;mlon=5.2">{values["name"]}</a></td>',
        f"<td>{values['distance']}</td>",
        f"<td>{values['rssi']}</td>",
        f"<td>{values['lsnr']}</td>",
        f"<td>{values['radio']}</td>",
    ]


def reading_row(gateway: Dict[str, str] | None = None, **overrides: str) -> str:
    values = {**_READING_DEFAULTS, **overrides}
    cells = [
        f"<td> {values['sensor']}</td>",
        f"<td>{values['time']}</td>",
        f"<td>{values['temp']}</td>",
        f"<td>{values['humidity']}</td>",
        "<td>0</td>",
        "<td>0</td>",
        "<td>0</td>",
        f"<td>{values['voltage']}</td>",
        f"<td>{values['firmware']}</td>",
        f'<td> <a href="http://www.openstreetmap.org/?mlat=60.43&amp;mlon=5.23">{values["position"]}</a></td>',
        f"<td>{values['fcnt']}</td>",
        *gateway_cells(**(gateway or {})),
    ]
    return "<tr>" + "".join(cells) + "</tr>"


def gateway_row(**overrides: str) -> str:
    return "<tr>" + "".join(gateway_cells(**overrides)) + "</tr>"


def page(rows: Iterable[str], header: bool = True) -> str:
    body = (HEADER_ROW if header else "") + "".join(rows)
    return (
        "<html><head><title>Readings</title></head><body>"
        "<h1>Sensor readings</h1>"
        f"<table class=\"readings\">{body}</table>"
        "</body></html>"
    )


@pytest.fixture()
def make_reading_row() -> Callable[..., str]:
    return reading_row


@pytest.fixture()
def make_gateway_row() -> Callable[..., str]:
    return gateway_row


@pytest.fixture()
def make_page() -> Callable[..., str]:
    return page


@pytest.fixture()
def parse() -> Callable[[str], BeautifulSoup]:
    def _parse(markup: str) -> BeautifulSoup:
        return BeautifulSoup(markup, "lxml")

    return _parse


@pytest.fixture()
def row_cells(parse) -> Callable[[str], List[Tag]]:
    """Parse a single ``<tr>`` and return its ``td`` cells."""

    def _cells(row_markup: str) -> List[Tag]:
        document = parse(f"<table>{row_markup}</table>")
        return document.find("tr").find_all("td", recursive=False)

    return _cells


@pytest.fixture()
def example_html() -> bytes:
    return (DATA_DIR / "example.html").read_bytes()


@pytest.fixture()
def missing_data_html() -> bytes:
    return (DATA_DIR / "missing_data.html").read_bytes()
