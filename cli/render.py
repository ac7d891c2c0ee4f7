from __future__ import annotations

from typing import Any, Iterable, Sequence

import typer

from extraction import ExtractionReport, SkippedRow
from models.records import Gateway, Position, RadioSettings, Reading


def echo_heading(text: str) -> None:
    typer.secho(text, bold=True)


def echo_key_values(pairs: Iterable[tuple[str, Any]]) -> None:
    for key, value in pairs:
        typer.echo(f"{key}={value}")


def format_position(position: Position | None) -> str:
    if position is None:
        return "unset"
    return f"{position.lat:f}:{position.lng:f}"


def format_radio_settings(settings: RadioSettings) -> str:
    return f"Frequency={settings.frequency:f} Sf={settings.sf} Cr={settings.cr}"


def format_gateway(gateway: Gateway) -> str:
    return (
        f"Name={gateway.name} Position={format_position(gateway.position)} "
        f"Distance={gateway.distance:f} RSSI={gateway.rssi:f} LSNR={gateway.lsnr:f} "
        f"RadioSettings={format_radio_settings(gateway.radio_settings)}"
    )


def render_reading(reading: Reading) -> None:
    echo_key_values(
        [
            ("ID", reading.sensor_id),
            ("Time", reading.timestamp.isoformat()),
            ("Temp", f"{reading.temperature:f}"),
            ("Humidity", f"{reading.humidity:f}"),
            ("Light", f"{reading.light:f}"),
            ("PM25", f"{reading.pm25:f}"),
            ("PM10", f"{reading.pm10:f}"),
            ("Voltage", f"{reading.voltage:f}"),
            ("Firmware", reading.firmware),
            ("Position", format_position(reading.position)),
            ("Fcnt", reading.frame_counter),
        ]
    )
    typer.echo("Gateways:")
    for index, gateway in enumerate(reading.gateways):
        typer.echo(f"  {index} {format_gateway(gateway)}")


def render_skipped(skipped: Sequence[SkippedRow]) -> None:
    echo_heading("Skipped rows")
    if not skipped:
        typer.echo("No rows skipped.")
        return
    for row in skipped:
        typer.echo(f"  - row {row.row_number} ({row.cell_count} cells): {row.reason}")


def render_report(report: ExtractionReport, show_skipped: bool = False) -> None:
    if not report.readings:
        typer.echo("No readings found.")
    for index, reading in enumerate(report.readings):
        if index:
            typer.echo()
        render_reading(reading)
    if show_skipped:
        typer.echo()
        render_skipped(report.skipped)
