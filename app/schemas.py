"""Pydantic schemas for the HTTP API layer."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from extraction import ExtractionReport
from models.records import Gateway, Position, RadioSettings, Reading


class PositionSchema(BaseModel):
    """Coordinate in decimal degrees."""

    lat: float
    lng: float

    @classmethod
    def from_domain(cls, position: Position) -> "PositionSchema":
        return cls(lat=position.lat, lng=position.lng)


class RadioSettingsSchema(BaseModel):
    frequency: float = Field(..., description="Frequency in MHz.")
    sf: str = Field(..., description="Spreading factor and bandwidth, e.g. SF9BW125.")
    cr: str = Field(..., description="Coding rate, e.g. 4/5CR.")

    @classmethod
    def from_domain(cls, settings: RadioSettings) -> "RadioSettingsSchema":
        return cls(frequency=settings.frequency, sf=settings.sf, cr=settings.cr)


class GatewaySchema(BaseModel):
    """A gateway that relayed a reading."""

    name: str
    distance: float = Field(..., ge=0, description="Distance to the sensor in km.")
    rssi: float = Field(..., description="Received signal strength in dBm.")
    lsnr: float = Field(..., description="Signal-to-noise ratio in dB.")
    radio_settings: RadioSettingsSchema
    position: Optional[PositionSchema] = None

    @classmethod
    def from_domain(cls, gateway: Gateway) -> "GatewaySchema":
        return cls(
            name=gateway.name,
            distance=gateway.distance,
            rssi=gateway.rssi,
            lsnr=gateway.lsnr,
            radio_settings=RadioSettingsSchema.from_domain(gateway.radio_settings),
            position=PositionSchema.from_domain(gateway.position) if gateway.position else None,
        )


class ReadingSchema(BaseModel):
    """One decoded sensor transmission."""

    sensor_id: str
    timestamp: datetime
    epoch_seconds: int
    temperature: float = Field(..., description="Temperature in degrees Celsius.")
    humidity: float = Field(..., description="Relative humidity in percent.")
    light: float = 0.0
    pm25: float = 0.0
    pm10: float = 0.0
    voltage: float = Field(..., description="Battery voltage in volts.")
    firmware: str
    position: PositionSchema
    frame_counter: int = Field(..., ge=0)
    gateways: List[GatewaySchema] = Field(..., min_length=1)

    @classmethod
    def from_domain(cls, reading: Reading) -> "ReadingSchema":
        return cls(
            sensor_id=reading.sensor_id,
            timestamp=reading.timestamp,
            epoch_seconds=reading.epoch_seconds,
            temperature=reading.temperature,
            humidity=reading.humidity,
            light=reading.light,
            pm25=reading.pm25,
            pm10=reading.pm10,
            voltage=reading.voltage,
            firmware=reading.firmware,
            position=PositionSchema.from_domain(reading.position),
            frame_counter=reading.frame_counter,
            gateways=[GatewaySchema.from_domain(gateway) for gateway in reading.gateways],
        )


class SkippedRowSchema(BaseModel):
    """Details about a table row that could not be decoded."""

    row_number: int = Field(..., ge=1)
    reason: str
    cell_count: int = Field(..., ge=0)
    row_text: str


class ExtractionResponse(BaseModel):
    """Readings extracted from one dashboard document."""

    source: Optional[str] = None
    reading_count: int = Field(..., ge=0)
    readings: List[ReadingSchema] = Field(default_factory=list)
    skipped: List[SkippedRowSchema] = Field(default_factory=list)

    @classmethod
    def from_report(
        cls, report: ExtractionReport, source: Optional[str] = None
    ) -> "ExtractionResponse":
        return cls(
            source=source,
            reading_count=len(report.readings),
            readings=[ReadingSchema.from_domain(reading) for reading in report.readings],
            skipped=[
                SkippedRowSchema(
                    row_number=row.row_number,
                    reason=row.reason,
                    cell_count=row.cell_count,
                    row_text=row.row_text,
                )
                for row in report.skipped
            ],
        )
