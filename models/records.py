"""Domain models shared across services."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional


@dataclass(slots=True)
class Position:
    """Latitude/longitude pair in decimal degrees."""

    lat: float
    lng: float


@dataclass(frozen=True, slots=True)
class RadioSettings:
    """Radio parameters of one transmission-to-gateway link."""

    frequency: float
    sf: str
    cr: str


@dataclass(slots=True)
class Gateway:
    """A LoRaWAN gateway that relayed a reading."""

    name: str
    distance: float
    rssi: float
    lsnr: float
    radio_settings: RadioSettings
    # Never populated from the dashboard table.
    position: Optional[Position] = None


@dataclass(slots=True)
class Reading:
    """A single sensor transmission parsed from the dashboard table."""

    sensor_id: str
    timestamp: datetime
    temperature: float
    humidity: float
    voltage: float
    firmware: str
    position: Position
    frame_counter: int
    gateways: List[Gateway] = field(default_factory=list)
    light: float = 0.0
    pm25: float = 0.0
    pm10: float = 0.0

    def add_gateway(self, gateway: Gateway) -> None:
        self.gateways.append(gateway)

    @property
    def epoch_seconds(self) -> int:
        """Unix time of the reading, treating the dashboard timestamp as UTC."""
        return int(self.timestamp.replace(tzinfo=timezone.utc).timestamp())
