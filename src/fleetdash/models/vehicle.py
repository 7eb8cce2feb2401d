"""Vehicle identity and telemetry models."""

from __future__ import annotations

from pydantic import Field, field_validator

from fleetdash.models._base import FleetModel


class Position(FleetModel):
    """A latitude/longitude pair in degrees."""

    latitude: float
    longitude: float


class Site(FleetModel):
    """A named home location."""

    name: str
    latitude: float
    longitude: float

    @property
    def position(self) -> Position:
        return Position(latitude=self.latitude, longitude=self.longitude)


class VehicleSeed(FleetModel):
    """Static registration data for one vehicle."""

    id: str
    """Unique, stable identifier."""
    label: str
    """Display name (e.g. ``"Truck 1"``)."""
    driver_name: str
    cargo_kind: str
    home: Site

    @field_validator("id")
    @classmethod
    def _normalize_id(cls, value: str) -> str:
        vehicle_id = value.strip()
        if not vehicle_id:
            raise ValueError("id must be non-empty")
        return vehicle_id


class Vehicle(VehicleSeed):
    """A registered vehicle with its last-known telemetry."""

    speed: int = Field(default=0, ge=0)
    """Current speed in km/h."""
    position: Position

    def exceeds(self, threshold: int) -> bool:
        """Whether the current speed is strictly above *threshold*."""
        return self.speed > threshold


class TelemetrySample(FleetModel):
    """One simulated reading for one vehicle at one tick."""

    vehicle_id: str
    speed: int = Field(..., ge=0)
    position: Position
    tick: int = Field(..., ge=0)
    """Logical, monotonic tick number."""
