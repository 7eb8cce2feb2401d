"""Speed alert models."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum

from pydantic import Field, field_validator

from fleetdash.models._base import FleetModel


class Alert(FleetModel):
    """A speed-limit violation for one vehicle."""

    vehicle_id: str
    label: str
    speed: int
    raised_at: datetime

    @field_validator("raised_at")
    @classmethod
    def _ensure_tz_aware(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value

    @property
    def message(self) -> str:
        return f"{self.label} is currently at {self.speed} km/h."


class AlertEventKind(StrEnum):
    RAISED = "raised"
    SUPERSEDED = "superseded"
    CLEARED = "cleared"


class AlertEvent(FleetModel):
    """A transition of the alert monitor."""

    kind: AlertEventKind
    alert: Alert
    observed_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
