"""Chart-ready series records."""

from __future__ import annotations

from fleetdash.models._base import FleetModel


class ChartPoint(FleetModel):
    """Speed of one vehicle in the live speed chart."""

    label: str
    speed: int


class PayloadPoint(FleetModel):
    """Payload (tons) of one vehicle in the payload chart."""

    label: str
    payload: int
