"""Immutable dashboard snapshots handed to chart sinks."""

from __future__ import annotations

from fleetdash.models._base import FleetModel
from fleetdash.models.alert import Alert
from fleetdash.models.chart import ChartPoint, PayloadPoint
from fleetdash.models.forecast import WeatherSection
from fleetdash.models.vehicle import TelemetrySample, Vehicle


class TickResult(FleetModel):
    """Outcome of one tick step."""

    tick: int
    samples: tuple[TelemetrySample, ...]
    """Samples applied to the registry."""
    skipped: tuple[str, ...] = ()
    """Vehicle ids of samples rejected as unknown."""
    speed_series: tuple[ChartPoint, ...]
    alert: Alert | None = None


class DashboardView(FleetModel):
    """Everything the dashboard renders at one point in time.

    Exactly one of ``weather`` and ``weather_status`` is set.
    """

    tick: int
    vehicles: tuple[Vehicle, ...]
    alert: Alert | None = None
    speed_series: tuple[ChartPoint, ...]
    payload_series: tuple[PayloadPoint, ...]
    weather: WeatherSection | None = None
    weather_status: str | None = None
