"""Data models for fleetdash."""

from fleetdash.models._base import FleetModel, ProviderModel
from fleetdash.models.alert import Alert, AlertEvent, AlertEventKind
from fleetdash.models.chart import ChartPoint, PayloadPoint
from fleetdash.models.forecast import (
    Coordinates,
    CurrentConditions,
    DailyPoint,
    ForecastDocument,
    ForecastSeries,
    HourlyPoint,
    WeatherIcon,
    WeatherSection,
)
from fleetdash.models.vehicle import Position, Site, TelemetrySample, Vehicle, VehicleSeed
from fleetdash.models.view import DashboardView, TickResult

__all__ = [
    "Alert",
    "AlertEvent",
    "AlertEventKind",
    "ChartPoint",
    "Coordinates",
    "CurrentConditions",
    "DashboardView",
    "DailyPoint",
    "FleetModel",
    "ForecastDocument",
    "ForecastSeries",
    "HourlyPoint",
    "PayloadPoint",
    "Position",
    "ProviderModel",
    "Site",
    "TelemetrySample",
    "TickResult",
    "Vehicle",
    "VehicleSeed",
    "WeatherIcon",
    "WeatherSection",
]
