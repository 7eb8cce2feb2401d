"""fleetdash - Async fleet telemetry dashboard: simulation, speed alerts and chart series."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("fleetdash")
except PackageNotFoundError:
    __version__ = "0+local"
from fleetdash.aggregation import payload_series, speed_series, to_records
from fleetdash.config import FleetConfig
from fleetdash.dashboard import FleetDashboard, default_seeds
from fleetdash.exceptions import (
    FleetConfigError,
    FleetError,
    ForecastFetchError,
    LocationUnavailableError,
    MalformedForecastError,
    UnknownVehicleError,
)
from fleetdash.forecast import build_weather_section, current_conditions, normalize_forecast
from fleetdash.ingestion.simulator import TelemetrySimulator, TelemetrySource
from fleetdash.models import (
    Alert,
    AlertEvent,
    AlertEventKind,
    ChartPoint,
    Coordinates,
    CurrentConditions,
    DailyPoint,
    DashboardView,
    ForecastSeries,
    HourlyPoint,
    PayloadPoint,
    Position,
    Site,
    TelemetrySample,
    TickResult,
    Vehicle,
    VehicleSeed,
    WeatherIcon,
    WeatherSection,
)
from fleetdash.state.alerts import AlertMonitor
from fleetdash.state.registry import VehicleRegistry

__all__ = [
    "__version__",
    "Alert",
    "AlertEvent",
    "AlertEventKind",
    "AlertMonitor",
    "ChartPoint",
    "Coordinates",
    "CurrentConditions",
    "DailyPoint",
    "DashboardView",
    "FleetConfig",
    "FleetConfigError",
    "FleetDashboard",
    "FleetError",
    "ForecastFetchError",
    "ForecastSeries",
    "HourlyPoint",
    "LocationUnavailableError",
    "MalformedForecastError",
    "PayloadPoint",
    "Position",
    "Site",
    "TelemetrySample",
    "TelemetrySimulator",
    "TelemetrySource",
    "TickResult",
    "UnknownVehicleError",
    "Vehicle",
    "VehicleRegistry",
    "VehicleSeed",
    "WeatherIcon",
    "WeatherSection",
    "build_weather_section",
    "current_conditions",
    "default_seeds",
    "normalize_forecast",
    "payload_series",
    "speed_series",
    "to_records",
]
