"""Custom exception hierarchy for fleetdash."""

from __future__ import annotations


class FleetError(Exception):
    """Base exception for all fleetdash errors."""


class FleetConfigError(FleetError):
    """Invalid or missing configuration."""


class UnknownVehicleError(FleetError):
    """A telemetry sample references a vehicle absent from the registry."""

    def __init__(self, vehicle_id: str) -> None:
        self.vehicle_id = vehicle_id
        super().__init__(f"Unknown vehicle: {vehicle_id!r}")


class LocationUnavailableError(FleetError):
    """Coordinates for the weather lookup could not be determined.

    The message is human-readable and shown in place of the weather
    section.
    """


class ForecastFetchError(FleetError):
    """Forecast provider request failed (network, non-200, invalid JSON)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        url: str = "",
    ) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(message)


class MalformedForecastError(FleetError):
    """Forecast document lacks the day or hour lists the normalizer needs."""
