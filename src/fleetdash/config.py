"""Dashboard configuration for fleetdash."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from fleetdash._constants import (
    DEFAULT_ALERT_LIFETIME,
    DEFAULT_COORDINATE_PRECISION,
    DEFAULT_FORECAST_DAYS,
    DEFAULT_HOURLY_POINTS,
    DEFAULT_POSITION_JITTER,
    DEFAULT_SPEED_MAX,
    DEFAULT_SPEED_MIN,
    DEFAULT_SPEED_THRESHOLD,
    DEFAULT_TICK_INTERVAL,
    WEATHER_BASE_URL,
)
from fleetdash.exceptions import FleetConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_number(env_key: str, value: str, cast: type[int] | type[float]) -> int | float:
    try:
        return cast(value)
    except ValueError as exc:
        raise FleetConfigError(f"{env_key} must be a number, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class FleetConfig:
    """Dashboard configuration.

    Parameters
    ----------
    tick_interval : float
        Seconds between simulation ticks.
    alert_lifetime : float
        Seconds an alert stays active before it clears itself.
    speed_threshold : int
        Speeds strictly above this value (km/h) raise an alert.
    speed_min : int
        Lowest simulated speed (inclusive).
    speed_max : int
        Upper bound of simulated speed (exclusive).
    position_jitter : float
        Maximum per-tick latitude/longitude drift in degrees.
    coordinate_precision : int
        Decimal places kept on simulated coordinates.
    weather_enabled : bool
        Fetch the forecast at startup.
    weather_api_key : str or None
        API key for the forecast provider.
    weather_base_url : str
        Forecast provider base URL.
    forecast_days : int
        Number of forecast days requested.
    hourly_points : int
        Number of hourly points kept from the first forecast day.
    request_timeout : float
        Total timeout in seconds for forecast and geolocation requests.
    latitude : float or None
        Fixed latitude for the weather lookup.
    longitude : float or None
        Fixed longitude for the weather lookup.
    geolocation_url : str or None
        IP geolocation endpoint used when no fixed coordinates are set.
    """

    tick_interval: float = DEFAULT_TICK_INTERVAL
    alert_lifetime: float = DEFAULT_ALERT_LIFETIME
    speed_threshold: int = DEFAULT_SPEED_THRESHOLD
    speed_min: int = DEFAULT_SPEED_MIN
    speed_max: int = DEFAULT_SPEED_MAX
    position_jitter: float = DEFAULT_POSITION_JITTER
    coordinate_precision: int = DEFAULT_COORDINATE_PRECISION
    weather_enabled: bool = True
    weather_api_key: str | None = None
    weather_base_url: str = WEATHER_BASE_URL
    forecast_days: int = DEFAULT_FORECAST_DAYS
    hourly_points: int = DEFAULT_HOURLY_POINTS
    request_timeout: float = 10.0
    latitude: float | None = None
    longitude: float | None = None
    geolocation_url: str | None = None

    def __post_init__(self) -> None:
        if self.tick_interval < 0:
            raise FleetConfigError(f"tick_interval must be >= 0, got {self.tick_interval}")
        if self.alert_lifetime < 0:
            raise FleetConfigError(f"alert_lifetime must be >= 0, got {self.alert_lifetime}")
        if self.speed_min < 0 or self.speed_max <= self.speed_min:
            raise FleetConfigError(
                f"speed range must satisfy 0 <= speed_min < speed_max, got [{self.speed_min}, {self.speed_max})"
            )
        if self.position_jitter < 0:
            raise FleetConfigError(f"position_jitter must be >= 0, got {self.position_jitter}")
        if self.forecast_days < 1:
            raise FleetConfigError(f"forecast_days must be >= 1, got {self.forecast_days}")
        if self.hourly_points < 1:
            raise FleetConfigError(f"hourly_points must be >= 1, got {self.hourly_points}")
        if (self.latitude is None) != (self.longitude is None):
            raise FleetConfigError("latitude and longitude must be set together")

    @property
    def has_fixed_location(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    @classmethod
    def from_env(cls, **overrides: Any) -> FleetConfig:
        """Create configuration from environment variables.

        Reads optional ``FLEET_*`` variables. The forecast API key is read
        from ``FLEET_WEATHER_API_KEY`` and falls back to ``WEATHER_API_KEY``.
        Explicit keyword arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        FleetConfig
            Populated configuration.
        """
        env = os.environ

        _ENV_STR_MAP = {
            "FLEET_WEATHER_BASE_URL": "weather_base_url",
            "FLEET_GEOLOCATION_URL": "geolocation_url",
        }
        _ENV_INT_MAP = {
            "FLEET_SPEED_THRESHOLD": "speed_threshold",
            "FLEET_SPEED_MIN": "speed_min",
            "FLEET_SPEED_MAX": "speed_max",
            "FLEET_COORDINATE_PRECISION": "coordinate_precision",
            "FLEET_FORECAST_DAYS": "forecast_days",
            "FLEET_HOURLY_POINTS": "hourly_points",
        }
        _ENV_FLOAT_MAP = {
            "FLEET_TICK_INTERVAL": "tick_interval",
            "FLEET_ALERT_LIFETIME": "alert_lifetime",
            "FLEET_POSITION_JITTER": "position_jitter",
            "FLEET_REQUEST_TIMEOUT": "request_timeout",
            "FLEET_LATITUDE": "latitude",
            "FLEET_LONGITUDE": "longitude",
        }

        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_STR_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val
        for env_key, field_name in _ENV_INT_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = _env_number(env_key, val, int)
        for env_key, field_name in _ENV_FLOAT_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = _env_number(env_key, val, float)

        api_key = env.get("FLEET_WEATHER_API_KEY") or env.get("WEATHER_API_KEY")
        if api_key:
            config_kwargs["weather_api_key"] = api_key

        if "weather_enabled" not in overrides:
            config_kwargs["weather_enabled"] = _env_bool(env.get("FLEET_WEATHER_ENABLED"), True)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
