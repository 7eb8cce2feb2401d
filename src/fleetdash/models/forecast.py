"""Forecast provider document and chart-ready forecast models."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import Field, field_validator

from fleetdash.ingestion.normalize import safe_float, safe_str
from fleetdash.models._base import FleetModel, ProviderModel

# ------------------------------------------------------------------
# Provider document (only the fields we read)
# ------------------------------------------------------------------


class ForecastHour(ProviderModel):
    time: str
    """Formatted as ``"<date> <HH:MM>"``."""
    temp_c: float

    @field_validator("temp_c", mode="before")
    @classmethod
    def _coerce_temp(cls, value: Any) -> float | None:
        return safe_float(value)


class DaySummary(ProviderModel):
    avgtemp_c: float

    @field_validator("avgtemp_c", mode="before")
    @classmethod
    def _coerce_temp(cls, value: Any) -> float | None:
        return safe_float(value)


class ForecastDay(ProviderModel):
    date: str
    day: DaySummary
    hour: list[ForecastHour] = Field(default_factory=list)


class Forecast(ProviderModel):
    forecastday: list[ForecastDay] = Field(default_factory=list)


class ForecastLocation(ProviderModel):
    name: str


class WeatherCondition(ProviderModel):
    text: str

    @field_validator("text", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str | None:
        return safe_str(value)


class CurrentWeather(ProviderModel):
    temp_c: float
    condition: WeatherCondition

    @field_validator("temp_c", mode="before")
    @classmethod
    def _coerce_temp(cls, value: Any) -> float | None:
        return safe_float(value)


class ForecastDocument(ProviderModel):
    """A ``forecast.json`` response.

    ``location`` and ``current`` are optional here; only the forecast
    series are required for normalization.
    """

    location: ForecastLocation | None = None
    current: CurrentWeather | None = None
    forecast: Forecast


# ------------------------------------------------------------------
# Chart-ready output
# ------------------------------------------------------------------


class HourlyPoint(FleetModel):
    time: str
    """Time of day, ``HH:MM``."""
    temperature: float
    """Degrees Celsius."""


class DailyPoint(FleetModel):
    date: str
    temperature: float
    """Average degrees Celsius for the day."""


class ForecastSeries(FleetModel):
    hourly: tuple[HourlyPoint, ...]
    daily: tuple[DailyPoint, ...]


class WeatherIcon(StrEnum):
    SUNNY = "sunny"
    CLOUDY = "cloudy"
    RAIN = "rain"
    SNOW = "snow"

    @classmethod
    def from_condition(cls, condition: str) -> WeatherIcon:
        """Pick an icon from free-form condition text (e.g. ``"Partly cloudy"``)."""
        text = condition.lower()
        if "sunny" in text:
            return cls.SUNNY
        if "cloud" in text:
            return cls.CLOUDY
        if "rain" in text:
            return cls.RAIN
        if "snow" in text:
            return cls.SNOW
        return cls.SUNNY


class CurrentConditions(FleetModel):
    location_name: str
    temperature: float
    condition: str
    icon: WeatherIcon


class WeatherSection(FleetModel):
    current: CurrentConditions
    series: ForecastSeries


class Coordinates(FleetModel):
    latitude: float = Field(..., ge=-90.0, le=90.0)
    longitude: float = Field(..., ge=-180.0, le=180.0)

    @property
    def query(self) -> str:
        """Provider query string, ``"<lat>,<lon>"``."""
        return f"{self.latitude},{self.longitude}"
