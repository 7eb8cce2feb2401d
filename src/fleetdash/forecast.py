"""Forecast normalization.

Maps a provider ``forecast.json`` document into fixed-shape, chart-ready
series. The functions here own no state and either return a complete
result or raise :class:`~fleetdash.exceptions.MalformedForecastError`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from fleetdash._constants import DEFAULT_HOURLY_POINTS
from fleetdash.exceptions import MalformedForecastError
from fleetdash.ingestion.normalize import time_of_day
from fleetdash.models.forecast import (
    CurrentConditions,
    DailyPoint,
    ForecastDocument,
    ForecastSeries,
    HourlyPoint,
    WeatherIcon,
    WeatherSection,
)

_logger = logging.getLogger(__name__)


def parse_document(document: Mapping[str, Any] | ForecastDocument) -> ForecastDocument:
    """Validate a raw provider document."""
    if isinstance(document, ForecastDocument):
        return document
    if not isinstance(document, Mapping):
        raise MalformedForecastError(f"Forecast document must be an object, got {type(document).__name__}")
    try:
        return ForecastDocument.model_validate(dict(document))
    except ValidationError as exc:
        raise MalformedForecastError(f"Invalid forecast document: {exc.error_count()} validation error(s)") from exc


def normalize_forecast(
    document: Mapping[str, Any] | ForecastDocument,
    *,
    hourly_points: int = DEFAULT_HOURLY_POINTS,
) -> ForecastSeries:
    """Build the hourly and daily temperature series.

    Parameters
    ----------
    document
        Raw provider document or an already parsed one.
    hourly_points
        Number of leading hours of the first day to keep.

    Returns
    -------
    ForecastSeries
        ``hourly`` holds the first ``hourly_points`` hours of day 0;
        ``daily`` holds one point per forecast day present.

    Raises
    ------
    MalformedForecastError
        When the day list, or the hour list of day 0, is missing or empty,
        or an hour's ``time`` has no time-of-day component.
    """
    parsed = parse_document(document)
    days = parsed.forecast.forecastday
    if not days:
        raise MalformedForecastError("Forecast document has no forecast days")
    first_day = days[0]
    if not first_day.hour:
        raise MalformedForecastError(f"Forecast day {first_day.date} has no hourly entries")

    hourly: list[HourlyPoint] = []
    for hour in first_day.hour[:hourly_points]:
        clock = time_of_day(hour.time)
        if clock is None:
            raise MalformedForecastError(f"Hourly entry has no time of day: {hour.time!r}")
        hourly.append(HourlyPoint(time=clock, temperature=hour.temp_c))

    daily = [DailyPoint(date=day.date, temperature=day.day.avgtemp_c) for day in days]

    _logger.debug("Normalized forecast: %d hourly, %d daily points", len(hourly), len(daily))
    return ForecastSeries(hourly=tuple(hourly), daily=tuple(daily))


def current_conditions(document: Mapping[str, Any] | ForecastDocument) -> CurrentConditions:
    """Extract the current-weather header (location, temperature, condition)."""
    parsed = parse_document(document)
    if parsed.location is None:
        raise MalformedForecastError("Forecast document has no location")
    if parsed.current is None:
        raise MalformedForecastError("Forecast document has no current conditions")
    condition = parsed.current.condition.text
    return CurrentConditions(
        location_name=parsed.location.name,
        temperature=parsed.current.temp_c,
        condition=condition,
        icon=WeatherIcon.from_condition(condition),
    )


def build_weather_section(
    document: Mapping[str, Any] | ForecastDocument,
    *,
    hourly_points: int = DEFAULT_HOURLY_POINTS,
) -> WeatherSection:
    """Everything the weather section displays, or an error."""
    parsed = parse_document(document)
    return WeatherSection(
        current=current_conditions(parsed),
        series=normalize_forecast(parsed, hourly_points=hourly_points),
    )
