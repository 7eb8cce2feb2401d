"""Coordinate providers for the weather lookup.

Coordinates are resolved once at startup. Any failure surfaces as
:class:`~fleetdash.exceptions.LocationUnavailableError` whose message is
shown in place of the weather section; there is no retry.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Protocol

import aiohttp
from pydantic import ValidationError

from fleetdash._constants import STATUS_GEOLOCATION_UNSUPPORTED, USER_AGENT
from fleetdash._redact import redact_url
from fleetdash.config import FleetConfig
from fleetdash.exceptions import LocationUnavailableError
from fleetdash.ingestion.normalize import safe_float
from fleetdash.models.forecast import Coordinates

_logger = logging.getLogger(__name__)


class LocationProvider(Protocol):
    async def locate(self) -> Coordinates: ...


class StaticLocationProvider:
    """Coordinates fixed by configuration."""

    def __init__(self, latitude: float | None, longitude: float | None) -> None:
        self._latitude = latitude
        self._longitude = longitude

    async def locate(self) -> Coordinates:
        if self._latitude is None or self._longitude is None:
            raise LocationUnavailableError(STATUS_GEOLOCATION_UNSUPPORTED)
        try:
            return Coordinates(latitude=self._latitude, longitude=self._longitude)
        except ValidationError as exc:
            raise LocationUnavailableError(
                f"Invalid coordinates: {self._latitude}, {self._longitude}"
            ) from exc


class HttpLocationProvider:
    """IP-based lookup against a JSON endpoint.

    Accepts ``lat``/``lon`` or ``latitude``/``longitude`` keys in the
    response body.
    """

    def __init__(self, url: str, http_session: aiohttp.ClientSession, *, timeout: float = 10.0) -> None:
        self._url = url
        self._http = http_session
        self._timeout = timeout

    async def locate(self) -> Coordinates:
        _logger.debug("GET %s", redact_url(self._url))
        try:
            async with self._http.get(
                self._url,
                headers={"accept": "application/json", "user-agent": USER_AGENT},
                timeout=aiohttp.ClientTimeout(total=self._timeout),
            ) as resp:
                raw = await resp.read()
                if resp.status != 200:
                    raise LocationUnavailableError(f"Geolocation lookup failed with HTTP {resp.status}")
        except LocationUnavailableError:
            raise
        except (aiohttp.ClientError, TimeoutError) as exc:
            raise LocationUnavailableError(f"Geolocation lookup failed: {exc}") from exc

        try:
            body: Any = json.loads(raw)
        except ValueError as exc:
            raise LocationUnavailableError("Geolocation lookup returned invalid JSON") from exc
        if not isinstance(body, dict):
            raise LocationUnavailableError("Geolocation lookup returned an unexpected response")

        latitude = safe_float(body.get("lat", body.get("latitude")))
        longitude = safe_float(body.get("lon", body.get("longitude")))
        if latitude is None or longitude is None:
            raise LocationUnavailableError("Geolocation lookup returned no coordinates")
        try:
            return Coordinates(latitude=latitude, longitude=longitude)
        except ValidationError as exc:
            raise LocationUnavailableError(f"Invalid coordinates: {latitude}, {longitude}") from exc


def provider_from_config(config: FleetConfig, http_session: aiohttp.ClientSession) -> LocationProvider:
    """Configured coordinates win, then an HTTP lookup, else unavailable."""
    if config.has_fixed_location or not config.geolocation_url:
        return StaticLocationProvider(config.latitude, config.longitude)
    return HttpLocationProvider(config.geolocation_url, http_session, timeout=config.request_timeout)
