"""HTTP client for the forecast provider."""

from __future__ import annotations

import json
import logging
from typing import Any

import aiohttp

from fleetdash._constants import USER_AGENT
from fleetdash._redact import redact_for_log
from fleetdash.config import FleetConfig
from fleetdash.exceptions import ForecastFetchError
from fleetdash.models.forecast import Coordinates

_logger = logging.getLogger(__name__)


def _preview(raw: bytes) -> str:
    return raw[:200].decode("utf-8", errors="replace")


class WeatherClient:
    """Fetch ``forecast.json`` documents keyed by coordinates."""

    def __init__(self, config: FleetConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session

    @property
    def url(self) -> str:
        return f"{self._config.weather_base_url.rstrip('/')}/forecast.json"

    def build_params(self, coordinates: Coordinates) -> dict[str, str]:
        return {
            "key": self._config.weather_api_key or "",
            "q": coordinates.query,
            "days": str(self._config.forecast_days),
            "aqi": "no",
            "alerts": "no",
        }

    async def fetch_forecast(self, coordinates: Coordinates) -> dict[str, Any]:
        """GET the forecast document for *coordinates*.

        Raises
        ------
        ForecastFetchError
            Missing API key, network failure, non-200 status, or a body
            that is not a JSON object.
        """
        if not self._config.weather_api_key:
            raise ForecastFetchError("No weather API key configured", url=self.url)

        params = self.build_params(coordinates)
        headers = {"accept": "application/json", "user-agent": USER_AGENT}
        timeout = aiohttp.ClientTimeout(total=self._config.request_timeout)

        _logger.debug("GET %s params=%s", self.url, redact_for_log(params))

        try:
            async with self._http.get(self.url, params=params, headers=headers, timeout=timeout) as resp:
                raw = await resp.read()
                if resp.status != 200:
                    raise ForecastFetchError(
                        f"HTTP {resp.status} from forecast provider: {_preview(raw)}",
                        status_code=resp.status,
                        url=self.url,
                    )
        except ForecastFetchError:
            raise
        except (aiohttp.ClientError, TimeoutError) as exc:
            raise ForecastFetchError(f"Forecast request failed: {exc}", url=self.url) from exc

        try:
            body: Any = json.loads(raw)
        except ValueError as exc:
            # JSONDecodeError and UnicodeDecodeError
            raise ForecastFetchError(
                f"Invalid JSON from forecast provider: {_preview(raw)}",
                status_code=200,
                url=self.url,
            ) from exc

        if not isinstance(body, dict):
            raise ForecastFetchError("Forecast response is not a JSON object", status_code=200, url=self.url)
        return body
