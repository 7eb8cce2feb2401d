"""High-level async orchestrator for the fleet dashboard."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Iterable
from datetime import UTC, datetime
from typing import Any

import aiohttp

from fleetdash._constants import (
    DEFAULT_FLEET,
    STATUS_DISABLED,
    STATUS_FETCH_FAILED,
    STATUS_LOADING,
    STATUS_MALFORMED,
)
from fleetdash._geolocation import LocationProvider, provider_from_config
from fleetdash._scheduler import TickScheduler
from fleetdash._weather import WeatherClient
from fleetdash.aggregation import payload_series, speed_series
from fleetdash.config import FleetConfig
from fleetdash.exceptions import (
    FleetError,
    ForecastFetchError,
    LocationUnavailableError,
    MalformedForecastError,
    UnknownVehicleError,
)
from fleetdash.forecast import build_weather_section
from fleetdash.ingestion.simulator import TelemetrySimulator, TelemetrySource
from fleetdash.models.alert import Alert, AlertEvent
from fleetdash.models.chart import ChartPoint
from fleetdash.models.forecast import WeatherSection
from fleetdash.models.vehicle import TelemetrySample, VehicleSeed
from fleetdash.models.view import DashboardView, TickResult
from fleetdash.state.alerts import AlertMonitor
from fleetdash.state.registry import VehicleRegistry

_logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


def default_seeds() -> list[VehicleSeed]:
    """The five-truck Dhanbad-Sindri fleet."""
    return [VehicleSeed.model_validate(seed) for seed in DEFAULT_FLEET]


class FleetDashboard:
    """Owns the registry and drives it with discrete ticks.

    Usage::

        async with FleetDashboard(FleetConfig.from_env()) as dashboard:
            await dashboard.load_weather()
            dashboard.start()
            ...
            view = dashboard.view()

    One tick runs the telemetry source, applies every sample to the
    registry, lets the alert monitor observe the samples and replaces the
    speed series. The step has no awaits, so no other task can observe a
    half-applied tick.
    """

    def __init__(
        self,
        config: FleetConfig | None = None,
        *,
        seeds: Iterable[VehicleSeed] | None = None,
        source: TelemetrySource | None = None,
        session: aiohttp.ClientSession | None = None,
        location_provider: LocationProvider | None = None,
        on_tick: Callable[[TickResult], None] | None = None,
        on_alert: Callable[[AlertEvent], None] | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._config = config if config is not None else FleetConfig()
        self._registry = VehicleRegistry(seeds if seeds is not None else default_seeds())
        self._source: TelemetrySource = source if source is not None else TelemetrySimulator(
            speed_min=self._config.speed_min,
            speed_max=self._config.speed_max,
            jitter=self._config.position_jitter,
            precision=self._config.coordinate_precision,
        )
        self._monitor = AlertMonitor(
            threshold=self._config.speed_threshold,
            lifetime=self._config.alert_lifetime,
            clock=clock,
            on_event=self._on_alert_event,
        )
        self._scheduler = TickScheduler(self._config.tick_interval, self.tick)
        self._external_session = session is not None
        self._http_session = session
        self._location_provider = location_provider
        self._on_tick = on_tick
        self._on_alert = on_alert

        self._tick = 0
        self._speed_series: tuple[ChartPoint, ...] = ()
        self._weather: WeatherSection | None = None
        self._weather_status: str | None = STATUS_LOADING if self._config.weather_enabled else STATUS_DISABLED

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> FleetDashboard:
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.stop()
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def config(self) -> FleetConfig:
        return self._config

    @property
    def registry(self) -> VehicleRegistry:
        return self._registry

    @property
    def monitor(self) -> AlertMonitor:
        return self._monitor

    @property
    def running(self) -> bool:
        return self._scheduler.running

    @property
    def alert(self) -> Alert | None:
        return self._monitor.active

    @property
    def speed_series(self) -> tuple[ChartPoint, ...]:
        return self._speed_series

    def view(self) -> DashboardView:
        """Immutable snapshot of everything the dashboard renders."""
        return DashboardView(
            tick=self._tick,
            vehicles=self._registry.snapshot(),
            alert=self._monitor.active,
            speed_series=self._speed_series,
            payload_series=tuple(payload_series()),
            weather=self._weather,
            weather_status=self._weather_status,
        )

    # ------------------------------------------------------------------
    # Telemetry tick
    # ------------------------------------------------------------------

    def tick(self) -> TickResult:
        """Run one atomic simulation step.

        Must be called with a running event loop, which schedules alert
        clears. Without one it raises before any state changes.
        """
        try:
            asyncio.get_running_loop()
        except RuntimeError as exc:
            raise FleetError("FleetDashboard.tick() requires a running event loop") from exc

        samples = self._source.step(self._registry.snapshot())

        applied: list[TelemetrySample] = []
        skipped: list[str] = []
        for sample in samples:
            try:
                self._registry.apply_sample(sample)
            except UnknownVehicleError as exc:
                _logger.warning("Skipping sample: %s", exc)
                skipped.append(sample.vehicle_id)
                continue
            applied.append(sample)

        snapshot = self._registry.snapshot()
        alert = self._monitor.observe(applied, {vehicle.id: vehicle for vehicle in snapshot})
        self._speed_series = tuple(speed_series(snapshot))
        self._tick += 1

        result = TickResult(
            tick=self._tick,
            samples=tuple(applied),
            skipped=tuple(skipped),
            speed_series=self._speed_series,
            alert=alert,
        )
        _logger.debug("Tick %d applied %d samples (%d skipped)", self._tick, len(applied), len(skipped))

        if self._on_tick is not None:
            try:
                self._on_tick(result)
            except Exception:
                _logger.debug("on_tick callback failed", exc_info=True)
        return result

    def start(self) -> None:
        """Start the fixed-interval tick loop on the running event loop."""
        self._scheduler.start()

    async def stop(self) -> None:
        """Cancel the tick loop and drop any active alert."""
        await self._scheduler.stop()
        self._monitor.cancel()

    def _on_alert_event(self, event: AlertEvent) -> None:
        if self._on_alert is not None:
            try:
                self._on_alert(event)
            except Exception:
                _logger.debug("on_alert callback failed", exc_info=True)

    # ------------------------------------------------------------------
    # Weather
    # ------------------------------------------------------------------

    def _require_session(self) -> aiohttp.ClientSession:
        if self._http_session is None:
            raise FleetError("Dashboard not initialized. Use 'async with FleetDashboard(...) as dashboard:'")
        return self._http_session

    async def load_weather(self) -> WeatherSection | None:
        """Locate, fetch and normalize the forecast once.

        Failures replace the weather section with a status message and are
        never raised; the tick loop is unaffected.
        """
        if not self._config.weather_enabled:
            self._weather = None
            self._weather_status = STATUS_DISABLED
            return None

        session = self._require_session()
        provider = self._location_provider or provider_from_config(self._config, session)

        try:
            coordinates = await provider.locate()
            document = await WeatherClient(self._config, session).fetch_forecast(coordinates)
            section = build_weather_section(document, hourly_points=self._config.hourly_points)
        except LocationUnavailableError as exc:
            _logger.warning("Weather suppressed, location unavailable: %s", exc)
            return self._suppress_weather(str(exc))
        except ForecastFetchError as exc:
            _logger.warning("Weather suppressed, fetch failed: %s", exc)
            return self._suppress_weather(STATUS_FETCH_FAILED)
        except MalformedForecastError as exc:
            _logger.warning("Weather suppressed, malformed forecast: %s", exc)
            return self._suppress_weather(STATUS_MALFORMED)

        self._weather = section
        self._weather_status = None
        _logger.info(
            "Weather loaded for %s: %d hourly, %d daily points",
            section.current.location_name,
            len(section.series.hourly),
            len(section.series.daily),
        )
        return section

    def _suppress_weather(self, message: str) -> None:
        self._weather = None
        self._weather_status = message
        return None
