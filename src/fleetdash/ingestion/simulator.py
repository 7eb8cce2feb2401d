"""Simulated telemetry source.

A production deployment would swap this module for a real sensor feed;
anything implementing :class:`TelemetrySource` can drive the dashboard.
"""

from __future__ import annotations

import logging
import math
import random
from collections.abc import Sequence
from typing import Protocol

from fleetdash._constants import (
    DEFAULT_COORDINATE_PRECISION,
    DEFAULT_POSITION_JITTER,
    DEFAULT_SPEED_MAX,
    DEFAULT_SPEED_MIN,
)
from fleetdash.models.vehicle import Position, TelemetrySample, Vehicle

_logger = logging.getLogger(__name__)


class TelemetrySource(Protocol):
    """Structural interface for anything that produces one tick of samples."""

    def step(self, vehicles: Sequence[Vehicle]) -> list[TelemetrySample]: ...


class TelemetrySimulator:
    """Random-walk telemetry generator.

    Each :meth:`step` yields one sample per vehicle, in the order given:

    * ``speed`` is ``floor(random() * (speed_max - speed_min)) + speed_min``,
      an integer in ``[speed_min, speed_max)``.
    * latitude and longitude each drift by ``uniform(-jitter, jitter)``
      from the vehicle's *current* position and are rounded to
      ``precision`` decimals. The walk is unbounded over time.
    """

    def __init__(
        self,
        *,
        rng: random.Random | None = None,
        speed_min: int = DEFAULT_SPEED_MIN,
        speed_max: int = DEFAULT_SPEED_MAX,
        jitter: float = DEFAULT_POSITION_JITTER,
        precision: int = DEFAULT_COORDINATE_PRECISION,
    ) -> None:
        if speed_max <= speed_min:
            raise ValueError(f"speed_max must be greater than speed_min, got [{speed_min}, {speed_max})")
        self._rng = rng if rng is not None else random.Random()
        self._speed_min = speed_min
        self._speed_max = speed_max
        self._jitter = jitter
        self._precision = precision
        self._tick = 0

    @property
    def tick(self) -> int:
        """Number of the last tick produced (``0`` before the first step)."""
        return self._tick

    def _next_speed(self) -> int:
        return math.floor(self._rng.random() * (self._speed_max - self._speed_min)) + self._speed_min

    def _drift(self, value: float) -> float:
        return round(value + self._rng.uniform(-self._jitter, self._jitter), self._precision)

    def sample(self, vehicle: Vehicle, tick: int) -> TelemetrySample:
        """Produce one sample for *vehicle* without advancing the tick."""
        speed = self._next_speed()
        position = Position(
            latitude=self._drift(vehicle.position.latitude),
            longitude=self._drift(vehicle.position.longitude),
        )
        return TelemetrySample(vehicle_id=vehicle.id, speed=speed, position=position, tick=tick)

    def step(self, vehicles: Sequence[Vehicle]) -> list[TelemetrySample]:
        """Advance one tick and return a sample per vehicle."""
        self._tick += 1
        samples = [self.sample(vehicle, self._tick) for vehicle in vehicles]
        _logger.debug("Tick %d: simulated %d samples", self._tick, len(samples))
        return samples
