"""In-memory vehicle registry.

This is the only component allowed to mutate vehicle telemetry.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from fleetdash.exceptions import FleetConfigError, UnknownVehicleError
from fleetdash.models.vehicle import TelemetrySample, Vehicle, VehicleSeed


class VehicleRegistry:
    """Authoritative table of vehicle identity and current telemetry.

    Records are frozen models; applying a sample swaps the record for an
    updated copy, so a snapshot taken earlier never changes underneath
    its reader. Iteration order is registration order.
    """

    def __init__(self, seed_vehicles: Iterable[VehicleSeed] | None = None) -> None:
        self._vehicles: dict[str, Vehicle] = {}
        if seed_vehicles is not None:
            self.initialize(seed_vehicles)

    def initialize(self, seed_vehicles: Iterable[VehicleSeed]) -> None:
        """Establish the fixed vehicle set at zero speed and home position."""
        vehicles: dict[str, Vehicle] = {}
        for seed in seed_vehicles:
            if seed.id in vehicles:
                raise FleetConfigError(f"Duplicate vehicle id: {seed.id!r}")
            vehicles[seed.id] = Vehicle(
                **seed.model_dump(include=set(VehicleSeed.model_fields)),
                speed=0,
                position=seed.home.position,
            )
        self._vehicles = vehicles

    def apply_sample(self, sample: TelemetrySample) -> Vehicle:
        """Replace a vehicle's speed and position with the sample's."""
        current = self._vehicles.get(sample.vehicle_id)
        if current is None:
            raise UnknownVehicleError(sample.vehicle_id)
        updated = current.model_copy(update={"speed": sample.speed, "position": sample.position})
        self._vehicles[sample.vehicle_id] = updated
        return updated

    def snapshot(self) -> tuple[Vehicle, ...]:
        """Current vehicle states in registration order."""
        return tuple(self._vehicles.values())

    def get(self, vehicle_id: str) -> Vehicle | None:
        return self._vehicles.get(vehicle_id)

    def ids(self) -> tuple[str, ...]:
        return tuple(self._vehicles)

    def __len__(self) -> int:
        return len(self._vehicles)

    def __contains__(self, vehicle_id: object) -> bool:
        return vehicle_id in self._vehicles

    def __iter__(self) -> Iterator[Vehicle]:
        return iter(self.snapshot())
