from __future__ import annotations

from fleetdash.aggregation import payload_series, speed_series, to_records
from fleetdash.models.chart import ChartPoint, PayloadPoint
from fleetdash.models.vehicle import Position, TelemetrySample, VehicleSeed
from fleetdash.state.registry import VehicleRegistry


def test_speed_series_one_point_per_vehicle_in_registration_order(three_trucks: list[VehicleSeed]) -> None:
    registry = VehicleRegistry(three_trucks)
    for vehicle_id, speed in (("Truck C", 44), ("Truck A", 21), ("Truck B", 62)):
        registry.apply_sample(
            TelemetrySample(
                vehicle_id=vehicle_id,
                speed=speed,
                position=Position(latitude=23.8, longitude=86.43),
                tick=1,
            )
        )

    series = speed_series(registry.snapshot())

    assert series == [
        ChartPoint(label="Truck A", speed=21),
        ChartPoint(label="Truck B", speed=62),
        ChartPoint(label="Truck C", speed=44),
    ]


def test_speed_series_of_empty_fleet_is_empty() -> None:
    assert speed_series(()) == []


def test_payload_series_is_fixed() -> None:
    assert payload_series() == [
        PayloadPoint(label="Truck A", payload=120),
        PayloadPoint(label="Truck B", payload=150),
        PayloadPoint(label="Truck C", payload=90),
        PayloadPoint(label="Truck D", payload=110),
        PayloadPoint(label="Truck E", payload=135),
    ]


def test_to_records_returns_plain_dicts() -> None:
    records = to_records([ChartPoint(label="Truck A", speed=21), ChartPoint(label="Truck B", speed=62)])

    assert records == [{"label": "Truck A", "speed": 21}, {"label": "Truck B", "speed": 62}]
