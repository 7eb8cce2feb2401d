"""Tests for Pydantic model validation with FleetModel + ProviderModel."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from fleetdash.models.forecast import Coordinates, ForecastHour
from fleetdash.models.vehicle import Position, Site, TelemetrySample, Vehicle


def _vehicle(speed: int) -> Vehicle:
    home = Site(name="Sindri", latitude=23.6805, longitude=86.4874)
    return Vehicle(
        id="2",
        label="Truck 2",
        driver_name="Priya Sharma",
        cargo_kind="Iron Ore",
        home=home,
        speed=speed,
        position=home.position,
    )


class TestFleetModel:
    def test_records_are_frozen(self) -> None:
        vehicle = _vehicle(10)
        with pytest.raises(ValidationError):
            vehicle.speed = 20  # type: ignore[misc]

    def test_unknown_fields_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Position(latitude=1.0, longitude=2.0, altitude=3.0)  # type: ignore[call-arg]

    def test_negative_speed_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TelemetrySample(vehicle_id="1", speed=-1, position=Position(latitude=0.0, longitude=0.0), tick=1)

    @pytest.mark.parametrize(("speed", "expected"), [(50, False), (51, True), (0, False)])
    def test_vehicle_exceeds_is_strict(self, speed: int, expected: bool) -> None:
        assert _vehicle(speed).exceeds(50) is expected


class TestProviderModel:
    def test_extra_fields_ignored(self) -> None:
        hour = ForecastHour.model_validate({"time": "2026-10-19 00:00", "temp_c": 21.0, "wind_kph": 7.2})
        assert hour.temp_c == 21.0

    @pytest.mark.parametrize("sentinel", [None, "", "--", float("nan")])
    def test_sentinels_count_as_missing(self, sentinel: object) -> None:
        with pytest.raises(ValidationError):
            ForecastHour.model_validate({"time": "2026-10-19 00:00", "temp_c": sentinel})


class TestCoordinates:
    def test_query(self) -> None:
        assert Coordinates(latitude=-1.5, longitude=36.8).query == "-1.5,36.8"

    @pytest.mark.parametrize(("latitude", "longitude"), [(91.0, 0.0), (0.0, -181.0)])
    def test_bounds(self, latitude: float, longitude: float) -> None:
        with pytest.raises(ValidationError):
            Coordinates(latitude=latitude, longitude=longitude)
