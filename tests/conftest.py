from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import pytest

from fleetdash.models.vehicle import Site, VehicleSeed


@dataclass
class FakeResponse:
    status: int = 200
    body: str | bytes = ""

    async def read(self) -> bytes:
        if isinstance(self.body, bytes):
            return self.body
        return self.body.encode("utf-8")

    async def __aenter__(self) -> FakeResponse:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        return None


@dataclass
class FakeHttpSession:
    """Stand-in for ``aiohttp.ClientSession`` serving canned GET responses by URL."""

    routes: dict[str, FakeResponse | BaseException] = field(default_factory=dict)
    calls: list[tuple[str, dict[str, Any]]] = field(default_factory=list)
    closed: bool = False

    def get(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append((url, kwargs))
        route = self.routes.get(url)
        if route is None:
            return FakeResponse(status=404, body="not found")
        if isinstance(route, BaseException):
            raise route
        return route

    async def close(self) -> None:
        self.closed = True


def build_forecast_document(*, days: int = 2, hours: int = 24, location: str = "Dhanbad") -> dict[str, Any]:
    forecastday = []
    for day_index in range(days):
        date = f"2026-10-{19 + day_index:02d}"
        forecastday.append(
            {
                "date": date,
                "date_epoch": 1_792_368_000 + day_index * 86_400,
                "day": {"maxtemp_c": 33.0, "mintemp_c": 22.0, "avgtemp_c": 27.5 + day_index},
                "hour": [
                    {"time": f"{date} {hour:02d}:00", "temp_c": 20.0 + hour * 0.5, "is_day": 1}
                    for hour in range(hours)
                ],
            }
        )
    return {
        "location": {"name": location, "region": "Jharkhand", "country": "India"},
        "current": {"temp_c": 29.3, "condition": {"text": "Partly cloudy", "code": 1003}},
        "forecast": {"forecastday": forecastday},
    }


@pytest.fixture
def forecast_document() -> Callable[..., dict[str, Any]]:
    return build_forecast_document


@pytest.fixture
def fake_http() -> Callable[..., FakeHttpSession]:
    def _factory(routes: dict[str, FakeResponse | BaseException] | None = None) -> FakeHttpSession:
        return FakeHttpSession(routes=dict(routes or {}))

    return _factory


@pytest.fixture
def json_response() -> Callable[..., FakeResponse]:
    def _factory(payload: Any, status: int = 200) -> FakeResponse:
        return FakeResponse(status=status, body=json.dumps(payload))

    return _factory


@pytest.fixture
def text_response() -> Callable[..., FakeResponse]:
    def _factory(body: str | bytes, status: int = 200) -> FakeResponse:
        return FakeResponse(status=status, body=body)

    return _factory


@pytest.fixture
def three_trucks() -> list[VehicleSeed]:
    home = Site(name="Dhanbad", latitude=23.7998, longitude=86.4305)
    return [
        VehicleSeed(id="Truck A", label="Truck A", driver_name="Rajesh Kumar", cargo_kind="Coal", home=home),
        VehicleSeed(id="Truck B", label="Truck B", driver_name="Priya Sharma", cargo_kind="Iron Ore", home=home),
        VehicleSeed(id="Truck C", label="Truck C", driver_name="Amit Singh", cargo_kind="Limestone", home=home),
    ]
