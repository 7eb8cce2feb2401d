from __future__ import annotations

import asyncio
from datetime import UTC, datetime

import pytest

from fleetdash.models.alert import Alert, AlertEvent, AlertEventKind
from fleetdash.models.vehicle import Position, TelemetrySample, Vehicle, VehicleSeed
from fleetdash.state.alerts import AlertMonitor
from fleetdash.state.registry import VehicleRegistry

LIFETIME = 0.05


def _dt() -> datetime:
    return datetime(2026, 1, 1, tzinfo=UTC)


def _sample(vehicle_id: str, speed: int, tick: int = 1) -> TelemetrySample:
    return TelemetrySample(
        vehicle_id=vehicle_id,
        speed=speed,
        position=Position(latitude=23.8, longitude=86.43),
        tick=tick,
    )


def _vehicles(seeds: list[VehicleSeed]) -> dict[str, Vehicle]:
    return {vehicle.id: vehicle for vehicle in VehicleRegistry(seeds).snapshot()}


@pytest.mark.asyncio
async def test_alert_raised_immediately_and_cleared_after_lifetime(three_trucks: list[VehicleSeed]) -> None:
    events: list[AlertEvent] = []
    monitor = AlertMonitor(lifetime=LIFETIME, clock=_dt, on_event=events.append)

    alert = monitor.observe([_sample("Truck B", 62)], _vehicles(three_trucks))

    assert alert == Alert(vehicle_id="Truck B", label="Truck B", speed=62, raised_at=_dt())
    assert monitor.active == alert
    assert monitor.pending_clear

    await asyncio.sleep(LIFETIME / 2)
    assert monitor.active == alert

    await asyncio.sleep(LIFETIME * 2)
    assert monitor.active is None
    assert not monitor.pending_clear
    assert [event.kind for event in events] == [AlertEventKind.RAISED, AlertEventKind.CLEARED]


@pytest.mark.asyncio
async def test_clear_happens_no_earlier_than_lifetime(three_trucks: list[VehicleSeed]) -> None:
    loop = asyncio.get_running_loop()
    cleared = loop.create_future()

    def _on_event(event: AlertEvent) -> None:
        if event.kind == AlertEventKind.CLEARED and not cleared.done():
            cleared.set_result(loop.time())

    monitor = AlertMonitor(lifetime=LIFETIME, on_event=_on_event)
    raised_at = loop.time()
    monitor.observe([_sample("Truck A", 51)], _vehicles(three_trucks))

    cleared_at = await asyncio.wait_for(cleared, timeout=1.0)

    # asyncio may run a timer up to one clock-resolution tick early.
    assert cleared_at - raised_at >= LIFETIME - 0.01
    assert cleared_at - raised_at < LIFETIME + 0.5


@pytest.mark.asyncio
async def test_threshold_is_strict(three_trucks: list[VehicleSeed]) -> None:
    monitor = AlertMonitor(lifetime=LIFETIME)

    assert monitor.observe([_sample("Truck A", 50), _sample("Truck B", 20)], _vehicles(three_trucks)) is None
    assert not monitor.pending_clear


@pytest.mark.asyncio
async def test_last_qualifying_sample_in_a_tick_wins(three_trucks: list[VehicleSeed]) -> None:
    events: list[AlertEvent] = []
    monitor = AlertMonitor(lifetime=LIFETIME, on_event=events.append)

    alert = monitor.observe(
        [_sample("Truck A", 55), _sample("Truck B", 30), _sample("Truck C", 66)],
        _vehicles(three_trucks),
    )

    assert alert is not None
    assert (alert.vehicle_id, alert.speed) == ("Truck C", 66)
    assert [(event.kind, event.alert.vehicle_id) for event in events] == [
        (AlertEventKind.RAISED, "Truck A"),
        (AlertEventKind.SUPERSEDED, "Truck A"),
        (AlertEventKind.RAISED, "Truck C"),
    ]
    monitor.cancel()


@pytest.mark.asyncio
async def test_newer_alert_is_not_cleared_by_superseded_timer(three_trucks: list[VehicleSeed]) -> None:
    events: list[AlertEvent] = []
    monitor = AlertMonitor(lifetime=0.2, on_event=events.append)
    vehicles = _vehicles(three_trucks)

    monitor.observe([_sample("Truck A", 60, tick=1)], vehicles)
    await asyncio.sleep(0.1)
    monitor.observe([_sample("Truck B", 65, tick=2)], vehicles)

    # Truck A's original deadline passes; Truck B must still be active.
    await asyncio.sleep(0.15)
    assert monitor.active is not None
    assert monitor.active.vehicle_id == "Truck B"

    await asyncio.sleep(0.15)
    assert monitor.active is None
    assert [(event.kind, event.alert.vehicle_id) for event in events] == [
        (AlertEventKind.RAISED, "Truck A"),
        (AlertEventKind.SUPERSEDED, "Truck A"),
        (AlertEventKind.RAISED, "Truck B"),
        (AlertEventKind.CLEARED, "Truck B"),
    ]


@pytest.mark.asyncio
async def test_cancel_drops_pending_clear_without_event(three_trucks: list[VehicleSeed]) -> None:
    events: list[AlertEvent] = []
    monitor = AlertMonitor(lifetime=LIFETIME, on_event=events.append)
    monitor.observe([_sample("Truck A", 60)], _vehicles(three_trucks))

    monitor.cancel()
    await asyncio.sleep(LIFETIME * 2)

    assert not monitor.pending_clear
    assert monitor.active is None
    assert [event.kind for event in events] == [AlertEventKind.RAISED]


@pytest.mark.asyncio
async def test_clear_now_emits_cleared(three_trucks: list[VehicleSeed]) -> None:
    events: list[AlertEvent] = []
    monitor = AlertMonitor(lifetime=10.0, on_event=events.append)
    monitor.observe([_sample("Truck A", 60)], _vehicles(three_trucks))

    monitor.clear()
    monitor.clear()

    assert monitor.active is None
    assert not monitor.pending_clear
    assert [event.kind for event in events] == [AlertEventKind.RAISED, AlertEventKind.CLEARED]


@pytest.mark.asyncio
async def test_failing_callback_does_not_break_monitor(three_trucks: list[VehicleSeed]) -> None:
    def _boom(_event: AlertEvent) -> None:
        raise RuntimeError("sink down")

    monitor = AlertMonitor(lifetime=LIFETIME, on_event=_boom)

    alert = monitor.observe([_sample("Truck A", 60)], _vehicles(three_trucks))
    await asyncio.sleep(LIFETIME * 2)

    assert alert is not None
    assert monitor.active is None


def test_alert_message() -> None:
    alert = Alert(vehicle_id="2", label="Truck 2", speed=62, raised_at=datetime(2026, 1, 1))

    assert alert.message == "Truck 2 is currently at 62 km/h."
    assert alert.raised_at.tzinfo is UTC
