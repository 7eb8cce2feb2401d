"""Terminal front end: run the dashboard and print every tick.

Usage
-----
::

    export WEATHER_API_KEY="..."
    export FLEET_LATITUDE=23.7998 FLEET_LONGITUDE=86.4305
    fleetdash --ticks 10

Options::

    --ticks N        Stop after N ticks (default: run until interrupted)
    --interval S     Seconds between ticks (default: FLEET_TICK_INTERVAL or 3)
    --seed N         Seed the telemetry simulator
    --no-weather     Skip the forecast lookup
    --json           Print each view as a JSON line
    -v, --verbose    Debug logging
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import random
import sys
from collections.abc import Sequence
from typing import Any, TextIO

from fleetdash.config import FleetConfig
from fleetdash.dashboard import FleetDashboard
from fleetdash.exceptions import FleetConfigError
from fleetdash.ingestion.simulator import TelemetrySimulator
from fleetdash.models.view import DashboardView, TickResult


def format_view(view: DashboardView, *, threshold: int) -> str:
    """Render a view as plain text."""
    lines = [f"== Tick {view.tick} =="]
    for vehicle in view.vehicles:
        marker = "!" if vehicle.exceeds(threshold) else " "
        lines.append(
            f"{marker} {vehicle.label:<8} {vehicle.driver_name:<14} {vehicle.cargo_kind:<11}"
            f" {vehicle.speed:>3} km/h  {vehicle.home.name} "
            f"({vehicle.position.latitude}, {vehicle.position.longitude})"
        )
    if view.alert is not None:
        lines.append(f"ALERT Speed Limit Exceeded! {view.alert.message}")
    lines.append("Speed: " + ", ".join(f"{point.label}={point.speed}" for point in view.speed_series))
    lines.append("Payload (t): " + ", ".join(f"{point.label}={point.payload}" for point in view.payload_series))

    if view.weather is not None:
        current = view.weather.current
        lines.append(
            f"Weather in {current.location_name}: {current.temperature}°C, {current.condition} [{current.icon}]"
        )
        lines.append("Hourly: " + ", ".join(f"{p.time}={p.temperature}" for p in view.weather.series.hourly))
        lines.append("Daily: " + ", ".join(f"{p.date}={p.temperature}" for p in view.weather.series.daily))
    elif view.weather_status:
        lines.append(f"Weather: {view.weather_status}")
    return "\n".join(lines)


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="fleetdash", description="Run the fleet operations dashboard in a terminal.")
    parser.add_argument(
        "--ticks", type=_non_negative_int, default=0, help="stop after N ticks (0 = run until interrupted)"
    )
    parser.add_argument("--interval", type=float, default=None, help="seconds between ticks")
    parser.add_argument("--seed", type=int, default=None, help="seed the telemetry simulator")
    parser.add_argument("--no-weather", action="store_true", help="skip the forecast lookup")
    parser.add_argument("--json", action="store_true", help="print each view as a JSON line")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser.parse_args(argv)


def _build_config(args: argparse.Namespace) -> FleetConfig:
    overrides: dict[str, Any] = {}
    if args.interval is not None:
        overrides["tick_interval"] = args.interval
    if args.no_weather:
        overrides["weather_enabled"] = False
    return FleetConfig.from_env(**overrides)


async def run(config: FleetConfig, *, ticks: int, as_json: bool, seed: int | None, out: TextIO) -> None:
    """Run the dashboard, writing one view per tick to *out*."""
    done = asyncio.Event()
    source = TelemetrySimulator(
        rng=random.Random(seed),
        speed_min=config.speed_min,
        speed_max=config.speed_max,
        jitter=config.position_jitter,
        precision=config.coordinate_precision,
    )

    def _render(result: TickResult) -> None:
        if ticks and result.tick > ticks:
            return
        view = dashboard.view()
        if as_json:
            out.write(view.model_dump_json() + "\n")
        else:
            out.write(format_view(view, threshold=config.speed_threshold) + "\n\n")
        out.flush()
        if ticks and result.tick >= ticks:
            done.set()

    async with FleetDashboard(config, source=source, on_tick=_render) as dashboard:
        await dashboard.load_weather()
        dashboard.start()
        await done.wait()


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = _build_config(args)
    except FleetConfigError as exc:
        print(f"fleetdash: {exc}", file=sys.stderr)
        return 2

    try:
        asyncio.run(run(config, ticks=args.ticks, as_json=args.json, seed=args.seed, out=sys.stdout))
    except KeyboardInterrupt:
        pass
    return 0
