"""Time-series projections for the chart sink.

Everything here is a pure function of its input; the displayed speed
series is always exactly the latest snapshot, never a rolling history.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from pydantic import BaseModel

from fleetdash._constants import PAYLOAD_TONS
from fleetdash.models.chart import ChartPoint, PayloadPoint
from fleetdash.models.vehicle import Vehicle


def speed_series(snapshot: Sequence[Vehicle]) -> list[ChartPoint]:
    """One ``{label, speed}`` point per vehicle, in snapshot order."""
    return [ChartPoint(label=vehicle.label, speed=vehicle.speed) for vehicle in snapshot]


def payload_series() -> list[PayloadPoint]:
    """The fixed payload-by-vehicle series."""
    return [PayloadPoint(label=label, payload=tons) for label, tons in PAYLOAD_TONS]


def to_records(points: Iterable[BaseModel]) -> list[dict[str, Any]]:
    """Plain dict records, the shape chart renderers consume."""
    return [point.model_dump(mode="json") for point in points]
