"""Speed alert monitor.

Owns the single live :class:`~fleetdash.models.alert.Alert`. The
lifecycle is ``Idle -> Active -> Idle``: a qualifying sample raises an
alert, and a deferred clear scheduled on the event loop returns the
monitor to idle after ``lifetime`` seconds. Every raise cancels the
previous pending clear before scheduling its own, so a stale timer can
never clear a newer alert.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Iterable, Mapping
from datetime import UTC, datetime

from fleetdash._constants import DEFAULT_ALERT_LIFETIME, DEFAULT_SPEED_THRESHOLD
from fleetdash.models.alert import Alert, AlertEvent, AlertEventKind
from fleetdash.models.vehicle import TelemetrySample, Vehicle

_logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class AlertMonitor:
    """Raise and auto-clear speed alerts.

    Parameters
    ----------
    threshold : int
        Speeds strictly above this value raise an alert.
    lifetime : float
        Seconds an alert stays active.
    clock : callable
        Wall-clock source for ``raised_at``.
    on_event : callable or None
        Invoked with an :class:`AlertEvent` on every transition.
    loop : asyncio.AbstractEventLoop or None
        Loop used to schedule the clear. Defaults to the running loop at
        raise time.
    """

    def __init__(
        self,
        *,
        threshold: int = DEFAULT_SPEED_THRESHOLD,
        lifetime: float = DEFAULT_ALERT_LIFETIME,
        clock: Callable[[], datetime] = _utcnow,
        on_event: Callable[[AlertEvent], None] | None = None,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        self._threshold = threshold
        self._lifetime = lifetime
        self._clock = clock
        self._on_event = on_event
        self._loop = loop
        self._active: Alert | None = None
        self._clear_handle: asyncio.TimerHandle | None = None
        # Incremented on every raise; a clear only applies to its own raise.
        self._generation = 0

    @property
    def threshold(self) -> int:
        return self._threshold

    @property
    def active(self) -> Alert | None:
        """The live alert, or ``None`` when idle."""
        return self._active

    @property
    def pending_clear(self) -> bool:
        """Whether an auto-clear is scheduled."""
        return self._clear_handle is not None

    def observe(self, samples: Iterable[TelemetrySample], vehicles: Mapping[str, Vehicle]) -> Alert | None:
        """Inspect one tick of samples and raise for any over the threshold.

        When several samples qualify in the same tick, each raise supersedes
        the previous one, so the last in iteration order stays active.
        """
        raised_at = self._clock()
        for sample in samples:
            if sample.speed <= self._threshold:
                continue
            vehicle = vehicles.get(sample.vehicle_id)
            label = vehicle.label if vehicle is not None else sample.vehicle_id
            self.raise_alert(
                Alert(
                    vehicle_id=sample.vehicle_id,
                    label=label,
                    speed=sample.speed,
                    raised_at=raised_at,
                )
            )
        return self._active

    def raise_alert(self, alert: Alert) -> None:
        """Make *alert* the active one and schedule its clear."""
        loop = self._loop if self._loop is not None else asyncio.get_running_loop()
        self._cancel_pending()

        previous = self._active
        if previous is not None:
            self._emit(AlertEventKind.SUPERSEDED, previous)

        self._generation += 1
        generation = self._generation
        self._active = alert
        self._clear_handle = loop.call_later(self._lifetime, self._expire, generation)
        _logger.info("Speed alert: %s", alert.message)
        self._emit(AlertEventKind.RAISED, alert)

    def clear(self) -> None:
        """Clear the active alert now."""
        self._cancel_pending()
        alert = self._active
        if alert is None:
            return
        self._active = None
        self._emit(AlertEventKind.CLEARED, alert)

    def cancel(self) -> None:
        """Drop the active alert and its pending clear without emitting.

        Used on shutdown; a stopped monitor is always idle.
        """
        self._cancel_pending()
        self._generation += 1
        self._active = None

    def _cancel_pending(self) -> None:
        handle = self._clear_handle
        self._clear_handle = None
        if handle is not None:
            handle.cancel()

    def _expire(self, generation: int) -> None:
        if generation != self._generation:
            return
        self._clear_handle = None
        alert = self._active
        if alert is None:
            return
        self._active = None
        _logger.debug("Speed alert for %s expired", alert.vehicle_id)
        self._emit(AlertEventKind.CLEARED, alert)

    def _emit(self, kind: AlertEventKind, alert: Alert) -> None:
        if self._on_event is None:
            return
        try:
            self._on_event(AlertEvent(kind=kind, alert=alert, observed_at=self._clock()))
        except Exception:
            _logger.debug("on_event callback failed", exc_info=True)
