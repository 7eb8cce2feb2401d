"""Fixed-interval tick scheduling on the running event loop."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Callable
from typing import Any

_logger = logging.getLogger(__name__)


class TickScheduler:
    """Call ``step()`` every ``interval`` seconds until stopped.

    ``step`` is synchronous, so one invocation always completes before
    any other task on the loop observes its effects. Exceptions raised by
    ``step`` are logged and the schedule continues.
    """

    def __init__(self, interval: float, step: Callable[[], Any], *, name: str = "fleetdash-tick") -> None:
        self._interval = interval
        self._step = step
        self._name = name
        self._task: asyncio.Task[None] | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run(), name=self._name)

    async def stop(self) -> None:
        task = self._task
        self._task = None
        if task is None:
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            try:
                self._step()
            except Exception:
                _logger.exception("Tick step failed")
