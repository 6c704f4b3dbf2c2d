"""Repeating asyncio timer."""

import asyncio
import contextlib
import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)


class IntervalTimer:
    """Calls ``on_tick`` every ``interval_seconds`` until cancelled."""

    def __init__(self, name: str, interval_seconds: float, on_tick: Callable[[], None]) -> None:
        self.name = name
        self.interval_seconds = interval_seconds
        self._on_tick = on_tick
        self._task: asyncio.Task | None = None

    @property
    def task(self) -> asyncio.Task | None:
        """The asyncio task backing the timer, once started."""
        return self._task

    @property
    def active(self) -> bool:
        """Whether the timer is running."""
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start ticking; the first tick fires after one full interval."""
        if self.active:
            logger.warning(f"Timer {self.name} already running")
            return
        self._task = asyncio.create_task(self._run(), name=f"timer:{self.name}")

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval_seconds)
            self._on_tick()

    def cancel(self) -> None:
        """Cancel the timer; no tick fires after this returns."""
        if self._task is not None and not self._task.done():
            self._task.cancel()

    async def stop(self) -> None:
        """Cancel the timer and wait for its task to finish."""
        self.cancel()
        if self._task is not None:
            with contextlib.suppress(asyncio.CancelledError):
                await self._task
