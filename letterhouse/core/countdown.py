"""Periodic countdown recomputation for live displays."""

import asyncio
import inspect
from typing import Awaitable, Callable, Optional, Union

from loguru import logger

from . import christmas
from .christmas import Countdown

TickCallback = Callable[[Countdown], Union[None, Awaitable[None]]]


class CountdownTicker:
    """Recomputes the Christmas countdown on a fixed interval.

    One ticker belongs to one view (one open stream). ``stop`` cancels the
    background task; it must be called on teardown.
    """

    def __init__(self, timezone: str, on_tick: TickCallback, interval: float = 1.0):
        # Fail fast on a bad timezone instead of inside the task
        christmas.resolve_timezone(timezone)
        self.timezone = timezone
        self.on_tick = on_tick
        self.interval = interval
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(self):
        """Start ticking; the first tick is emitted immediately."""
        if not self.running:
            self._task = asyncio.create_task(self._run())
            logger.debug(f"Countdown ticker started for {self.timezone}")

    async def stop(self):
        """Cancel the ticker and wait for it to wind down."""
        if self.running:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            logger.debug(f"Countdown ticker stopped for {self.timezone}")
        self._task = None

    async def tick(self) -> Countdown:
        countdown = christmas.time_remaining(self.timezone)
        result = self.on_tick(countdown)
        if inspect.isawaitable(result):
            await result
        return countdown

    async def _run(self):
        while True:
            await self.tick()
            await asyncio.sleep(self.interval)
