"""Timer registrations that drive the observation cycle."""

import asyncio
import logging
from typing import Awaitable, Callable

logger = logging.getLogger(__name__)

Job = Callable[[], Awaitable[object]]


class PollScheduler:
    """Runs a job once after an initial delay and then on a fixed interval.

    Both timers are asyncio tasks and are cancelled by stop().
    """

    def __init__(
        self,
        job: Job,
        interval_seconds: float,
        initial_delay_seconds: float = 0.0,
    ) -> None:
        """Initialize scheduler.

        Args:
            job: Coroutine function to run on each trigger.
            interval_seconds: Seconds between interval triggers.
            initial_delay_seconds: Delay before the one-shot initial run.
        """
        self.job = job
        self.interval_seconds = interval_seconds
        self.initial_delay_seconds = initial_delay_seconds
        self._tasks: list[asyncio.Task] = []

    @property
    def running(self) -> bool:
        return any(not task.done() for task in self._tasks)

    def start(self) -> None:
        """Register the delayed initial run and the interval timer."""
        if self.running:
            logger.warning("Scheduler already running")
            return
        self._tasks = [
            asyncio.create_task(self._run_delayed(), name="initial-check"),
            asyncio.create_task(self._run_interval(), name="interval-check"),
        ]
        logger.info(
            "Scheduled first check in %ss, then every %ss",
            self.initial_delay_seconds,
            self.interval_seconds,
        )

    async def stop(self) -> None:
        """Cancel both timers and wait for them to finish."""
        for task in self._tasks:
            if not task.done():
                task.cancel()
        for task in self._tasks:
            try:
                await task
            except asyncio.CancelledError:
                pass
        self._tasks = []

    async def _trigger(self, name: str) -> None:
        try:
            await self.job()
        except Exception as e:
            logger.error("Error in %s: %s", name, e, exc_info=True)

    async def _run_delayed(self) -> None:
        await asyncio.sleep(self.initial_delay_seconds)
        await self._trigger("initial check")

    async def _run_interval(self) -> None:
        while True:
            await asyncio.sleep(self.interval_seconds)
            await self._trigger("interval check")
