"""Unit tests for the poll scheduler."""

import asyncio
from unittest.mock import AsyncMock

import pytest

from noaa_observations.scheduler import PollScheduler


class TestPollScheduler:
    @pytest.mark.asyncio
    async def test_initial_run_then_interval(self):
        job = AsyncMock()
        scheduler = PollScheduler(job, interval_seconds=0.05, initial_delay_seconds=0.01)

        scheduler.start()
        await asyncio.sleep(0.03)
        assert job.call_count == 1

        await asyncio.sleep(0.1)
        await scheduler.stop()

        assert job.call_count >= 2

    @pytest.mark.asyncio
    async def test_stop_cancels_both_timers(self):
        job = AsyncMock()
        scheduler = PollScheduler(job, interval_seconds=0.05, initial_delay_seconds=0.05)

        scheduler.start()
        assert scheduler.running
        await scheduler.stop()
        assert not scheduler.running

        await asyncio.sleep(0.1)
        job.assert_not_called()

    @pytest.mark.asyncio
    async def test_stop_is_idempotent(self):
        scheduler = PollScheduler(AsyncMock(), interval_seconds=1)

        await scheduler.stop()
        scheduler.start()
        await scheduler.stop()
        await scheduler.stop()

    @pytest.mark.asyncio
    async def test_failing_job_keeps_interval_running(self):
        job = AsyncMock(side_effect=RuntimeError("boom"))
        scheduler = PollScheduler(job, interval_seconds=0.02, initial_delay_seconds=0.0)

        scheduler.start()
        await asyncio.sleep(0.1)
        assert scheduler.running
        await scheduler.stop()

        assert job.call_count >= 2
