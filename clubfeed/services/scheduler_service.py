"""Periodic execution of the club feed run."""

import asyncio
import logging
from datetime import datetime
from typing import Awaitable, Callable, Optional

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from clubfeed.services.errors import StravaAPIError

logger = logging.getLogger(__name__)

JOB_ID = "club_feed"


class FeedScheduler:
    """Runs a feed job at a fixed interval on the asyncio event loop."""

    def __init__(self, job: Callable[[], Awaitable[object]], scheduler: Optional[AsyncIOScheduler] = None):
        self.job = job
        self.scheduler = scheduler or AsyncIOScheduler()

    async def scheduled_run(self) -> None:
        """The job that runs on schedule."""
        logger.info("Executed scheduled club feed job")
        try:
            await self.job()
        except StravaAPIError as e:
            # A failed run must not cancel the following ones
            logger.error(f"Scheduled club feed run failed: {e}")

    def start(self, interval_hours: float) -> None:
        """Start the scheduler with an immediate first run."""
        if interval_hours <= 0:
            raise ValueError(f"interval_hours must be positive, got {interval_hours}")

        self.scheduler.add_job(
            self.scheduled_run,
            IntervalTrigger(hours=interval_hours),
            id=JOB_ID,
            next_run_time=datetime.now(),
            replace_existing=True,
            max_instances=1,
            coalesce=True
        )
        if not self.scheduler.running:
            self.scheduler.start()
        logger.info(f"Scheduled club feed every {interval_hours:g} hour(s)")

    async def shutdown(self) -> None:
        """Stop the scheduler."""
        if self.scheduler.running:
            self.scheduler.shutdown(wait=False)
            # AsyncIOScheduler completes the shutdown on the next loop iteration
            await asyncio.sleep(0)
