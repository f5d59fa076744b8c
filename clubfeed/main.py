"""Club feed run: refresh the token, fetch the club activities, print them."""

import asyncio
import logging
import signal
from typing import Optional

import httpx

from clubfeed.config import Settings
from clubfeed.services.scheduler_service import FeedScheduler
from clubfeed.services.strava_service import StravaService
from clubfeed.utils.auth import StravaAuthHelper

logger = logging.getLogger(__name__)


async def fetch_club_feed(settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None) -> int:
    """Print the club's activity feed once and return the number of activities.

    Raises StravaAPIError if either the token refresh or the feed request fails;
    nothing is printed in that case.
    """
    logger.info(f"Fetching activities from club {settings.club_id}...")
    tokens = await StravaAuthHelper(settings, transport=transport).refresh_token()

    strava_service = StravaService(settings, transport=transport)
    activities = await strava_service.get_club_activities(tokens)
    strava_service.print_activities(activities)
    return len(activities)


def run_once(settings: Settings) -> int:
    """Run a single fetch at the process boundary."""
    return asyncio.run(fetch_club_feed(settings))


async def run_until_stopped(scheduler: FeedScheduler, interval_hours: float) -> signal.Signals:
    """Run ``scheduler`` until SIGINT or SIGTERM and return the signal received."""
    received = []
    stop = asyncio.Event()
    loop = asyncio.get_running_loop()

    def request_stop(sig: signal.Signals) -> None:
        received.append(sig)
        stop.set()

    installed = []
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, request_stop, sig)
            installed.append(sig)
        except NotImplementedError:
            # Windows event loops have no signal handlers; Ctrl-C still raises KeyboardInterrupt
            pass

    scheduler.start(interval_hours)
    try:
        await stop.wait()
        logger.info(f"{received[0].name} received, shutting down scheduler")
    finally:
        await scheduler.shutdown()
        for sig in installed:
            loop.remove_signal_handler(sig)
    return received[0]


def run_scheduled(settings: Settings, interval_hours: float) -> signal.Signals:
    """Fetch now and then every ``interval_hours`` until SIGINT or SIGTERM.

    Returns the signal that stopped the scheduler.
    """
    scheduler = FeedScheduler(lambda: fetch_club_feed(settings))
    return asyncio.run(run_until_stopped(scheduler, interval_hours))
