"""
Command-line launcher for the Strava club feed.
Prints the club's activity feed once, or periodically with --interval-hours.
"""

import argparse
import logging
import signal
import sys
from pathlib import Path

from pydantic import ValidationError

from clubfeed.config import Settings
from clubfeed.main import run_once, run_scheduled
from clubfeed.services.errors import StravaAPIError

logger = logging.getLogger("clubfeed")

EXIT_API_ERROR = 1
EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="clubfeed", description="Print the activity feed of a Strava club")
    parser.add_argument(
        "--interval-hours",
        type=float,
        default=None,
        help="Repeat every N hours until interrupted (default: SCHEDULE_INTERVAL_HOURS, 0 runs once)"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["critical", "error", "warning", "info", "debug"],
        help="Log level (default: LOG_LEVEL or info)"
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="dotenv file with CLIENT_ID, CLIENT_SECRET, REFRESH_TOKEN and CLUB_ID (default: .env)"
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    env_file_missing = not Path(args.env_file).exists()
    try:
        settings = Settings(_env_file=None if env_file_missing else args.env_file)
    except ValidationError as e:
        print(f"Invalid configuration:\n{e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    logging.basicConfig(
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        level=(args.log_level or settings.log_level).upper()
    )
    if env_file_missing:
        logger.warning(f"{args.env_file} file not found, using process environment only")

    interval_hours = args.interval_hours if args.interval_hours is not None else settings.schedule_interval_hours

    try:
        if interval_hours > 0:
            stopped_by = run_scheduled(settings, interval_hours)
            return 128 + int(stopped_by)
        run_once(settings)
    except StravaAPIError as e:
        logger.error(f"Club feed failed: {e}")
        return EXIT_API_ERROR
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 128 + int(signal.SIGINT)
    return 0
