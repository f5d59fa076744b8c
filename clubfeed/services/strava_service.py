"""Strava API service for fetching a club's activity feed."""

import logging
import sys
from typing import Any, List, Optional, TextIO

import httpx
from pydantic import TypeAdapter, ValidationError

from clubfeed.config import Settings
from clubfeed.models.strava import Activity, StravaTokens
from clubfeed.services.errors import (
    StravaAPIError,
    StravaDecodeError,
    StravaHTTPError,
    StravaTransportError,
    parse_json_response,
)
from clubfeed.utils.formatting import format_activity

__all__ = [
    "StravaService",
    "StravaAPIError",
    "StravaDecodeError",
    "StravaHTTPError",
    "StravaTransportError",
]

logger = logging.getLogger(__name__)

_activity_list = TypeAdapter(List[Activity])


class StravaService:
    """Service class for reading a club feed from the Strava API."""

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = settings.strava_api_base_url
        self.club_id = settings.club_id
        self.timeout = settings.request_timeout
        self._transport = transport

    async def _make_request(self, method: str, endpoint: str, tokens: StravaTokens) -> Any:
        """Make an authenticated request to Strava API."""
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        headers = {
            "Authorization": tokens.authorization_header,
            "Content-Type": "application/json"
        }

        async with httpx.AsyncClient(transport=self._transport, timeout=self.timeout) as client:
            try:
                response = await client.request(method=method, url=url, headers=headers)
            except httpx.RequestError as e:
                raise StravaTransportError(f"Request error: {e!r}") from e
            return parse_json_response(response)

    async def get_club_activities(self, tokens: StravaTokens) -> List[Activity]:
        """Get the recent activities of the configured club's members."""
        data = await self._make_request("GET", f"/clubs/{self.club_id}/activities", tokens)
        try:
            activities = _activity_list.validate_python(data)
        except ValidationError as e:
            raise StravaDecodeError(f"Unexpected club activities payload: {e}") from e

        logger.info(f"Fetched {len(activities)} activities from club {self.club_id}")
        return activities

    @staticmethod
    def print_activities(activities: List[Activity], stream: Optional[TextIO] = None) -> None:
        """Print one summary line per activity."""
        out = stream if stream is not None else sys.stdout
        for activity in activities:
            print(format_activity(activity), file=out)
