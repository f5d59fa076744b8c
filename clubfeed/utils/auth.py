"""Authentication utilities for Strava OAuth."""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from clubfeed.config import Settings
from clubfeed.models.strava import StravaTokens
from clubfeed.services.errors import StravaDecodeError, StravaTransportError, parse_json_response

logger = logging.getLogger(__name__)


class StravaAuthHelper:
    """Helper class for the Strava OAuth refresh-token grant."""

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.token_url = settings.strava_oauth_url
        self.client_id = settings.client_id
        self.client_secret = settings.client_secret
        self.refresh_token_value = settings.refresh_token
        self.timeout = settings.request_timeout
        self._transport = transport

    async def refresh_token(self) -> StravaTokens:
        """Exchange the configured refresh token for a fresh access token."""
        params = {
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "grant_type": "refresh_token",
            "refresh_token": self.refresh_token_value
        }
        headers = {"Content-Type": "application/json"}

        async with httpx.AsyncClient(transport=self._transport, timeout=self.timeout) as client:
            try:
                response = await client.post(self.token_url, params=params, headers=headers)
            except httpx.RequestError as e:
                raise StravaTransportError(f"Error sending token request: {e!r}") from e
            token_data = parse_json_response(response)

        try:
            tokens = StravaTokens.model_validate(token_data)
        except ValidationError as e:
            raise StravaDecodeError(f"Unexpected token response: {e}") from e

        logger.debug(f"Access token refreshed, expires at {tokens.expires_at}")
        return tokens
