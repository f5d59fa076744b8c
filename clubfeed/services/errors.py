"""Failure kinds raised by the Strava clients."""

from typing import Any

import httpx


class StravaAPIError(Exception):
    """Custom exception for Strava API errors."""
    pass


class StravaTransportError(StravaAPIError):
    """The request never produced a response (DNS, connection, timeout)."""
    pass


class StravaHTTPError(StravaAPIError):
    """Strava answered with an unexpected status code."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code


class StravaDecodeError(StravaAPIError):
    """The response body is not the JSON document we expected."""
    pass


def parse_json_response(response: httpx.Response) -> Any:
    """Check the status of a Strava response and return its decoded JSON body."""
    if response.status_code != httpx.codes.OK:
        raise StravaHTTPError(
            response.status_code,
            f"API request failed: {response.status_code} {response.reason_phrase} - {response.text}"
        )
    try:
        return response.json()
    except ValueError as e:
        raise StravaDecodeError(f"Error decoding response: {e}") from e
