"""Shared fixtures: settings and a recording mock of the Strava endpoints."""

import json
from typing import Callable, List

import httpx
import pytest

from clubfeed.config import Settings


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


def _json_response(payload, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, content=json.dumps(payload).encode())


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        client_id="4147",
        client_secret="s3cr3t",
        refresh_token="r3fr3sh",
        club_id="231407",
        request_timeout=5.0
    )


@pytest.fixture
def token_body():
    return {
        "token_type": "Bearer",
        "access_token": "a9b723",
        "expires_at": 1568775134,
        "expires_in": 20566,
        "refresh_token": "b5c569"
    }


@pytest.fixture
def recording_transport():
    """Factory for a mock transport that records the requests it serves."""
    return RecordingTransport


@pytest.fixture
def json_response():
    """Factory for a JSON response with an optional status code."""
    return _json_response


@pytest.fixture
def strava_routes():
    """Factory serving the OAuth token endpoint and the club activities endpoint."""

    def build(token_response: httpx.Response, activities_response: httpx.Response) -> RecordingTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/oauth/token":
                return token_response
            if request.url.path.startswith("/api/v3/clubs/"):
                return activities_response
            return httpx.Response(404)

        return RecordingTransport(handler)

    return build
