"""Shared test fixtures and doubles."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Iterator, List

import httpx
import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from stravakit.infrastructure.client import StravaClient
from stravakit.settings import Config

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingTransport(httpx.MockTransport):
    """Mock transport that keeps every request it receives."""

    def __init__(self, handler: Handler) -> None:
        self.requests: List[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "No request was sent"
        return self.requests[-1]


@pytest.fixture
def config() -> Config:
    return Config(
        host="https://www.strava.com/api/v3",
        client_id="12345",
        client_secret="client-secret",
        redirect_uri="https://app.example.com/strava/callback",
        timeout=5,
        scope="read,activity:read_all",
    )


@pytest.fixture
def make_client(config: Config) -> Iterator[Callable[[Handler], tuple[StravaClient, RecordingTransport]]]:
    """Build a client whose HTTP traffic goes to ``handler``."""

    http_clients: List[httpx.Client] = []

    def factory(handler: Handler) -> tuple[StravaClient, RecordingTransport]:
        transport = RecordingTransport(handler)
        http_client = httpx.Client(transport=transport)
        http_clients.append(http_client)
        return StravaClient(config, http_client=http_client), transport

    yield factory

    for http_client in http_clients:
        http_client.close()
