"""Client facade wiring and session state."""

from __future__ import annotations

import httpx
import pytest

from stravakit import StravaClientPort, create_strava_client, create_strava_client_from_env
from stravakit.infrastructure.client import StravaClient
from stravakit.settings import Config


def test_client_implements_port(config: Config) -> None:
    with StravaClient(config) as client:
        assert isinstance(client, StravaClientPort)


def test_session_setters(config: Config) -> None:
    with create_strava_client(config) as client:
        assert client.access_token == ""
        assert client.user_id == 0

        client.set_access_token("abc")
        client.set_user_id(134815)

        assert client.access_token == "abc"
        assert client.user_id == 134815
        assert client.config is config


def test_owned_http_client_is_closed(config: Config) -> None:
    client = StravaClient(config)
    client.close()
    assert client._http_client.is_closed


def test_injected_http_client_is_left_open(config: Config) -> None:
    http_client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(200)))
    with StravaClient(config, http_client=http_client):
        pass
    assert not http_client.is_closed
    http_client.close()


@pytest.mark.parametrize(
    "timeout, expected",
    [
        pytest.param(5, 5.0, id="seconds"),
        pytest.param(0, None, id="disabled"),
    ],
)
def test_timeout_comes_from_config(timeout: int, expected) -> None:
    with StravaClient(Config(timeout=timeout)) as client:
        assert client._http_client.timeout.read == expected
        assert client._http_client.timeout.connect == expected


def test_create_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STRAVA_ID", "env-client")
    monkeypatch.setenv("STRAVA_SCOPE", "read_all")

    with create_strava_client_from_env(env_file=None) as client:
        assert client.config.client_id == "env-client"
        url = httpx.URL(client.authorization_url("s"))

    assert url.params["client_id"] == "env-client"
    assert url.params["scope"] == "read_all"
