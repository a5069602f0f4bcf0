from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Union

import httpx

from ..application.ports import StravaClientPort
from ..models import AccessToken, ActivitiesRequest, Activity
from ..settings import Config, load_config
from .authorization import AuthorizationFlow
from .request_builder import RequestBuilder
from .resources import ResourceClient


class StravaClient(StravaClientPort):
    """Strava API client holding the session's access token and user id.

    The session setters are not synchronized: share an instance between
    threads only with external locking.
    """

    def __init__(self, config: Config, http_client: Optional[httpx.Client] = None) -> None:
        self._config = config
        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.Client(timeout=config.timeout or None)
        self._access_token = ""
        self._user_id = 0

        self._requests = RequestBuilder(
            self._http_client, config.host, lambda: self._access_token
        )
        self._authorization = AuthorizationFlow(self._requests, config)
        self._resources = ResourceClient(self._requests)

    @property
    def config(self) -> Config:
        return self._config

    @property
    def access_token(self) -> str:
        return self._access_token

    @property
    def user_id(self) -> int:
        return self._user_id

    @property
    def requests(self) -> RequestBuilder:
        """The request pipeline, for endpoints without a typed helper."""
        return self._requests

    def set_access_token(self, token: str) -> None:
        self._access_token = token

    def set_user_id(self, user_id: int) -> None:
        self._user_id = user_id

    def authorization_url(self, state: str) -> str:
        return self._authorization.authorization_url(state)

    def authorization_access_token(self, token: str, grant_type: str) -> AccessToken:
        return self._authorization.authorization_access_token(token, grant_type)

    def activity(self, activity_id: int) -> Activity:
        return self._resources.activity(activity_id)

    def activities(self, request: Optional[ActivitiesRequest] = None) -> List[Activity]:
        return self._resources.activities(request)

    def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_http_client:
            self._http_client.close()

    def __enter__(self) -> "StravaClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def create_strava_client(
    config: Config, *, http_client: Optional[httpx.Client] = None
) -> StravaClient:
    """Create a Strava client for an explicit configuration."""
    return StravaClient(config, http_client=http_client)


def create_strava_client_from_env(
    env_file: Optional[Union[str, Path]] = ".env",
    *,
    http_client: Optional[httpx.Client] = None,
) -> StravaClient:
    """Create a Strava client configured from ``STRAVA_*`` environment variables."""
    return StravaClient(load_config(env_file), http_client=http_client)
