"""Client library for the Strava API."""

from .application import (
    GRANT_AUTHORIZATION_CODE,
    GRANT_REFRESH_TOKEN,
    StravaAuthError,
    StravaClientPort,
    StravaDecodeError,
    StravaError,
    UnsupportedGrantError,
)
from .infrastructure import StravaClient, create_strava_client, create_strava_client_from_env
from .models import (
    AccessToken,
    ActivitiesRequest,
    Activity,
    Lap,
    RequestParams,
    Split,
)
from .settings import Config, load_config

__all__ = [
    "AccessToken",
    "ActivitiesRequest",
    "Activity",
    "Config",
    "GRANT_AUTHORIZATION_CODE",
    "GRANT_REFRESH_TOKEN",
    "Lap",
    "RequestParams",
    "Split",
    "StravaAuthError",
    "StravaClient",
    "StravaClientPort",
    "StravaDecodeError",
    "StravaError",
    "UnsupportedGrantError",
    "create_strava_client",
    "create_strava_client_from_env",
    "load_config",
]
