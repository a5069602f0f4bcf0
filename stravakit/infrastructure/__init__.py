"""HTTP adapters for the Strava API."""

from .authorization import AuthorizationFlow
from .client import StravaClient, create_strava_client, create_strava_client_from_env
from .request_builder import RequestBuilder
from .resources import ResourceClient

__all__ = [
    "AuthorizationFlow",
    "RequestBuilder",
    "ResourceClient",
    "StravaClient",
    "create_strava_client",
    "create_strava_client_from_env",
]
