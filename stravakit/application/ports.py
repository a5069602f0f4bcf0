"""Ports for the Strava application layer."""

from __future__ import annotations

from typing import List, Optional, Protocol, runtime_checkable

import httpx

from ..models import AccessToken, ActivitiesRequest, Activity

GRANT_AUTHORIZATION_CODE = "authorization_code"
GRANT_REFRESH_TOKEN = "refresh_token"


class StravaError(RuntimeError):
    """Base class for errors raised by the Strava client."""


class StravaAuthError(StravaError):
    """Raised when Strava answers with HTTP 401.

    The response is kept on ``response`` so callers can inspect it before
    starting a new authorization (typically a refresh-token exchange).
    """

    def __init__(self, message: str, response: Optional[httpx.Response] = None) -> None:
        super().__init__(message)
        self.response = response


class UnsupportedGrantError(StravaError, ValueError):
    """Raised before any request when the OAuth grant type is not supported."""

    def __init__(self, grant_type: str) -> None:
        super().__init__(f"grant_type `{grant_type}` not supported")
        self.grant_type = grant_type


class StravaDecodeError(StravaError):
    """Raised when a response body cannot be decoded into the expected model."""

    def __init__(self, message: str, response: Optional[httpx.Response] = None) -> None:
        super().__init__(message)
        self.response = response


@runtime_checkable
class StravaClientPort(Protocol):
    """Operations exposed by a Strava client.

    Implementations keep mutable session state (access token, user id) and
    are meant for use from a single thread.
    """

    def authorization_url(self, state: str) -> str:
        """Return the URL the user visits to authorize the application."""

    def authorization_access_token(self, token: str, grant_type: str) -> AccessToken:
        """Exchange an authorization code or a refresh token for an access token."""

    def activity(self, activity_id: int) -> Activity:
        """Return the activity with the given id."""

    def activities(self, request: Optional[ActivitiesRequest] = None) -> List[Activity]:
        """Return the authenticated athlete's activities."""

    def set_access_token(self, token: str) -> None:
        """Use ``token`` as bearer for subsequent requests."""

    def set_user_id(self, user_id: int) -> None:
        """Set the default user id for user scoped requests."""


__all__ = [
    "GRANT_AUTHORIZATION_CODE",
    "GRANT_REFRESH_TOKEN",
    "StravaAuthError",
    "StravaClientPort",
    "StravaDecodeError",
    "StravaError",
    "UnsupportedGrantError",
]
