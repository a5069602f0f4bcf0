"""Application layer for the Strava client."""

from .ports import (
    GRANT_AUTHORIZATION_CODE,
    GRANT_REFRESH_TOKEN,
    StravaAuthError,
    StravaClientPort,
    StravaDecodeError,
    StravaError,
    UnsupportedGrantError,
)

__all__ = [
    "GRANT_AUTHORIZATION_CODE",
    "GRANT_REFRESH_TOKEN",
    "StravaAuthError",
    "StravaClientPort",
    "StravaDecodeError",
    "StravaError",
    "UnsupportedGrantError",
]
