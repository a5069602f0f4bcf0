from __future__ import annotations

import logging

import httpx

from ..application.ports import (
    GRANT_AUTHORIZATION_CODE,
    GRANT_REFRESH_TOKEN,
    UnsupportedGrantError,
)
from ..models import AccessToken, RequestParams
from ..settings import Config
from .request_builder import RequestBuilder
from .responses import decode_response

logger = logging.getLogger(__name__)

AUTHORIZE_URL = "https://www.strava.com/oauth/authorize"
TOKEN_URL = "https://www.strava.com/api/v3/oauth/token"

# Query field carrying the exchanged token for each supported grant.
_GRANT_FIELDS = {
    GRANT_AUTHORIZATION_CODE: "code",
    GRANT_REFRESH_TOKEN: "refresh_token",
}


class AuthorizationFlow:
    """OAuth2 authorization for Strava: the consent URL and token exchanges."""

    def __init__(self, requests: RequestBuilder, config: Config) -> None:
        self._requests = requests
        self._config = config

    def authorization_url(self, state: str) -> str:
        """Return the consent page URL; ``state`` is echoed back on the redirect."""
        url = httpx.URL(
            AUTHORIZE_URL,
            params={
                "client_id": self._config.client_id,
                "response_type": "code",
                "redirect_uri": self._config.redirect_uri,
                "approval_prompt": "force",
                "scope": self._config.scope,
                "state": state,
            },
        )
        return str(url)

    def authorization_access_token(self, token: str, grant_type: str) -> AccessToken:
        """Exchange an authorization code or a refresh token for an access token.

        The client credentials travel in the query string; no bearer token is
        sent. The body is decoded whatever the status code, so an error
        payload yields an ``AccessToken`` with empty fields.
        """
        field = _GRANT_FIELDS.get(grant_type)
        if field is None:
            raise UnsupportedGrantError(grant_type)

        params = RequestParams(
            queries={
                "client_id": self._config.client_id,
                "client_secret": self._config.client_secret,
                field: token,
                "grant_type": grant_type,
            }
        )
        logger.info("Exchanging Strava %s for an access token", grant_type)
        response = self._requests.request("POST", TOKEN_URL, params)
        if not response.is_success:
            logger.warning("Strava token exchange returned HTTP %s", response.status_code)
        return decode_response(response, AccessToken)
