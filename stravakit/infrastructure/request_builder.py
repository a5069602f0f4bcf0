from __future__ import annotations

import logging
import math
from decimal import Decimal
from typing import Any, Callable, Dict, Mapping, Optional

import httpx
from pydantic_core import to_jsonable_python

from ..models import RequestParams
from ..application.ports import StravaAuthError

logger = logging.getLogger(__name__)

CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_FORM = "application/x-www-form-urlencoded"
ACCEPT = "application/json;charset=UTF-8"


def stringify(value: Any) -> str:
    """Render a query or form value the way the Strava API expects it."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if not math.isfinite(value):
            return str(value)
        if value.is_integer():
            return str(int(value))
        # Plain decimal notation, never exponent form.
        return format(Decimal(repr(value)), "f")
    return str(value)


def content_type_for(method: str, with_form_urlencoded: bool) -> str:
    if method.upper() == "POST" and not with_form_urlencoded:
        return CONTENT_TYPE_JSON
    return CONTENT_TYPE_FORM


def _body_kwargs(content_type: str, values: Mapping[str, Any]) -> Dict[str, Any]:
    if not values:
        return {}
    if content_type == CONTENT_TYPE_JSON:
        return {"json": to_jsonable_python(dict(values))}
    return {"data": {key: stringify(value) for key, value in values.items()}}


class RequestBuilder:
    """Builds, authenticates and sends requests to the Strava API."""

    def __init__(
        self,
        http_client: httpx.Client,
        host: str,
        token_provider: Callable[[], str],
    ) -> None:
        self._http_client = http_client
        self._host = host
        self._token_provider = token_provider

    def request(
        self, method: str, url: str, params: Optional[RequestParams] = None
    ) -> httpx.Response:
        """Send one request and return the response.

        Raises :class:`StravaAuthError` on HTTP 401, with the response
        attached. Transport errors from httpx are not caught.
        """
        params = params or RequestParams()
        method = method.upper()
        content_type = content_type_for(method, params.with_form_urlencoded)

        headers: Dict[str, str] = {
            "Content-Type": content_type,
            "Accept": ACCEPT,
        }
        if params.with_bearer:
            headers["Authorization"] = f"Bearer {self._token_provider()}"

        queries = {key: stringify(value) for key, value in params.queries.items()}
        body = _body_kwargs(content_type, params.values) if method == "POST" else {}

        request = self._http_client.build_request(
            method,
            url,
            params=queries or None,
            headers=headers,
            **body,
        )
        logger.debug("Strava request %s %s", method, request.url.path)
        response = self._http_client.send(request)

        if response.status_code == 401:
            logger.warning("Strava rejected authorization for %s %s", method, request.url.path)
            raise StravaAuthError("authorization error", response=response)
        return response

    def get(self, endpoint: str, params: Optional[RequestParams] = None) -> httpx.Response:
        return self.request("GET", self._host + endpoint, params)

    def post(self, endpoint: str, params: Optional[RequestParams] = None) -> httpx.Response:
        return self.request("POST", self._host + endpoint, params)
