from __future__ import annotations

import logging
from typing import List, Optional

import httpx

from ..models import ActivitiesRequest, Activity, RequestParams
from .request_builder import RequestBuilder
from .responses import decode_response

logger = logging.getLogger(__name__)


class ResourceClient:
    """Typed access to Strava activity endpoints.

    Only HTTP 200 responses are decoded. Any other status (401 aside, which
    raises :class:`~stravakit.application.ports.StravaAuthError`) returns an
    empty result, so a missing activity and an empty one look the same.
    """

    def __init__(self, requests: RequestBuilder) -> None:
        self._requests = requests

    def activity(self, activity_id: int) -> Activity:
        response = self._requests.get(
            f"/activities/{activity_id}", RequestParams(with_bearer=True)
        )
        if not self._is_ok(response):
            return Activity()
        return decode_response(response, Activity)

    def activities(self, request: Optional[ActivitiesRequest] = None) -> List[Activity]:
        request = request or ActivitiesRequest()
        response = self._requests.get(
            "/activities",
            RequestParams(with_bearer=True, queries=request.queries()),
        )
        if not self._is_ok(response):
            return []
        return decode_response(response, List[Activity])

    @staticmethod
    def _is_ok(response: httpx.Response) -> bool:
        if response.status_code == 200:
            return True
        logger.warning(
            "Strava returned HTTP %s for %s, treating as empty",
            response.status_code,
            response.request.url.path,
        )
        return False
