from __future__ import annotations

import json
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from ..application.ports import StravaDecodeError


def decode_response(response: httpx.Response, target: Any) -> Any:
    """Validate the JSON body of ``response`` as ``target``."""
    try:
        payload: Any = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise StravaDecodeError(
            f"invalid JSON in response from {response.request.url.path}", response=response
        ) from exc

    try:
        return TypeAdapter(target).validate_python(payload)
    except ValidationError as exc:
        raise StravaDecodeError(
            f"unexpected payload from {response.request.url.path}: {exc}", response=response
        ) from exc
