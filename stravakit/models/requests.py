from __future__ import annotations

from datetime import date, datetime, time, timezone
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, Field


class RequestParams(BaseModel):
    """Describes a single API request: query string, body values and encoding flags."""

    queries: Dict[str, Any] = Field(default_factory=dict)
    values: Dict[str, Any] = Field(default_factory=dict)
    with_bearer: bool = False
    with_form_urlencoded: bool = False


def _unix(value: Union[date, datetime]) -> int:
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return int(value.timestamp())
    return int(datetime.combine(value, time.min, tzinfo=timezone.utc).timestamp())


class ActivitiesRequest(BaseModel):
    """Filters for listing the authenticated athlete's activities."""

    before: Optional[Union[datetime, date]] = None
    after: Optional[Union[datetime, date]] = None
    page: int = 0
    per_page: int = 0

    def queries(self) -> Dict[str, int]:
        """Return the query parameters for the fields that are set.

        Dates are sent as unix timestamps (midnight UTC for plain dates, UTC
        for naive datetimes).
        """
        queries: Dict[str, int] = {}
        if self.after is not None:
            queries["after"] = _unix(self.after)
        if self.before is not None:
            queries["before"] = _unix(self.before)
        if self.page > 0:
            queries["page"] = self.page
        if self.per_page > 0:
            queries["per_page"] = self.per_page
        return queries
