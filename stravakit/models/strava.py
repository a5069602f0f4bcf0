from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class StravaModel(BaseModel):
    """Base for Strava payloads: unknown keys are ignored and nulls keep defaults."""

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        cleaned = {}
        for key, value in data.items():
            if value is None:
                continue
            if isinstance(value, list):
                value = [item for item in value if item is not None]
            cleaned[key] = value
        return cleaned


class Split(StravaModel):
    distance: float = 0.0
    elevation_difference: float = 0.0
    elapsed_time: int = 0
    moving_time: int = 0
    average_speed: float = 0.0
    average_grade_adjusted_speed: float = 0.0
    average_heartrate: float = 0.0
    pace_zone: int = 0


class Lap(StravaModel):
    id: int = 0
    split: int = 0
    lap_index: int = 0
    name: str = ""
    distance: float = 0.0
    elapsed_time: int = 0
    moving_time: int = 0
    average_speed: float = 0.0
    average_heartrate: float = 0.0
    average_cadence: float = 0.0
    max_speed: float = 0.0
    max_heartrate: float = 0.0
    total_elevation_gain: float = 0.0
    pace_zone: int = 0


class ActivityAthlete(StravaModel):
    id: int = 0


class ActivityMap(StravaModel):
    id: str = ""
    polyline: str = ""
    summary_polyline: str = ""


class Activity(StravaModel):
    """An activity as returned by ``GET /activities/{id}`` and ``GET /activities``."""

    id: int = 0
    external_id: str = ""
    upload_id: int = 0
    name: str = ""
    description: str = ""
    type: str = ""
    distance: float = 0.0
    moving_time: int = 0
    elapsed_time: int = 0
    average_speed: float = 0.0
    average_cadence: float = 0.0
    average_heartrate: float = 0.0
    max_speed: float = 0.0
    max_heartrate: float = 0.0
    max_watts: float = 0.0
    suffer_score: float = 0.0
    calories: float = 0.0
    total_elevation_gain: float = 0.0
    elev_high: float = 0.0
    elev_low: float = 0.0
    start_latlng: List[float] = Field(default_factory=list)
    end_latlng: List[float] = Field(default_factory=list)
    device_name: str = ""
    start_date: Optional[datetime] = None
    splits_metric: List[Split] = Field(default_factory=list)
    laps: List[Lap] = Field(default_factory=list)
    athlete: ActivityAthlete = Field(default_factory=ActivityAthlete)
    map: ActivityMap = Field(default_factory=ActivityMap)


class TokenAthlete(StravaModel):
    id: int = 0
    username: str = ""
    firstname: str = ""
    lastname: str = ""


class AccessToken(StravaModel):
    """Response of the OAuth token exchange."""

    token_type: str = ""
    expires_at: int = 0
    expires_in: int = 0
    refresh_token: str = ""
    access_token: str = ""
    athlete: TokenAthlete = Field(default_factory=TokenAthlete)
