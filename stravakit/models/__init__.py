from .requests import ActivitiesRequest, RequestParams
from .strava import (
    AccessToken,
    Activity,
    ActivityAthlete,
    ActivityMap,
    Lap,
    Split,
    StravaModel,
    TokenAthlete,
)

__all__ = [
    'AccessToken',
    'ActivitiesRequest',
    'Activity',
    'ActivityAthlete',
    'ActivityMap',
    'Lap',
    'RequestParams',
    'Split',
    'StravaModel',
    'TokenAthlete',
]
