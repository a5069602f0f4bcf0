"""Payload models and request filters."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

from stravakit.models import AccessToken, ActivitiesRequest, Activity, RequestParams


def test_empty_activities_request_has_no_queries() -> None:
    assert ActivitiesRequest().queries() == {}


def test_activities_request_only_includes_set_fields() -> None:
    assert ActivitiesRequest(page=2).queries() == {"page": 2}
    assert ActivitiesRequest(per_page=100).queries() == {"per_page": 100}


def test_activities_request_dates_become_unix_timestamps() -> None:
    request = ActivitiesRequest(
        after=date(2020, 1, 1),
        before=datetime(2020, 1, 1, 12, 0),
    )
    assert request.queries() == {"after": 1577836800, "before": 1577880000}


def test_activities_request_respects_timezone() -> None:
    paris = timezone(timedelta(hours=1))
    request = ActivitiesRequest(after=datetime(2020, 1, 1, 1, 0, tzinfo=paris))
    assert request.queries() == {"after": 1577836800}


def test_activity_zero_value() -> None:
    activity = Activity()
    assert activity.id == 0
    assert activity.name == ""
    assert activity.start_date is None
    assert activity.splits_metric == []
    assert activity.laps == []
    assert activity.athlete.id == 0
    assert activity.map.summary_polyline == ""


def test_activity_ignores_unknown_fields() -> None:
    activity = Activity.model_validate({"id": 3, "kudos_count": 12, "athlete": {"id": 9, "resource_state": 1}})
    assert activity.id == 3
    assert activity.athlete.id == 9
    assert "kudos_count" not in activity.model_dump()


def test_access_token_null_username() -> None:
    token = AccessToken.model_validate(
        {"access_token": "abc", "athlete": {"id": 1, "username": None, "firstname": "Ana"}}
    )
    assert token.athlete.username == ""
    assert token.athlete.firstname == "Ana"


def test_request_params_defaults() -> None:
    params = RequestParams()
    assert params.queries == {}
    assert params.values == {}
    assert params.with_bearer is False
    assert params.with_form_urlencoded is False


def test_activity_drops_null_list_items() -> None:
    activity = Activity.model_validate(
        {"id": 1, "splits_metric": [None, {"distance": 1000.0}], "laps": [None], "start_latlng": None}
    )
    assert len(activity.splits_metric) == 1
    assert activity.splits_metric[0].distance == 1000.0
    assert activity.laps == []
    assert activity.start_latlng == []
