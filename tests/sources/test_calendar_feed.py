"""
tests/sources/test_calendar_feed.py

Covers:
  - Calendar id and list() arguments
  - Paging via nextPageToken
  - First event per start date wins; year filter; predicate
  - HttpError mapping and credential loading failures
"""

import datetime
from unittest.mock import MagicMock, Mock

import pytest
from googleapiclient.errors import HttpError

from businessdays import SourceAuthorizationError, SourceError
from businessdays.sources import CalendarFeed
from businessdays.sources.calendar_feed import holiday_calendar_id


def event(day, summary="Holiday"):
    return {"summary": summary, "start": {"date": day}}


def make_service(*pages):
    service = MagicMock()
    service.events.return_value.list.return_value.execute.side_effect = list(pages)
    return service


def http_error(status):
    return HttpError(Mock(status=status, reason="error"), b"{}")


def test_calendar_id():
    assert holiday_calendar_id("it.italian") == "it.italian#holiday@group.v.calendar.google.com"


def test_list_arguments():
    service = make_service({"items": []})
    CalendarFeed(service).fetch("it.italian", 2020)
    service.events.return_value.list.assert_called_once_with(
        calendarId="it.italian#holiday@group.v.calendar.google.com",
        pageToken=None,
        singleEvents=True,
        orderBy="startTime",
    )


def test_pages_are_accumulated():
    service = make_service(
        {"items": [event("2020-01-01")], "nextPageToken": "p2"},
        {"items": [event("2020-12-25")]},
    )
    assert CalendarFeed(service).fetch("it.italian", 2020) == [
        datetime.date(2020, 1, 1),
        datetime.date(2020, 12, 25),
    ]
    second = service.events.return_value.list.call_args_list[1]
    assert second.kwargs["pageToken"] == "p2"


def test_first_event_per_date_wins():
    service = make_service({
        "items": [
            event("2020-04-12", "Easter Sunday"),
            event("2020-04-12", "Easter"),
            event("2020-04-13", "Easter Monday"),
        ]
    })
    feed = CalendarFeed(service, predicate=lambda e: e["summary"] != "Easter")
    assert feed.fetch("it.italian", 2020) == [datetime.date(2020, 4, 12), datetime.date(2020, 4, 13)]


def test_year_filter():
    service = make_service({"items": [event("2019-12-25"), event("2020-12-25"), event("2021-12-25")]})
    assert CalendarFeed(service).fetch("it.italian", 2020) == [datetime.date(2020, 12, 25)]


def test_timed_events_and_missing_start():
    service = make_service({
        "items": [
            {"summary": "Timed", "start": {"dateTime": "2020-06-02T10:00:00+02:00"}},
            {"summary": "No start"},
        ]
    })
    assert CalendarFeed(service).fetch("it.italian", 2020) == [datetime.date(2020, 6, 2)]


def test_with_predicate():
    service = make_service({"items": [event("2020-01-01", "New Year"), event("2020-08-15", "Ferragosto")]})
    feed = CalendarFeed(service)
    assert feed.with_predicate(lambda e: e["summary"] == "Ferragosto") is feed
    assert feed.fetch("it.italian", 2020) == [datetime.date(2020, 8, 15)]


@pytest.mark.parametrize("status", [401, 403])
def test_forbidden(status):
    service = MagicMock()
    service.events.return_value.list.return_value.execute.side_effect = http_error(status)
    with pytest.raises(SourceAuthorizationError):
        CalendarFeed(service).fetch("it.italian", 2020)


def test_not_found():
    service = MagicMock()
    service.events.return_value.list.return_value.execute.side_effect = http_error(404)
    with pytest.raises(SourceError) as info:
        CalendarFeed(service).fetch("xx.nowhere", 2020)
    assert not isinstance(info.value, SourceAuthorizationError)


def test_malformed_start_date():
    service = make_service({"items": [event("2020-13-45")]})
    with pytest.raises(SourceError):
        CalendarFeed(service).fetch("it.italian", 2020)


def test_no_credentials_configured(monkeypatch):
    monkeypatch.setenv("BUSINESSDAYS_CALENDAR_CREDENTIALS_FILE", "")
    with pytest.raises(SourceAuthorizationError):
        CalendarFeed.from_service_account_file()


def test_missing_credentials_file(tmp_path):
    with pytest.raises(SourceAuthorizationError):
        CalendarFeed.from_service_account_file(str(tmp_path / "missing.json"))
