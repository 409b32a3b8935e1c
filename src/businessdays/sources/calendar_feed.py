from __future__ import annotations

import datetime
import logging
from typing import Any, Callable

from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from businessdays._exceptions import SourceAuthorizationError, SourceError
from businessdays.sources.settings import SourceSettings

logger = logging.getLogger(__name__)

SCOPES = ["https://www.googleapis.com/auth/calendar.readonly"]

Event = dict[str, Any]


def holiday_calendar_id(country_code: str) -> str:
    """Public holiday calendar id, e.g. ``"it.italian"`` → ``it.italian#holiday@...``."""
    return f"{country_code}#holiday@group.v.calendar.google.com"


def _event_date(event: Event) -> str | None:
    start = event.get("start") or {}
    return start.get("date") or (start.get("dateTime") or "")[:10] or None


class CalendarFeed:
    """
    Holidays read from a public Google Calendar holiday feed.

    ``service`` is a Calendar v3 resource (``googleapiclient.discovery.build``);
    pass a ready one, or use :meth:`from_service_account_file`.
    """

    def __init__(self, service: Any, predicate: Callable[[Event], bool] | None = None) -> None:
        self._service = service
        self._predicate = predicate or (lambda event: True)

    @classmethod
    def from_service_account_file(
        cls, path: str | None = None, predicate: Callable[[Event], bool] | None = None
    ) -> CalendarFeed:
        path = path or SourceSettings().calendar_credentials_file
        if not path:
            raise SourceAuthorizationError("No credentials file configured for the calendar feed.")
        try:
            creds = service_account.Credentials.from_service_account_file(path, scopes=SCOPES)
        except (OSError, ValueError) as exc:
            raise SourceAuthorizationError(f"Cannot load calendar credentials from {path}: {exc}") from exc
        service = build("calendar", "v3", credentials=creds, cache_discovery=False)
        return cls(service, predicate)

    def with_predicate(self, predicate: Callable[[Event], bool]) -> CalendarFeed:
        self._predicate = predicate
        return self

    def fetch(self, country_code: str, year: int | None = None) -> list[datetime.date]:
        year = year or datetime.date.today().year
        seen: set[str] = set()
        dates: list[datetime.date] = []
        for event in self._events(country_code):
            key = _event_date(event)
            if key is None or key in seen:
                continue
            seen.add(key)
            if not self._predicate(event):
                continue
            try:
                day = datetime.date.fromisoformat(key)
            except ValueError as exc:
                raise SourceError(f"Event with malformed start date {key!r}.") from exc
            if day.year == year:
                dates.append(day)
        logger.debug("Calendar feed kept %d holidays for %s/%d", len(dates), country_code, year)
        return dates

    def _events(self, country_code: str) -> list[Event]:
        calendar_id = holiday_calendar_id(country_code)
        events: list[Event] = []
        page_token: str | None = None
        while True:
            try:
                page = self._service.events().list(
                    calendarId=calendar_id,
                    pageToken=page_token,
                    singleEvents=True,
                    orderBy="startTime",
                ).execute()
            except HttpError as exc:
                status = getattr(exc.resp, "status", None)
                if status in (401, 403):
                    raise SourceAuthorizationError(f"Calendar feed refused access ({status}).") from exc
                raise SourceError(f"Calendar feed request failed ({status}).") from exc
            events.extend(page.get("items", []))
            page_token = page.get("nextPageToken")
            if not page_token:
                return events
