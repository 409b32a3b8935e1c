"""
businessdays.sources
~~~~~~~~~~~~~~~~~~~~

Holiday sources: third-party services that list a country's holidays.
The engine never talks to them; fetch first, then hand the dates over::

    from businessdays.sources import PublicHolidayDirectory, load_holidays

    directory = PublicHolidayDirectory(api_key="...")
    holidays = load_holidays(directory, "IT", year=2020)
    config = BusinessDayConfig().given_holidays(holidays)

Public API
----------
HolidaySource            Protocol: ``fetch(country_code, year=None)``.
PublicHolidayDirectory   Subscription-keyed REST directory.
CalendarFeed             Google Calendar public holiday feed.
SourceSettings           Environment-backed settings.
load_holidays            Fetch and wrap in a HolidaySet.
"""

from __future__ import annotations

from businessdays.sources.base import HolidaySource, load_holidays
from businessdays.sources.calendar_feed import CalendarFeed
from businessdays.sources.public_holiday import PublicHolidayDirectory
from businessdays.sources.settings import SourceSettings

__all__ = [
    "CalendarFeed",
    "HolidaySource",
    "PublicHolidayDirectory",
    "SourceSettings",
    "load_holidays",
]
