"""
businessdays
~~~~~~~~~~~~

Compute the Nth following business day under configurable weekends,
holidays and holiday weekdays.

Basic usage::

    import datetime
    from businessdays import BusinessDayConfig, BusinessDayEngine, HolidaySet

    holidays = HolidaySet.from_dates([datetime.date(2019, 4, 25)])
    config = (
        BusinessDayConfig(starting_date=datetime.date(2019, 4, 23))
        .given_holidays(holidays)
    )
    BusinessDayEngine(config).next_business_day(3)   # → date(2019, 4, 29)

The holiday sources live in :mod:`businessdays.sources` and are not
imported here.
"""

from __future__ import annotations

from businessdays._exceptions import (
    BusinessDayError,
    ConfigurationError,
    InvalidArgumentError,
    SourceAuthorizationError,
    SourceError,
)
from businessdays.engine import (
    Always,
    BusinessDayConfig,
    BusinessDayEngine,
    ByRange,
    ByYearOrMonth,
    Weekday,
    next_business_day,
)
from businessdays.holidays import Holiday, HolidaySet, TemporalRange, easter, easter_monday

__all__ = [
    "Always",
    "BusinessDayConfig",
    "BusinessDayEngine",
    "BusinessDayError",
    "ByRange",
    "ByYearOrMonth",
    "ConfigurationError",
    "Holiday",
    "HolidaySet",
    "InvalidArgumentError",
    "SourceAuthorizationError",
    "SourceError",
    "TemporalRange",
    "Weekday",
    "easter",
    "easter_monday",
    "next_business_day",
]
