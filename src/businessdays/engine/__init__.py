"""
businessdays.engine
~~~~~~~~~~~~~~~~~~~

Business-day stepping.  A :class:`BusinessDayConfig` describes weekends,
holidays, holiday weekdays and the years the holiday rules apply to; a
:class:`BusinessDayEngine` scans forward one day at a time from the
configured starting date.

Basic usage::

    import datetime
    from businessdays.engine import BusinessDayConfig, BusinessDayEngine

    config = (
        BusinessDayConfig()
        .with_starting_date(datetime.date(2019, 12, 18))
        .with_business_saturday([2, 12])         # Saturdays in Feb and Dec
        .computing_christmas()
    )
    BusinessDayEngine(config).next_business_day(3)   # → date(2019, 12, 21)

NumPy arrays of counts are accepted as well and return ``datetime64[D]``::

    import numpy as np
    BusinessDayEngine(config).next_business_day(np.array([1, 2, 3]))

Public API
----------
BusinessDayConfig   Immutable configuration with builder methods.
BusinessDayEngine   Stepping, holiday queries and the scan horizon.
Weekday             Day-of-week enum.
Always, ByYearOrMonth, ByRange
                    Weekend override rules.
next_business_day   Functional shortcut for the engine method.
is_qualifying_day   Functional shortcut for the per-day check.
as_timestamp, as_string, as_period, as_duration, as_date_time_duration,
format_duration     Presentation helpers for a computed date.
"""

from __future__ import annotations

from businessdays.engine.config import BusinessDayConfig
from businessdays.engine.engine import BusinessDayEngine, is_qualifying_day, next_business_day
from businessdays.engine.presentation import (
    ZERO_DURATION,
    as_date_time_duration,
    as_duration,
    as_period,
    as_string,
    as_timestamp,
    format_duration,
)
from businessdays.engine.rules import Always, ByRange, ByYearOrMonth, Weekday, WeekendRule, weekend_rule

__all__ = [
    "Always",
    "BusinessDayConfig",
    "BusinessDayEngine",
    "ByRange",
    "ByYearOrMonth",
    "Weekday",
    "WeekendRule",
    "ZERO_DURATION",
    "as_date_time_duration",
    "as_duration",
    "as_period",
    "as_string",
    "as_timestamp",
    "format_duration",
    "is_qualifying_day",
    "next_business_day",
    "weekend_rule",
]
