"""
businessdays.holidays
~~~~~~~~~~~~~~~~~~~~~

Holiday values and the collections the engine consumes.

Basic usage::

    from businessdays.holidays import Holiday, HolidaySet, TemporalRange

    hs = HolidaySet.parse("01-01 | 04-25 | 12-25", "-", "|", year=2019)
    hs.add(Holiday.easter(2019))
    Holiday.of(2019, 4, 21) in hs                       # → True

    summer = TemporalRange.parse("30/06/2019", "01/09/2019", "%d/%m/%Y")

Public API
----------
Holiday        Immutable single-date holiday.
HolidaySet     Ordered holiday collection.
TemporalRange  Date interval, exclusive on both ends.
easter         Easter Sunday of a year.
easter_monday  Easter Monday of a year.
"""

from __future__ import annotations

from businessdays.holidays.easter import easter, easter_monday
from businessdays.holidays.holiday import Holiday
from businessdays.holidays.holiday_set import HolidaySet
from businessdays.holidays.temporal_range import TemporalRange

__all__ = [
    "Holiday",
    "HolidaySet",
    "TemporalRange",
    "easter",
    "easter_monday",
]
