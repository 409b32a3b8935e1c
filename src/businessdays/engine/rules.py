from __future__ import annotations

import calendar
import datetime
from dataclasses import dataclass
from enum import IntEnum
from typing import Sequence, Union

from businessdays._exceptions import ConfigurationError
from businessdays.engine.validation import digit_count, matches_years_or_months, validate_years_or_months
from businessdays.holidays.temporal_range import TemporalRange


class Weekday(IntEnum):
    """Day of week, numbered like :meth:`datetime.date.weekday`."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def of(cls, day: datetime.date) -> Weekday:
        return cls(day.weekday())

    @classmethod
    def coerce(cls, value: int | str | Weekday) -> Weekday:
        try:
            if isinstance(value, str):
                return cls[value.strip().upper()]
            return cls(value)
        except (KeyError, ValueError) as exc:
            raise ConfigurationError(f"Unknown weekday {value!r}.") from exc


def _back_to(day: datetime.date, weekday: Weekday) -> datetime.date:
    """Latest date on or before ``day`` that falls on ``weekday``."""
    return day - datetime.timedelta(days=(day.weekday() - weekday) % 7)


@dataclass(frozen=True)
class Always:
    """Weekend day is (or is not) a business day, unconditionally."""

    business: bool

    def is_business(self, day: datetime.date) -> bool:
        return self.business

    def last_open(self, weekday: Weekday) -> datetime.date:
        """
        Latest date falling on ``weekday`` that this rule lets through.

        ``date.max`` when the rule never stops, ``date.min`` when it never
        opens.
        """
        return datetime.date.max if self.business else datetime.date.min


@dataclass(frozen=True)
class ByYearOrMonth:
    """Business day only in the listed 4-digit years and/or 2-digit months."""

    values: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", validate_years_or_months(self.values))

    def is_business(self, day: datetime.date) -> bool:
        return matches_years_or_months(self.values, day)

    def last_open(self, weekday: Weekday) -> datetime.date:
        years = [v for v in self.values if digit_count(v) == 4]
        months = [v for v in self.values if digit_count(v) == 2]
        valid_months = [m for m in months if 1 <= m <= 12]
        if months and not valid_months:
            return datetime.date.min
        if not years:
            return datetime.date.max
        last_year = max(years)
        last_month = max(valid_months) if valid_months else 12
        last = datetime.date(last_year, last_month, calendar.monthrange(last_year, last_month)[1])
        return _back_to(last, weekday)


@dataclass(frozen=True)
class ByRange:
    """Business day only strictly inside ``range``."""

    range: TemporalRange

    def __post_init__(self) -> None:
        if not isinstance(self.range, TemporalRange):
            raise ConfigurationError(f"ByRange needs a TemporalRange; got {self.range!r}.")

    def is_business(self, day: datetime.date) -> bool:
        return self.range.includes(day)

    def last_open(self, weekday: Weekday) -> datetime.date:
        last = _back_to(self.range.end - datetime.timedelta(days=1), weekday)
        return last if last > self.range.start else datetime.date.min


WeekendRule = Union[Always, ByYearOrMonth, ByRange]

NOT_BUSINESS = Always(False)


def weekend_rule(when: bool | Sequence[int] | TemporalRange | WeekendRule) -> WeekendRule:
    """Turn a ``with_business_*`` argument into a :data:`WeekendRule`."""
    if isinstance(when, (Always, ByYearOrMonth, ByRange)):
        return when
    if isinstance(when, bool):
        return Always(when)
    if isinstance(when, TemporalRange):
        return ByRange(when)
    if isinstance(when, int):
        return ByYearOrMonth((when,))
    if when is None or isinstance(when, (str, bytes)):
        raise ConfigurationError(f"Unsupported weekend rule {when!r}.")
    return ByYearOrMonth(tuple(when))
