from __future__ import annotations

import datetime
from typing import Iterable

from businessdays._exceptions import ConfigurationError
from businessdays.holidays.temporal_range import TemporalRange


def digit_count(value: int) -> int:
    """Digits of ``value`` once zero-padded to at least two (``2`` → ``"02"``)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"Expected an integer year or month; got {value!r}.")
    if value < 0:
        raise ConfigurationError(f"Years and months must be non-negative; got {value}.")
    return max(len(str(value)), 2)


def validate_years(years: Iterable[int]) -> tuple[int, ...]:
    out = tuple(years)
    for y in out:
        if digit_count(y) != 4:
            raise ConfigurationError(f"Years must have 4 digits; got {y}.")
    return out


def validate_years_or_months(values: Iterable[int]) -> tuple[int, ...]:
    out = tuple(values)
    for v in out:
        if digit_count(v) not in (2, 4):
            raise ConfigurationError(
                f"Years need 4 digits and months 2; got {v}."
            )
    return out


def matches_years_or_months(values: Iterable[int], day: datetime.date) -> bool:
    """
    Check ``day`` against a mixed list of 4-digit years and 2-digit months.

    Years and months are matched independently and both must hold; either
    group is satisfied when absent, so an empty list always matches.
    """
    values = tuple(values)
    years = [v for v in values if digit_count(v) == 4]
    months = [v for v in values if digit_count(v) == 2]
    years_ok = not years or day.year in years
    months_ok = not months or day.month in months
    return years_ok and months_ok


def check_years(years: Iterable[int], day: datetime.date) -> bool:
    years = tuple(years)
    return not years or day.year in years


def in_range(day: datetime.date, range_: TemporalRange) -> bool:
    return range_.includes(day)
