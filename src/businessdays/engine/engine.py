from __future__ import annotations

import datetime
import logging
from typing import Iterator, Union

import numpy as np

from businessdays._exceptions import ConfigurationError, InvalidArgumentError
from businessdays.engine.config import BusinessDayConfig
from businessdays.engine.rules import Weekday
from businessdays.engine.validation import check_years, validate_years
from businessdays.holidays.holiday_set import HolidaySet
from businessdays.holidays.temporal_range import TemporalRange

logger = logging.getLogger(__name__)

CountLike = Union[int, "np.ndarray"]

_ONE_DAY = datetime.timedelta(days=1)


class BusinessDayEngine:
    """
    Steps forward through business days under a :class:`BusinessDayConfig`.

    The scan is strictly day by day starting the day after
    ``starting_date``; the starting date is never a candidate.
    """

    def __init__(self, config: BusinessDayConfig | None = None) -> None:
        self._config = config if config is not None else BusinessDayConfig()
        self._holiday_dates: frozenset[datetime.date] = frozenset(
            h.date for h in self._config.holidays
        )

    def horizon(self) -> datetime.date:
        """
        Latest date that could still be a business day.

        ``date.max`` while some weekday is never permanently blocked.
        Holiday weekdays only block permanently without an active-years
        filter; past the horizon every day is a holiday.
        """
        config = self._config
        blocked = frozenset() if config.active_years else config.holiday_weekdays
        if any(d not in blocked for d in Weekday if d < Weekday.SATURDAY):
            return datetime.date.max
        horizon = datetime.date.min
        for weekday, rule in ((Weekday.SATURDAY, config.saturday), (Weekday.SUNDAY, config.sunday)):
            if weekday not in blocked:
                horizon = max(horizon, rule.last_open(weekday))
        return horizon

    # ── per-day rules ────────────────────────────────────────────────────

    def check_years(self, day: datetime.date) -> bool:
        return check_years(self._config.active_years, day)

    def is_holiday_saturday(self, day: datetime.date) -> bool:
        return day.weekday() == Weekday.SATURDAY and not self._config.saturday.is_business(day)

    def is_holiday_sunday(self, day: datetime.date) -> bool:
        return day.weekday() == Weekday.SUNDAY and not self._config.sunday.is_business(day)

    def is_holiday_weekday(self, day: datetime.date) -> bool:
        return self.check_years(day) and Weekday.of(day) in self._config.holiday_weekdays

    def is_explicit_holiday(self, day: datetime.date) -> bool:
        return self.check_years(day) and day in self._holiday_dates

    def is_qualifying_day(self, day: datetime.date) -> bool:
        return not (
            self.is_holiday_saturday(day)
            or self.is_holiday_sunday(day)
            or self.is_holiday_weekday(day)
            or self.is_explicit_holiday(day)
        )

    # ── stepping ─────────────────────────────────────────────────────────

    def business_days(self) -> Iterator[datetime.date]:
        """
        Yield qualifying dates after the starting date, in order, forever.

        Raises :class:`ConfigurationError` once the scan passes
        :meth:`horizon`, since no later date can qualify.
        """
        horizon = self.horizon()
        cursor = self._config.starting_date
        while True:
            cursor += _ONE_DAY
            if cursor > horizon:
                raise ConfigurationError(
                    f"No business day after {max(horizon, self._config.starting_date)}: "
                    f"every weekday is a holiday from then on."
                )
            if self.is_qualifying_day(cursor):
                yield cursor

    def next_business_day(self, count: CountLike = 1) -> datetime.date | np.ndarray:
        """
        The ``count``-th business day after the starting date.

        ``count=0`` returns the starting date.  An array of counts returns a
        ``datetime64[D]`` array of the same shape from a single scan.
        """
        if np.ndim(count) == 0:
            n = self._validate_count(count)
            found = self._scan(n)
            return found[-1] if n else self._config.starting_date

        counts = np.asarray(count)
        if not np.issubdtype(counts.dtype, np.integer):
            raise InvalidArgumentError(f"Counts must be integers; got dtype {counts.dtype}.")
        if counts.size and counts.min() < 0:
            raise InvalidArgumentError("Counts must be non-negative.")
        limit = int(counts.max()) if counts.size else 0
        lookup = np.array(
            [self._config.starting_date] + self._scan(limit), dtype="datetime64[D]"
        )
        return lookup[counts]

    def _validate_count(self, count: CountLike) -> int:
        if isinstance(count, (bool, np.bool_)) or not isinstance(count, (int, np.integer)):
            raise InvalidArgumentError(f"Count must be an integer; got {count!r}.")
        if count < 0:
            raise InvalidArgumentError(f"Count must be non-negative; got {count}.")
        return int(count)

    def _scan(self, n: int) -> list[datetime.date]:
        found: list[datetime.date] = []
        if n == 0:
            return found
        for day in self.business_days():
            found.append(day)
            if len(found) == n:
                break
        logger.debug(
            "Business day %d after %s is %s", n, self._config.starting_date, found[-1]
        )
        return found

    # ── holiday queries ──────────────────────────────────────────────────

    def _select(self, mask: np.ndarray) -> HolidaySet:
        holidays = self._config.holidays
        return HolidaySet(h for h, keep in zip(holidays, mask) if keep)

    def _dates(self) -> np.ndarray:
        return self._config.holiday_set.to_numpy()

    @staticmethod
    def _year_mask(dates: np.ndarray, years: tuple[int, ...]) -> np.ndarray:
        if not years:
            return np.ones(dates.shape, dtype=bool)
        as_years = dates.astype("datetime64[Y]").astype(np.int64) + 1970
        return np.isin(as_years, np.asarray(years, dtype=np.int64))

    def holidays(self, *years: int) -> HolidaySet:
        """All configured holidays, optionally only those in ``years``."""
        years = validate_years(years)
        dates = self._dates()
        return self._select(self._year_mask(dates, years))

    def holidays_from_now(self, *years: int, today: datetime.date | None = None) -> HolidaySet:
        """Holidays strictly after today (or ``today``)."""
        years = validate_years(years)
        today = today or datetime.date.today()
        dates = self._dates()
        return self._select((dates > np.datetime64(today, "D")) & self._year_mask(dates, years))

    def holidays_from_starting_date(self, *years: int) -> HolidaySet:
        years = validate_years(years)
        dates = self._dates()
        after = dates > np.datetime64(self._config.starting_date, "D")
        return self._select(after & self._year_mask(dates, years))

    def holidays_in_range(self, range_: TemporalRange) -> HolidaySet:
        if range_ is None:
            raise InvalidArgumentError("Range must not be None.")
        dates = self._dates()
        start = np.datetime64(range_.start, "D")
        end = np.datetime64(range_.end, "D")
        return self._select((dates > start) & (dates < end))

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def config(self) -> BusinessDayConfig:
        return self._config

    @property
    def starting_date(self) -> datetime.date:
        return self._config.starting_date

    @property
    def holiday_set(self) -> HolidaySet:
        return self._config.holiday_set

    def __repr__(self) -> str:
        return (
            f"BusinessDayEngine(starting_date={self._config.starting_date}, "
            f"holidays={len(self._config.holidays)}, "
            f"saturday={self._config.saturday!r}, "
            f"sunday={self._config.sunday!r}, "
            f"holiday_weekdays={sorted(d.name for d in self._config.holiday_weekdays)}, "
            f"active_years={list(self._config.active_years)})"
        )


def next_business_day(config: BusinessDayConfig, count: CountLike = 1) -> datetime.date | np.ndarray:
    return BusinessDayEngine(config).next_business_day(count)


def is_qualifying_day(day: datetime.date, config: BusinessDayConfig) -> bool:
    return BusinessDayEngine(config).is_qualifying_day(day)
