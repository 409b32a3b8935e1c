from __future__ import annotations

import datetime
import logging
from dataclasses import dataclass, field, replace
from typing import Iterable, Sequence

from businessdays._exceptions import InvalidArgumentError
from businessdays.engine.rules import NOT_BUSINESS, Weekday, WeekendRule, weekend_rule
from businessdays.engine.validation import in_range, validate_years
from businessdays.holidays.holiday import Holiday
from businessdays.holidays.holiday_set import HolidaySet, HolidayLike
from businessdays.holidays.temporal_range import TemporalRange

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BusinessDayConfig:
    """
    Immutable description of what counts as non-working time.

    Every ``with_*`` / ``computing_*`` / ``apply_*`` method returns a new
    config; the receiver is never touched.  Holidays are stored as a tuple
    and :attr:`holiday_set` hands out a fresh :class:`HolidaySet` on each
    access, so callers cannot alias engine state.

    Range-scoped holiday weekdays and the Easter/Christmas helpers read the
    starting date at the moment they are called; set the starting date
    first.
    """

    starting_date: datetime.date = field(default_factory=datetime.date.today)
    holidays: tuple[Holiday, ...] = ()
    saturday: WeekendRule = NOT_BUSINESS
    sunday: WeekendRule = NOT_BUSINESS
    holiday_weekdays: frozenset[Weekday] = frozenset()
    active_years: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        if isinstance(self.starting_date, datetime.datetime):
            object.__setattr__(self, "starting_date", self.starting_date.date())
        elif not isinstance(self.starting_date, datetime.date):
            raise InvalidArgumentError(
                f"Starting date must be a date; got {self.starting_date!r}."
            )
        object.__setattr__(self, "holidays", tuple(HolidaySet(self.holidays)))
        object.__setattr__(
            self, "holiday_weekdays", frozenset(Weekday.coerce(d) for d in self.holiday_weekdays)
        )
        object.__setattr__(self, "active_years", validate_years(self.active_years))

    @property
    def holiday_set(self) -> HolidaySet:
        return HolidaySet(self.holidays)

    # ── builder steps ────────────────────────────────────────────────────

    def with_starting_date(self, starting_date: datetime.date) -> BusinessDayConfig:
        return replace(self, starting_date=starting_date)

    def given_holidays(self, holidays: HolidaySet | Iterable[HolidayLike]) -> BusinessDayConfig:
        if holidays is None:
            raise InvalidArgumentError("Holidays must not be None.")
        merged = HolidaySet(self.holidays)
        merged.add_all(holidays if isinstance(holidays, HolidaySet) else HolidaySet(holidays))
        logger.debug("Holiday set now has %d entries", len(merged))
        return replace(self, holidays=tuple(merged))

    def _with_holiday(self, holiday: Holiday) -> BusinessDayConfig:
        if holiday in self.holidays:
            return self
        return replace(self, holidays=self.holidays + (holiday,))

    def computing_easter(self) -> BusinessDayConfig:
        return self._with_holiday(Holiday.easter(self.starting_date.year))

    def computing_easter_monday(self) -> BusinessDayConfig:
        return self._with_holiday(Holiday.easter_monday(self.starting_date.year))

    def computing_christmas(self) -> BusinessDayConfig:
        return self._with_holiday(Holiday.christmas(self.starting_date.year))

    def with_business_saturday(
        self, when: bool | Sequence[int] | TemporalRange | WeekendRule = True
    ) -> BusinessDayConfig:
        """
        Make Saturday a business day.

        ``when`` is ``True``/``False``, a list of 4-digit years and/or
        2-digit months (empty list means always), or a TemporalRange.
        """
        return replace(self, saturday=weekend_rule(when))

    def with_business_sunday(
        self, when: bool | Sequence[int] | TemporalRange | WeekendRule = True
    ) -> BusinessDayConfig:
        """Sunday counterpart of :meth:`with_business_saturday`."""
        return replace(self, sunday=weekend_rule(when))

    def holiday_on_weekdays(
        self, *weekdays: Weekday | int | str, within: TemporalRange | None = None
    ) -> BusinessDayConfig:
        """
        Treat ``weekdays`` as holidays.

        With ``within``, the setting only takes effect when the current
        starting date lies inside the range; otherwise the config is
        returned unchanged.  These weekdays win over business weekends.
        """
        if within is not None and not in_range(self.starting_date, within):
            logger.debug(
                "Starting date %s outside %r; holiday weekdays ignored",
                self.starting_date, within,
            )
            return self
        return replace(self, holiday_weekdays=frozenset(Weekday.coerce(d) for d in weekdays))

    def apply_to_years(self, *years: int) -> BusinessDayConfig:
        """Restrict holiday and holiday-weekday rules to ``years``."""
        return replace(self, active_years=validate_years(years))
