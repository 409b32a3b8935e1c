from __future__ import annotations

import datetime
import logging
from typing import Protocol, runtime_checkable

from businessdays.holidays.holiday_set import HolidaySet

logger = logging.getLogger(__name__)


@runtime_checkable
class HolidaySource(Protocol):
    """Anything that can list the holiday dates of a country."""

    def fetch(self, country_code: str, year: int | None = None) -> list[datetime.date]:
        ...


def load_holidays(source: HolidaySource, country_code: str, year: int | None = None) -> HolidaySet:
    """Fetch from ``source`` and wrap the dates in a :class:`HolidaySet`."""
    dates = source.fetch(country_code, year)
    logger.info("Loaded %d holidays for %s from %s", len(dates), country_code, type(source).__name__)
    return HolidaySet.from_dates(dates)
