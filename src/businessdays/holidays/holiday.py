from __future__ import annotations

import datetime
from dataclasses import dataclass

from businessdays._exceptions import InvalidArgumentError
from businessdays.holidays.easter import easter, easter_monday


def _current_year() -> int:
    return datetime.date.today().year


@dataclass(frozen=True, order=True)
class Holiday:
    """
    A single non-working calendar date.

    Equality, ordering and hashing use the date only, so holidays built
    through different factories for the same day are interchangeable.
    A ``datetime`` is narrowed to its calendar date.
    """

    date: datetime.date

    def __post_init__(self) -> None:
        value = self.date
        if isinstance(value, datetime.datetime):
            object.__setattr__(self, "date", value.date())
        elif not isinstance(value, datetime.date):
            raise InvalidArgumentError(
                f"Holiday requires a date; got {value!r}."
            )

    # ── factories ────────────────────────────────────────────────────────

    @classmethod
    def of(cls, year: int, month: int, day: int) -> Holiday:
        return cls(datetime.date(year, month, day))

    @classmethod
    def parse(cls, text: str, pattern: str) -> Holiday:
        """Parse ``text`` with a ``strftime``-style ``pattern``."""
        return cls(datetime.datetime.strptime(text.strip(), pattern).date())

    @classmethod
    def from_month_day(cls, month: int, day: int, year: int | None = None) -> Holiday:
        return cls(datetime.date(_current_year() if year is None else year, month, day))

    @classmethod
    def today(cls) -> Holiday:
        return cls(datetime.date.today())

    @classmethod
    def easter(cls, year: int | None = None) -> Holiday:
        return cls(easter(_current_year() if year is None else year))

    @classmethod
    def easter_monday(cls, year: int | None = None) -> Holiday:
        return cls(easter_monday(_current_year() if year is None else year))

    @classmethod
    def christmas(cls, year: int | None = None) -> Holiday:
        return cls(datetime.date(_current_year() if year is None else year, 12, 25))

    # ── accessors ────────────────────────────────────────────────────────

    @property
    def year(self) -> int:
        return self.date.year

    @property
    def month(self) -> int:
        return self.date.month

    @property
    def day(self) -> int:
        return self.date.day

    def format(self, pattern: str) -> str:
        return self.date.strftime(pattern)

    def __repr__(self) -> str:
        return f"Holiday({self.date.isoformat()})"
