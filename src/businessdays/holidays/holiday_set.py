from __future__ import annotations

import datetime
from typing import Any, Callable, Hashable, Iterable, Iterator, Sequence, Union

import numpy as np

from businessdays._exceptions import InvalidArgumentError
from businessdays.holidays.holiday import Holiday

HolidayLike = Union[Holiday, datetime.date]


def _coerce(value: Any, action: str) -> Holiday:
    if value is None:
        raise InvalidArgumentError(f"Holiday to {action} must not be None.")
    if isinstance(value, Holiday):
        return value
    return Holiday(value)


def _month_day(token: str, delimiter: str) -> tuple[int, int]:
    parts = token.strip().split(delimiter)
    if len(parts) != 2:
        raise InvalidArgumentError(
            f"Expected 'month{delimiter}day'; got {token!r}."
        )
    try:
        return int(parts[0].strip()), int(parts[1].strip())
    except ValueError as exc:
        raise InvalidArgumentError(f"Non-numeric month/day in {token!r}.") from exc


class HolidaySet:
    """
    Ordered collection of :class:`Holiday` values.

    Insertion order is kept and duplicates are allowed; use
    :meth:`distinct` for a de-duplicated copy.  The backing list is never
    handed out: :attr:`holidays` and iteration work on snapshots.
    """

    def __init__(self, holidays: HolidaySet | Iterable[HolidayLike] | None = None) -> None:
        if holidays is None:
            self._holidays: list[Holiday] = []
        elif isinstance(holidays, HolidaySet):
            self._holidays = holidays.holidays
        else:
            self._holidays = [_coerce(h, "add") for h in holidays]

    # ── alternative constructors ─────────────────────────────────────────

    @classmethod
    def from_dates(cls, dates: Iterable[datetime.date]) -> HolidaySet:
        return cls(Holiday(d) for d in dates)

    @classmethod
    def from_month_days(
        cls,
        month_days: Iterable[tuple[int, int] | str],
        delimiter: str = "-",
        year: int | None = None,
    ) -> HolidaySet:
        """
        Build from ``(month, day)`` pairs or ``"MM-DD"`` strings.

        Every entry lands in ``year``, the current year by default.
        """
        pairs = [
            _month_day(md, delimiter) if isinstance(md, str) else tuple(md)
            for md in month_days
        ]
        return cls(Holiday.from_month_day(m, d, year) for m, d in pairs)

    @classmethod
    def parse(
        cls,
        text: str,
        day_month_delimiter: str,
        date_delimiter: str,
        year: int | None = None,
    ) -> HolidaySet:
        """
        Parse a single string such as ``"01-01 | 02-14 | 12-25"``.

        ``date_delimiter`` separates successive dates and
        ``day_month_delimiter`` separates month from day inside each token.
        """
        tokens = [t for t in text.split(date_delimiter) if t.strip()]
        return cls.from_month_days(tokens, day_month_delimiter, year)

    # ── mutation ─────────────────────────────────────────────────────────

    def add(self, holiday: HolidayLike) -> None:
        self._holidays.append(_coerce(holiday, "add"))

    def add_all(self, other: HolidaySet) -> bool:
        if other is None:
            raise InvalidArgumentError("HolidaySet to add must not be None.")
        incoming = other.holidays
        self._holidays.extend(incoming)
        return bool(incoming)

    def remove(self, holiday: HolidayLike) -> bool:
        """Remove the first matching holiday; ``False`` if none matched."""
        target = _coerce(holiday, "remove")
        try:
            self._holidays.remove(target)
        except ValueError:
            return False
        return True

    def remove_if(self, predicate: Callable[[Holiday], bool]) -> bool:
        if predicate is None:
            raise InvalidArgumentError("Predicate must not be None.")
        kept = [h for h in self._holidays if not predicate(h)]
        removed = len(kept) != len(self._holidays)
        self._holidays = kept
        return removed

    # ── queries ──────────────────────────────────────────────────────────

    def contains(self, holiday: HolidayLike) -> bool:
        return _coerce(holiday, "check") in self._holidays

    def contains_all(self, other: HolidaySet) -> bool:
        if other is None:
            raise InvalidArgumentError("HolidaySet to check must not be None.")
        if len(other) > len(self):
            raise InvalidArgumentError(
                f"Cannot check {len(other)} holidays against a set of {len(self)}."
            )
        return all(h in self._holidays for h in other.holidays)

    def distinct(self, key: Callable[[Holiday], Hashable] | None = None) -> HolidaySet:
        """Copy keeping the first holiday seen for each ``key`` (the date by default)."""
        key = key or (lambda h: h.date)
        seen: set[Hashable] = set()
        unique: list[Holiday] = []
        for h in self._holidays:
            k = key(h)
            if k not in seen:
                seen.add(k)
                unique.append(h)
        return HolidaySet(unique)

    @property
    def holidays(self) -> list[Holiday]:
        return list(self._holidays)

    def dates(self) -> list[datetime.date]:
        return [h.date for h in self._holidays]

    def format(self, index: int, pattern: str) -> str:
        return self._holidays[index].format(pattern)

    def to_numpy(self) -> np.ndarray:
        """Dates as a ``datetime64[D]`` array, in insertion order."""
        return np.array(self.dates(), dtype="datetime64[D]")

    # ── protocol ─────────────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._holidays)

    def __getitem__(self, index: int) -> Holiday:
        return self._holidays[index]

    def __iter__(self) -> Iterator[Holiday]:
        return iter(tuple(self._holidays))

    def __contains__(self, holiday: object) -> bool:
        if not isinstance(holiday, (Holiday, datetime.date)):
            return False
        return self.contains(holiday)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HolidaySet):
            return NotImplemented
        return self._holidays == other._holidays

    def __repr__(self) -> str:
        shown: Sequence[str] = [h.date.isoformat() for h in self._holidays[:5]]
        more = f", ... (+{len(self._holidays) - 5})" if len(self._holidays) > 5 else ""
        return f"HolidaySet([{', '.join(shown)}{more}])"
