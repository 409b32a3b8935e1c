from __future__ import annotations

import datetime
from dataclasses import dataclass

from businessdays._exceptions import InvalidArgumentError


@dataclass(frozen=True)
class TemporalRange:
    """
    Interval between two calendar dates, exclusive on both ends.

    ``start`` must fall strictly before ``end``.
    """

    start: datetime.date
    end: datetime.date

    def __post_init__(self) -> None:
        for name in ("start", "end"):
            value = getattr(self, name)
            if value is None:
                raise InvalidArgumentError(f"Range {name} must not be None.")
            if isinstance(value, datetime.datetime):
                object.__setattr__(self, name, value.date())
            elif not isinstance(value, datetime.date):
                raise InvalidArgumentError(f"Range {name} must be a date; got {value!r}.")
        if self.start >= self.end:
            raise InvalidArgumentError(
                f"Range start {self.start} must be before end {self.end}."
            )

    @classmethod
    def parse(cls, start: str, end: str, pattern: str) -> TemporalRange:
        return cls(
            datetime.datetime.strptime(start, pattern).date(),
            datetime.datetime.strptime(end, pattern).date(),
        )

    def includes(self, other: datetime.date | TemporalRange) -> bool:
        if other is None:
            raise InvalidArgumentError("Value to check must not be None.")
        if isinstance(other, TemporalRange):
            return self.start < other.start and other.end < self.end
        if isinstance(other, datetime.datetime):
            other = other.date()
        return self.start < other < self.end

    def __contains__(self, other: object) -> bool:
        return self.includes(other)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"TemporalRange({self.start.isoformat()} .. {self.end.isoformat()})"
