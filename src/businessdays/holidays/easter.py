from __future__ import annotations

import datetime

from businessdays._exceptions import InvalidArgumentError


def _easter_offset(year: int) -> int:
    """
    Day of Easter Sunday counted from March 1 (March 1 itself is day 1).

    Integer-only Gregorian computus; every intermediate value stays
    non-negative for ``year >= 0``, so floor division and ``%`` agree with
    the shift-based formulation.
    """
    if year < datetime.MINYEAR:
        raise InvalidArgumentError(
            f"Easter year must be at least {datetime.MINYEAR}; got {year}."
        )
    a = year % 19
    b = year >> 2
    c = b // 25 + 1
    d = (c * 3) >> 2
    e = ((a * 19) - ((c * 8 + 5) // 25) + d + 15) % 30
    e += (29578 - a - e * 32) >> 10
    e -= ((year % 7) + b - d + e + 2) % 7
    return e


def easter(year: int) -> datetime.date:
    """Easter Sunday of ``year``."""
    offset = _easter_offset(year)
    return datetime.date(year, 3, 1) + datetime.timedelta(days=offset - 1)


def easter_monday(year: int) -> datetime.date:
    """Easter Monday of ``year``."""
    offset = _easter_offset(year)
    return datetime.date(year, 3, 1) + datetime.timedelta(days=offset)
