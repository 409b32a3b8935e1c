from __future__ import annotations

import datetime

from dateutil.relativedelta import relativedelta

from businessdays._exceptions import InvalidArgumentError

ZERO_DURATION = "P0DT0H0M0S"


def as_timestamp(day: datetime.date, hour: int = 0, minute: int = 0, second: int = 0) -> int:
    """Epoch seconds of ``day`` at ``hour:minute:second`` in the local zone."""
    moment = datetime.datetime.combine(day, datetime.time(hour, minute, second))
    return int(moment.timestamp())


def as_string(day: datetime.date, pattern: str) -> str:
    return day.strftime(pattern)


def as_period(day: datetime.date, today: datetime.date | None = None) -> relativedelta:
    """Calendar period (years, months, days) from today to ``day``."""
    return relativedelta(day, today or datetime.date.today())


def _pad(token: str | int, what: str, upper: int) -> str:
    token = str(token).strip()
    if len(token) > 2:
        raise InvalidArgumentError(f"{what} must have at most 2 characters; got {token!r}.")
    if not (token.isascii() and token.isdigit()):
        raise InvalidArgumentError(f"{what} must be numeric; got {token!r}.")
    if int(token) > upper:
        raise InvalidArgumentError(f"{what} must be between 0 and {upper}; got {token!r}.")
    return token.zfill(2)


def as_duration(
    day: datetime.date,
    hours: str | int = "00",
    minutes: str | int = "00",
    now: datetime.datetime | None = None,
) -> datetime.timedelta:
    """Time left from now until ``day`` at ``hours:minutes``."""
    hh = _pad(hours, "Hours", 23)
    mm = _pad(minutes, "Minutes", 59)
    target = datetime.datetime.strptime(f"{day.isoformat()} {hh}:{mm}", "%Y-%m-%d %H:%M")
    return target - (now or datetime.datetime.now())


def format_duration(delta: datetime.timedelta) -> str:
    """Render ``delta`` as ``P<d>DT<h>H<m>M<s>S``."""
    total = int(delta.total_seconds())
    days, rest = divmod(total, 86400)
    hours, rest = divmod(rest, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"P{days}DT{hours}H{minutes}M{seconds}S"


def as_date_time_duration(
    day: datetime.date,
    hours: str | int = "00",
    minutes: str | int = "00",
    now: datetime.datetime | None = None,
) -> str:
    delta = as_duration(day, hours, minutes, now)
    if delta < datetime.timedelta(0):
        return ZERO_DURATION
    return format_duration(delta)
