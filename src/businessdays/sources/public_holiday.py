from __future__ import annotations

import datetime
import logging
from typing import Any, Callable

import requests

from businessdays._exceptions import SourceAuthorizationError, SourceError
from businessdays.sources.settings import SourceSettings

logger = logging.getLogger(__name__)

Record = dict[str, Any]


class PublicHolidayDirectory:
    """
    Subscription-keyed REST directory of public holidays.

    Calls ``GET <endpoint>/<year>/<country>``; the body is a JSON object or
    a list of objects, each carrying an ISO ``date``.  ``predicate`` sees the
    raw records before the dates are extracted.
    """

    def __init__(
        self,
        api_key: str | None = None,
        session: requests.Session | None = None,
        settings: SourceSettings | None = None,
        predicate: Callable[[Record], bool] | None = None,
    ) -> None:
        self._settings = settings or SourceSettings()
        self._api_key = api_key or self._settings.public_holiday_api_key
        if not self._api_key:
            raise SourceAuthorizationError("No API key configured for the public holiday directory.")
        self._session = session or requests.Session()
        self._predicate = predicate or (lambda record: True)

    def with_predicate(self, predicate: Callable[[Record], bool]) -> PublicHolidayDirectory:
        self._predicate = predicate
        return self

    def fetch(self, country_code: str, year: int | None = None) -> list[datetime.date]:
        year = year or datetime.date.today().year
        records = self._call(country_code, year)
        logger.debug("Public holiday directory returned %d records for %s/%d", len(records), country_code, year)
        return [_record_date(r) for r in records if self._predicate(r)]

    def _call(self, country_code: str, year: int) -> list[Record]:
        url = f"{self._settings.public_holiday_endpoint.rstrip('/')}/{year}/{country_code}"
        headers = {
            "X-RapidAPI-Host": self._settings.public_holiday_host,
            "X-RapidAPI-Key": self._api_key,
        }
        try:
            resp = self._session.get(url, headers=headers, timeout=self._settings.request_timeout)
        except requests.RequestException as exc:
            raise SourceError(f"Request to {url} failed: {exc}") from exc

        if resp.status_code in (401, 403):
            raise SourceAuthorizationError(f"Public holiday directory refused the API key ({resp.status_code}).")
        try:
            resp.raise_for_status()
        except requests.HTTPError as exc:
            raise SourceError(f"Public holiday directory answered {resp.status_code}.") from exc

        try:
            body = resp.json()
        except ValueError as exc:
            raise SourceError("Public holiday directory returned invalid JSON.") from exc

        if isinstance(body, dict):
            return [body]
        if isinstance(body, list) and all(isinstance(r, dict) for r in body):
            return body
        raise SourceError(f"Unexpected payload type {type(body).__name__}.")


def _record_date(record: Record) -> datetime.date:
    try:
        return datetime.date.fromisoformat(str(record["date"])[:10])
    except (KeyError, ValueError) as exc:
        raise SourceError(f"Record without a usable ISO date: {record!r}") from exc
