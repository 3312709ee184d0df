"""Support functions for dates, time windows and HTTP sessions"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone
from typing import Union

import requests
from requests.adapters import HTTPAdapter

from src.pontos.models import TimeRange


ISO = "%Y-%m-%d"
YMD = "%Y%m%d"
CSV_TIME_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"
# concurrent requests per client: every fetch of a day batch (10) fits at once
POOL_SIZE = 16


def to_date(d: Union[str, date, datetime]) -> date:
    """Accept "YYYY-MM-DD", "YYYYMMDD", date or datetime"""
    if isinstance(d, datetime):
        return d.date()
    if isinstance(d, date):
        return d
    s = str(d).strip()
    if len(s) == 8 and s.isdigit():
        return datetime.strptime(s, YMD).date()
    return datetime.strptime(s[:10], ISO).date()


def to_iso(d: Union[str, date, datetime]) -> str:
    """Convert to ISO format"""
    return to_date(d).strftime(ISO)


def day_window(day: Union[str, date, datetime]) -> TimeRange:
    """[day 00:00 UTC, day+1 00:00 UTC)"""
    start = datetime.combine(to_date(day), time.min, tzinfo=timezone.utc)
    return TimeRange(start, start + timedelta(days=1))


def isoformat_utc(instant: datetime) -> str:
    """Render an instant with an explicit UTC offset, e.g. 2023-11-07T00:00:00+00:00"""
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc).isoformat()


def make_session(pool_size: int = POOL_SIZE) -> requests.Session:
    """Make request session; the pool must hold every concurrent fetch of a batch. Failures are never retried."""
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=0, pool_connections=pool_size, pool_maxsize=pool_size)
    s.mount("http://", adapter)
    s.mount("https://", adapter)
    s.headers.update({"Accept": "application/json"})
    return s
