from datetime import date, datetime, timedelta, timezone

import pytest

from src.pontos.support_functions.support_functions import (
    day_window,
    isoformat_utc,
    make_session,
    to_date,
    to_iso,
)


@pytest.mark.parametrize("value", ["2023-11-07", "20231107", date(2023, 11, 7), datetime(2023, 11, 7, 13, 5)])
def test_to_iso_accepts_common_forms(value):
    assert to_iso(value) == "2023-11-07"


def test_to_date_rejects_garbage():
    with pytest.raises(ValueError):
        to_date("07/11/2023")


@pytest.mark.parametrize("day, end", [
    ("2023-11-07", datetime(2023, 11, 8, tzinfo=timezone.utc)),
    ("2023-12-31", datetime(2024, 1, 1, tzinfo=timezone.utc)),
    ("2024-02-28", datetime(2024, 2, 29, tzinfo=timezone.utc)),
])
def test_day_window_spans_one_utc_day(day, end):
    window = day_window(day)
    assert window.end == end
    assert window.start == end - timedelta(days=1)
    assert window.start.tzinfo is not None
    assert window.start in window
    assert window.end not in window


def test_isoformat_utc():
    assert isoformat_utc(datetime(2023, 11, 7, tzinfo=timezone.utc)) == "2023-11-07T00:00:00+00:00"
    assert isoformat_utc(datetime(2023, 11, 7)) == "2023-11-07T00:00:00+00:00"
    cet = timezone(timedelta(hours=1))
    assert isoformat_utc(datetime(2023, 11, 7, 1, tzinfo=cet)) == "2023-11-07T00:00:00+00:00"


def test_session_does_not_retry_and_fits_the_fan_out():
    session = make_session()
    adapter = session.get_adapter("https://pontos.ri.se/api")
    assert adapter.max_retries.total == 0
    assert adapter._pool_maxsize >= 10
    assert session.headers["Accept"] == "application/json"
