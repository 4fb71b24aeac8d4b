from datetime import datetime, timedelta, timezone

from employee_attendance.common.datetime_utils import day_window


def test_day_window_is_half_open_local_day():
    start, end = day_window(datetime(2026, 2, 2, 17, 30, 12, 500))

    assert start == datetime(2026, 2, 2, 0, 0, 0)
    assert end == datetime(2026, 2, 3, 0, 0, 0)


def test_day_window_at_midnight_starts_that_day():
    start, end = day_window(datetime(2026, 2, 3, 0, 0, 0))

    assert start == datetime(2026, 2, 3)
    assert end - start == timedelta(days=1)


def test_day_window_keeps_tzinfo():
    tz = timezone(timedelta(hours=7))

    start, end = day_window(datetime(2026, 2, 2, 8, 0, tzinfo=tz))

    assert start.tzinfo is tz
    assert end == datetime(2026, 2, 3, tzinfo=tz)
