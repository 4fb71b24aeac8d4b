from __future__ import annotations

from datetime import datetime, time, timedelta


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now()


def day_window(now: datetime) -> tuple[datetime, datetime]:
    """Half-open local calendar day ``[midnight, next midnight)`` containing ``now``.

    Both bounds derive from the single ``now`` value passed in.
    """
    start = datetime.combine(now.date(), time.min, tzinfo=now.tzinfo)
    return start, start + timedelta(days=1)
