"""Human-readable elapsed time, weekend checks and grey-release sampling."""

from __future__ import annotations

import datetime as _dt
import random
import time
from typing import Optional

SECONDS = 1
MINUTE_IN_SECONDS = 60 * SECONDS
HOUR_IN_SECONDS = 60 * MINUTE_IN_SECONDS
DAY_IN_SECONDS = 24 * HOUR_IN_SECONDS
MONTH_IN_SECONDS = 30 * DAY_IN_SECONDS
YEAR_IN_SECONDS = 12 * MONTH_IN_SECONDS


def relative_time(timestamp: int, now: Optional[int] = None) -> str:
    """Describe how long ago a Unix timestamp was; months are 30 days, years 12 months."""
    if now is None:
        now = int(time.time())
    elapsed = now - timestamp
    if elapsed < MINUTE_IN_SECONDS:
        return "刚刚"
    if elapsed < HOUR_IN_SECONDS:
        return f"{elapsed // MINUTE_IN_SECONDS} 分钟前"
    if elapsed < DAY_IN_SECONDS:
        return f"{elapsed // HOUR_IN_SECONDS} 小时前"
    if elapsed < MONTH_IN_SECONDS:
        return f"{elapsed // DAY_IN_SECONDS} 天前"
    if elapsed < YEAR_IN_SECONDS:
        return f"{elapsed // MONTH_IN_SECONDS} 月前"
    return f"{elapsed // YEAR_IN_SECONDS} 年前"


def is_weekend(date: _dt.date) -> bool:
    """True for Saturday and Sunday."""
    return date.weekday() >= 5


def time_ago(duration: _dt.timedelta) -> _dt.datetime:
    """The local time duration before now."""
    return _dt.datetime.now() - duration


def is_hit_grey(rate: int) -> bool:
    """Draw 0..100 uniformly and report whether it falls below rate."""
    return random.randint(0, 100) < rate