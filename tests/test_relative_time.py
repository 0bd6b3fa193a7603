from datetime import date, datetime, timedelta

import pytest

from tonekit.utils.relative_time import (
    DAY_IN_SECONDS,
    HOUR_IN_SECONDS,
    MINUTE_IN_SECONDS,
    MONTH_IN_SECONDS,
    YEAR_IN_SECONDS,
    is_hit_grey,
    is_weekend,
    relative_time,
    time_ago,
)


def test_just_now():
    assert relative_time(1000, 1000) == "刚刚"
    assert relative_time(0, MINUTE_IN_SECONDS - 1) == "刚刚"
    assert relative_time(500, 100) == "刚刚"


@pytest.mark.parametrize(
    "unit, suffix",
    [
        (MINUTE_IN_SECONDS, "分钟前"),
        (HOUR_IN_SECONDS, "小时前"),
        (DAY_IN_SECONDS, "天前"),
        (MONTH_IN_SECONDS, "月前"),
    ],
)
@pytest.mark.parametrize("count", [1, 2])
def test_units(unit, suffix, count):
    assert relative_time(0, count * unit) == f"{count} {suffix}"
    assert relative_time(0, count * unit + unit // 2) == f"{count} {suffix}"


def test_years():
    assert relative_time(0, 3 * YEAR_IN_SECONDS) == "3 年前"


def test_relative_time_defaults_to_now():
    assert relative_time(int(datetime.now().timestamp())) == "刚刚"


def test_is_weekend():
    assert is_weekend(date(2024, 2, 3))
    assert not is_weekend(date(2024, 2, 5))
    week = [date(2024, 2, 5) + timedelta(days=n) for n in range(7)]
    assert sum(is_weekend(d) for d in week) == 2


def test_time_ago():
    duration = timedelta(hours=1)
    before = datetime.now()
    result = time_ago(duration)
    after = datetime.now()
    assert before - duration <= result <= after - duration


def test_is_hit_grey_bounds():
    assert not any(is_hit_grey(0) for _ in range(200))
    assert all(is_hit_grey(101) for _ in range(200))