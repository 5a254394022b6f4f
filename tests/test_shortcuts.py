from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from quickadd.nlp.dates import Calendar
from quickadd.nlp.shortcuts import resolve_shortcut

UTC = ZoneInfo("UTC")


def day(y, m, d):
    return datetime(y, m, d, tzinfo=UTC)


@pytest.mark.parametrize(
    "when, expected",
    [
        ("today", day(2025, 6, 11)),
        ("Tomorrow", day(2025, 6, 12)),
        ("next_week", day(2025, 6, 18)),
        ("next_month", day(2025, 7, 11)),
        ("friday", day(2025, 6, 13)),
        ("mon", day(2025, 6, 16)),
        # the same weekday means next week's
        ("wednesday", day(2025, 6, 18)),
    ],
)
def test_shortcuts(when, expected, now):
    assert resolve_shortcut(when, Calendar(now)) == expected


def test_specific_date(now):
    found = resolve_shortcut("specific_date", Calendar(now), "January 15, 2030")
    assert found == day(2030, 1, 15)


def test_specific_date_is_start_of_day_in_the_callers_zone(now):
    cal = Calendar.at(now, "Asia/Tokyo")
    found = resolve_shortcut("specific_date", cal, "March 3, 2031")
    assert (found.year, found.month, found.day, found.hour) == (2031, 3, 3, 0)
    assert found.tzinfo == ZoneInfo("Asia/Tokyo")


def test_specific_date_needs_a_date(now):
    assert resolve_shortcut("specific_date", Calendar(now)) is None
    assert resolve_shortcut("specific_date", Calendar(now), "qwerty") is None


def test_unknown_shortcut(now):
    assert resolve_shortcut("someday", Calendar(now)) is None
