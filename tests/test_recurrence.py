import pytest

from quickadd.nlp.dates import Calendar
from quickadd.nlp.recurrence import extract_recurrence
from quickadd.nlp.types import Frequency, ParsedTask, RecurrenceRule, ordinal


def run(text, now):
    return extract_recurrence(ParsedTask.start(text), Calendar(now))


@pytest.mark.parametrize(
    "text, expected",
    [
        ("standup every weekday", RecurrenceRule(Frequency.weekdays)),
        ("gym on weekdays", RecurrenceRule(Frequency.weekdays)),
        ("brunch every weekend", RecurrenceRule(Frequency.weekends)),
        ("water plants every 3 days", RecurrenceRule(Frequency.daily, interval=3)),
        ("backup every 2 months", RecurrenceRule(Frequency.monthly, interval=2)),
        ("renew every 1 year", RecurrenceRule(Frequency.yearly, interval=1)),
        ("trash every thu", RecurrenceRule(Frequency.weekly, weekdays=(5,))),
        ("1:1 weekly on tuesday", RecurrenceRule(Frequency.weekly, weekdays=(3,))),
        ("pay rent every month on the 1st", RecurrenceRule(Frequency.monthly, day_of_month=1)),
        ("invoice monthly on the 15th", RecurrenceRule(Frequency.monthly, day_of_month=15)),
        ("journal daily", RecurrenceRule(Frequency.daily)),
        ("review weekly", RecurrenceRule(Frequency.weekly)),
        ("taxes annually", RecurrenceRule(Frequency.yearly)),
        ("stretch every day", RecurrenceRule(Frequency.daily)),
        ("plan every week", RecurrenceRule(Frequency.weekly)),
        ("checkup every year", RecurrenceRule(Frequency.yearly)),
    ],
)
def test_recurrence_patterns(text, expected, now):
    assert run(text, now).recurrence == expected


def test_recurrence_consumes_only_the_phrase(now):
    r = run("Pay rent every month on the 1st", now)
    start, end = r.consumed[0]
    assert r.source[start:end] == "every month on the 1st"


def test_weekend_is_not_read_as_week(now):
    r = run("every weekend", now)
    assert r.recurrence.frequency == Frequency.weekends


def test_every_month_is_not_every_monday(now):
    r = run("every month", now)
    assert r.recurrence == RecurrenceRule(Frequency.monthly)


def test_no_recurrence_leaves_text_alone(now):
    r = run("Buy milk", now)
    assert r.recurrence is None
    assert r.consumed == ()


def test_case_insensitive(now):
    assert run("Standup EVERY Monday", now).recurrence.weekdays == (2,)


@pytest.mark.parametrize(
    "rule, label",
    [
        (RecurrenceRule(Frequency.daily), "Daily"),
        (RecurrenceRule(Frequency.daily, interval=2), "Every 2 days"),
        (RecurrenceRule(Frequency.weekly), "Weekly"),
        (RecurrenceRule(Frequency.weekly, interval=3), "Every 3 weeks"),
        (RecurrenceRule(Frequency.weekly, weekdays=(2, 4)), "Weekly on Mon, Wed"),
        (RecurrenceRule(Frequency.monthly, day_of_month=22), "Monthly on the 22nd"),
        (RecurrenceRule(Frequency.monthly, interval=6), "Every 6 months"),
        (RecurrenceRule(Frequency.yearly), "Yearly"),
        (RecurrenceRule(Frequency.weekdays), "Every weekday"),
        (RecurrenceRule(Frequency.weekends), "Every weekend"),
    ],
)
def test_recurrence_labels(rule, label):
    assert rule.label == label


def test_ordinals():
    assert [ordinal(n) for n in (1, 2, 3, 4, 11, 12, 13, 21, 111)] == [
        "1st", "2nd", "3rd", "4th", "11th", "12th", "13th", "21st", "111th",
    ]


@pytest.mark.parametrize("text", ["water plants every 0 days", "backup every 1000 weeks"])
def test_interval_out_of_range_is_not_a_recurrence(text, now):
    r = run(text, now)
    assert r.recurrence is None
    assert r.consumed == ()


def test_day_of_month_out_of_range_falls_through(now):
    r = run("Pay rent monthly on the 45th", now)
    assert r.recurrence == RecurrenceRule(Frequency.monthly)
    start, end = r.consumed[0]
    assert r.source[start:end] == "monthly"


def test_later_valid_interval_is_used(now):
    r = run("every 0 days, every 2 weeks", now)
    assert r.recurrence == RecurrenceRule(Frequency.weekly, interval=2)
