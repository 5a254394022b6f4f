"""Time-of-day and calendar-date extraction.

Time runs before date. Each half is skipped when an earlier stage (the time
range extractor) has already filled it.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from datetime import datetime, time

from .dates import Calendar, add_seconds
from .timerange import clock, to_24h, to_int
from .types import ParsedTask

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Time of day
# ---------------------------------------------------------------------------

TIME_KEYWORDS: list[tuple[str, int, int]] = [
    ("midnight", 0, 0),
    ("noon", 12, 0),
    ("midday", 12, 0),
    ("morning", 9, 0),
    ("afternoon", 14, 0),
    ("evening", 18, 0),
    ("tonight", 20, 0),
    ("night", 21, 0),
    ("eod", 17, 0),  # end of day
    ("cob", 17, 0),  # close of business
]

_TIME_KEYWORD_PATTERNS = [
    (re.compile(rf"(?:\bat\s+)?\b{word}\b", re.I), time(hour, minute)) for word, hour, minute in TIME_KEYWORDS
]

# "at 3pm", "@ 3:30 pm", "3pm"
_TIME_12H = re.compile(r"(?:\bat\s+|@\s*)?(?<![\d:])(\d{1,2})(?::(\d{2}))?\s*(am|pm)\b", re.I)
# "at 14:30", "@ 9:15"
_TIME_24H = re.compile(r"(?:\bat\s+|@\s*)(\d{1,2}):(\d{2})\b", re.I)


def _time_from_12h(m: re.Match[str]) -> time | None:
    return clock(to_24h(to_int(m.group(1)), m.group(3)), to_int(m.group(2)))


def _time_from_24h(m: re.Match[str]) -> time | None:
    return clock(to_int(m.group(1)), to_int(m.group(2)))


_TIME_PATTERNS: list[tuple[re.Pattern[str], Callable[[re.Match[str]], time | None]]] = [
    (_TIME_12H, _time_from_12h),
    (_TIME_24H, _time_from_24h),
]


def _find_time(text: str) -> tuple[tuple[int, int], time] | None:
    for pattern, at in _TIME_KEYWORD_PATTERNS:
        m = pattern.search(text)
        if m:
            return m.span(), at

    for pattern, convert in _TIME_PATTERNS:
        for m in pattern.finditer(text):
            at = convert(m)
            if at is not None:
                return m.span(), at
    return None


def extract_time(parsed: ParsedTask, cal: Calendar) -> ParsedTask:
    if parsed.scheduled_time is not None:
        return parsed

    found = _find_time(parsed.remaining)
    if found is None:
        return parsed

    span, at = found
    start = cal.combine(cal.today(), at)
    changes: dict = {"scheduled_time": start}
    if parsed.duration_seconds is not None:
        end = add_seconds(start, parsed.duration_seconds)
        if end is not None:
            changes["scheduled_end_time"] = end
    logger.debug("time %r -> %s", parsed.source[span[0]:span[1]], at)
    return parsed.consume(span, **changes)


# ---------------------------------------------------------------------------
# Calendar date
# ---------------------------------------------------------------------------

_UNIT = r"(days?|weeks?|months?)"

RELATIVE_PATTERNS: list[re.Pattern[str]] = [
    re.compile(rf"\bin\s+(\d+)\s*{_UNIT}\b", re.I),
    re.compile(rf"(?<!\d)(\d+)\s*{_UNIT}\s+from\s+now\b", re.I),
]

MONTHS: dict[str, int] = {
    "jan": 1, "january": 1,
    "feb": 2, "february": 2,
    "mar": 3, "march": 3,
    "apr": 4, "april": 4,
    "may": 5,
    "jun": 6, "june": 6,
    "jul": 7, "july": 7,
    "aug": 8, "august": 8,
    "sep": 9, "sept": 9, "september": 9,
    "oct": 10, "october": 10,
    "nov": 11, "november": 11,
    "dec": 12, "december": 12,
}

_MONTH = (
    r"(jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|june?|july?|aug(?:ust)?"
    r"|sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?)"
)
_DAY = r"(\d{1,2})(?:st|nd|rd|th)?"

# (pattern, month_first)
ABSOLUTE_PATTERNS: list[tuple[re.Pattern[str], bool]] = [
    # "Dec 15", "December 15th"
    (re.compile(rf"\b{_MONTH}\.?\s+{_DAY}\b", re.I), True),
    # "15 Dec", "15th December"
    (re.compile(rf"(?<!\d){_DAY}\s+{_MONTH}\b", re.I), False),
    # "12/25", "12-25" (US order)
    (re.compile(r"(?<![\d/\-])(\d{1,2})[/\-](\d{1,2})(?![/\-]?\d)"), True),
]

_NEXT = re.compile(r"\bnext\s+(monday|tuesday|wednesday|thursday|friday|saturday|sunday|week|month)\b", re.I)

_WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")

DateResolver = Callable[[Calendar], datetime]

# Checked in order; first hit wins.
DATE_KEYWORDS: list[tuple[re.Pattern[str], DateResolver]] = [
    (re.compile(r"\btoday\b", re.I), lambda cal: cal.today()),
    (re.compile(r"\btomorrow\b", re.I), lambda cal: cal.tomorrow()),
    (re.compile(r"\btmr\b", re.I), lambda cal: cal.tomorrow()),
    (re.compile(r"\bthis\s+weekend\b", re.I), lambda cal: cal.next_weekday("saturday")),
    (re.compile(r"\bend\s+of\s+(?:the\s+)?week\b", re.I), lambda cal: cal.next_weekday("friday")),
    (re.compile(r"\beow\b", re.I), lambda cal: cal.next_weekday("friday")),
] + [
    (re.compile(rf"\b{day}\b", re.I), lambda cal, day=day: cal.next_weekday(day))
    for day in _WEEKDAYS
]


def parse_month(raw: str) -> int | None:
    if raw.isdigit():
        n = int(raw)
        return n if 1 <= n <= 12 else None
    return MONTHS.get(raw.lower())


def _relative(text: str, cal: Calendar) -> tuple[tuple[int, int], datetime] | None:
    for pattern in RELATIVE_PATTERNS:
        for m in pattern.finditer(text):
            amount = to_int(m.group(1))
            unit = m.group(2).lower()
            try:
                if unit.startswith("day"):
                    day = cal.add_days(cal.today(), amount)
                elif unit.startswith("week"):
                    day = cal.add_days(cal.today(), 7 * amount)
                else:
                    day = cal.add_months(cal.today(), amount)
            except (OverflowError, ValueError):
                logger.debug("relative date %r is out of range", m.group(0))
                continue
            return m.span(), day
    return None


def _absolute(text: str, cal: Calendar) -> tuple[tuple[int, int], datetime] | None:
    today = cal.today()
    for pattern, month_first in ABSOLUTE_PATTERNS:
        for m in pattern.finditer(text):
            first, second = m.group(1), m.group(2)
            if month_first:
                month, day = parse_month(first), to_int(second)
            else:
                month, day = parse_month(second), to_int(first)
            if month is None or not 1 <= day <= 31:
                continue
            try:
                found = today.replace(month=month, day=day)
                if found < today:
                    found = cal.add_years(found, 1)
            except ValueError:
                # Feb 30 and friends, or a rollover past year 9999
                continue
            return m.span(), found
    return None


def _next(text: str, cal: Calendar) -> tuple[tuple[int, int], datetime] | None:
    m = _NEXT.search(text)
    if not m:
        return None
    term = m.group(1).lower()
    if term == "week":
        day = cal.add_days(cal.today(), 7)
    elif term == "month":
        day = cal.add_months(cal.today(), 1)
    else:
        day = cal.next_weekday(term, force_next_week=True)
    return m.span(), day


def _keyword(text: str, cal: Calendar) -> tuple[tuple[int, int], datetime] | None:
    for pattern, resolve in DATE_KEYWORDS:
        m = pattern.search(text)
        if m:
            return m.span(), resolve(cal)
    return None


DATE_RULES = [_relative, _absolute, _next, _keyword]


def extract_date(parsed: ParsedTask, cal: Calendar) -> ParsedTask:
    if parsed.due_date is not None:
        return parsed

    text = parsed.remaining
    for rule in DATE_RULES:
        found = rule(text, cal)
        if found is None:
            continue
        span, day = found
        logger.debug("date %r -> %s", parsed.source[span[0]:span[1]], day.date())
        return parsed.consume(span, due_date=cal.start_of_day(day))
    return parsed


def extract_datetime(parsed: ParsedTask, cal: Calendar) -> ParsedTask:
    return extract_date(extract_time(parsed, cal), cal)
