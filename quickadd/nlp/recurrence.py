"""Repeating-schedule phrases: "every monday", "every 2 weeks", "daily"...

Runs before every other stage, since these phrases contain weekday names and
numbers that the date and duration stages would otherwise claim.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from .dates import Calendar, weekday_number
from .types import Frequency, ParsedTask, RecurrenceRule

logger = logging.getLogger(__name__)

_WEEKDAY = r"(?:monday|tuesday|wednesday|thursday|friday|saturday|sunday|mon|tue|wed|thu|fri|sat|sun)"

# Handlers return None for values no schedule can hold ("every 0 days")
Handler = Callable[[re.Match[str]], RecurrenceRule | None]

MAX_INTERVAL = 999


def _to_int(raw: str | None, default: int) -> int:
    try:
        return int(raw) if raw is not None else default
    except ValueError:
        return default


def _every_n(m: re.Match[str]) -> RecurrenceRule | None:
    interval = _to_int(m.group(1), 1)
    if not 1 <= interval <= MAX_INTERVAL:
        return None
    unit = m.group(2).lower()
    if unit.startswith("day"):
        freq = Frequency.daily
    elif unit.startswith("week"):
        freq = Frequency.weekly
    elif unit.startswith("month"):
        freq = Frequency.monthly
    else:
        freq = Frequency.yearly
    return RecurrenceRule(freq, interval=interval)


def _on_weekday(m: re.Match[str]) -> RecurrenceRule:
    return RecurrenceRule(Frequency.weekly, weekdays=(weekday_number(m.group(1)),))


def _day_of_month(m: re.Match[str]) -> RecurrenceRule | None:
    day = _to_int(m.group(1), 1)
    if not 1 <= day <= 31:
        return None
    return RecurrenceRule(Frequency.monthly, day_of_month=day)


def _fixed(freq: Frequency) -> Handler:
    return lambda _m: RecurrenceRule(freq)


# Most specific first; the first pattern that matches wins.
PATTERNS: list[tuple[re.Pattern[str], Handler]] = [
    (re.compile(r"\b(?:every\s+weekday|on\s+weekdays|weekdays)\b", re.I), _fixed(Frequency.weekdays)),
    (re.compile(r"\b(?:every\s+weekend|on\s+weekends|weekends)\b", re.I), _fixed(Frequency.weekends)),
    (re.compile(r"\bevery\s+(\d+)\s+(days?|weeks?|months?|years?)\b", re.I), _every_n),
    (re.compile(rf"\bevery\s+({_WEEKDAY})\b", re.I), _on_weekday),
    (re.compile(rf"\bweekly\s+on\s+({_WEEKDAY})\b", re.I), _on_weekday),
    (re.compile(r"\b(?:every\s+month|monthly)\s+on\s+the\s+(\d{1,2})(?:st|nd|rd|th)?\b", re.I), _day_of_month),
    (re.compile(r"\bdaily\b", re.I), _fixed(Frequency.daily)),
    (re.compile(r"\bweekly\b", re.I), _fixed(Frequency.weekly)),
    (re.compile(r"\bmonthly\b", re.I), _fixed(Frequency.monthly)),
    (re.compile(r"\byearly\b", re.I), _fixed(Frequency.yearly)),
    (re.compile(r"\bannually\b", re.I), _fixed(Frequency.yearly)),
    (re.compile(r"\bevery\s+day\b", re.I), _fixed(Frequency.daily)),
    (re.compile(r"\bevery\s+week\b", re.I), _fixed(Frequency.weekly)),
    (re.compile(r"\bevery\s+month\b", re.I), _fixed(Frequency.monthly)),
    (re.compile(r"\bevery\s+year\b", re.I), _fixed(Frequency.yearly)),
]


def extract_recurrence(parsed: ParsedTask, cal: Calendar) -> ParsedTask:
    text = parsed.remaining
    for pattern, handler in PATTERNS:
        for m in pattern.finditer(text):
            rule = handler(m)
            if rule is None:
                logger.debug("recurrence %r is out of range", m.group(0))
                continue
            logger.debug("recurrence %r -> %s", m.group(0), rule)
            return parsed.consume(m.span(), recurrence=rule)
    return parsed
