from __future__ import annotations

import logging
import re
from datetime import time, timedelta

from .dates import Calendar
from .types import ParsedTask

logger = logging.getLogger(__name__)

_T = r"(\d{1,2})(?::(\d{2}))?"

# Start marker optional, end marker required. The start borrows the end's
# marker when it has none ("2-3pm" is 14:00-15:00).
PATTERNS: list[re.Pattern[str]] = [
    re.compile(rf"(?:\bat\s+)?(?<![\d:]){_T}\s*(am|pm)?\s*[-–—]\s*{_T}\s*(am|pm)\b", re.I),
    re.compile(rf"\bfrom\s+{_T}\s*(am|pm)?\s+to\s+{_T}\s*(am|pm)\b", re.I),
    re.compile(rf"\bbetween\s+{_T}\s*(am|pm)?\s+and\s+{_T}\s*(am|pm)\b", re.I),
]


def to_int(raw: str | None) -> int:
    """Best-effort integer; missing or garbled digits count as 0."""
    if raw is None:
        return 0
    try:
        return int(raw)
    except ValueError:
        return 0


def to_24h(hour: int, ampm: str | None) -> int:
    ampm = (ampm or "").lower()
    if ampm == "pm" and hour != 12:
        return hour + 12
    if ampm == "am" and hour == 12:
        return 0
    return hour


def clock(hour: int, minute: int) -> time | None:
    """A wall-clock time, or None when the numbers aren't a real time."""
    if 0 <= hour <= 23 and 0 <= minute <= 59:
        return time(hour, minute)
    return None


def _clock_range(m: re.Match[str]) -> tuple[time, time] | None:
    end_ampm = m.group(6)
    start_ampm = m.group(3) or end_ampm
    start = clock(to_24h(to_int(m.group(1)), start_ampm), to_int(m.group(2)))
    end = clock(to_24h(to_int(m.group(4)), end_ampm), to_int(m.group(5)))
    if start is None or end is None:
        return None
    return start, end


def extract_time_range(parsed: ParsedTask, cal: Calendar) -> ParsedTask:
    text = parsed.remaining
    for pattern in PATTERNS:
        for m in pattern.finditer(text):
            found = _clock_range(m)
            if found is None:
                logger.debug("time range %r is not a valid clock time", m.group(0))
                continue

            start, end = found
            today = cal.today()
            start_at = cal.combine(today, start)
            end_at = cal.combine(today, end)
            if end_at < start_at:
                # "11pm-1am" runs past midnight
                end_at += timedelta(days=1)

            logger.debug("time range %r -> %s..%s", m.group(0), start, end)
            return parsed.consume(
                m.span(),
                scheduled_time=start_at,
                scheduled_end_time=end_at,
                duration_seconds=int((end_at - start_at).total_seconds()),
            )
    return parsed
