from __future__ import annotations

import logging
import math
import re
from datetime import timedelta

from .dates import Calendar, add_seconds
from .types import ParsedTask

logger = logging.getLogger(__name__)

_UNIT = r"(min(?:ute)?s?|hrs?|hours?)\b"

# Anything longer can't be added to a datetime
MAX_SECONDS = timedelta.max.total_seconds()

PATTERNS: list[re.Pattern[str]] = [
    # "for 30 minutes", "for 1.5 hours"
    re.compile(rf"\bfor\s+(\d+(?:\.\d+)?)\s*{_UNIT}", re.I),
    # "30 min", "1hr", "2 hours long"
    re.compile(rf"(?<![\d.])(\d+(?:\.\d+)?)\s*{_UNIT}(?:\s+long\b)?", re.I),
]


def to_seconds(value: str, unit: str) -> int | None:
    """Length in seconds, or None when the amount is too large to schedule."""
    try:
        amount = float(value)
    except ValueError:
        amount = 0.0
    seconds = amount * (60 if unit.lower().startswith("min") else 3600)
    if not math.isfinite(seconds) or seconds > MAX_SECONDS:
        return None
    return int(seconds)


def extract_duration(parsed: ParsedTask, cal: Calendar) -> ParsedTask:
    if parsed.duration_seconds is not None:
        return parsed

    text = parsed.remaining
    for pattern in PATTERNS:
        for m in pattern.finditer(text):
            seconds = to_seconds(m.group(1), m.group(2))
            if seconds is None:
                logger.debug("duration %r is out of range", m.group(0))
                continue
            changes: dict = {"duration_seconds": seconds}
            if parsed.scheduled_time is not None:
                end = add_seconds(parsed.scheduled_time, seconds)
                if end is not None:
                    changes["scheduled_end_time"] = end
            logger.debug("duration %r -> %ss", m.group(0), seconds)
            return parsed.consume(m.span(), **changes)
    return parsed
