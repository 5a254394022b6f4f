"""Date shortcuts used by command-style callers (an AI tool layer, mostly).

Those callers send a keyword such as "tomorrow" or "next_week" instead of
free text, plus an optional explicit date string for "specific_date".
"""

from __future__ import annotations

import logging
from datetime import datetime

from dateparser import parse as parse_date

from .dates import WEEKDAY_NUMBERS, Calendar

logger = logging.getLogger(__name__)


def _specific(raw: str, cal: Calendar) -> datetime | None:
    settings = {
        "PREFER_DATES_FROM": "future",
        "RELATIVE_BASE": cal.now.replace(tzinfo=None),
        "DATE_ORDER": "MDY",
    }
    found = parse_date(raw, languages=["en"], settings=settings)
    if found is None:
        logger.info("could not read specific_date %r", raw)
        return None
    if found.tzinfo is None:
        found = found.replace(tzinfo=cal.tz)
    else:
        found = found.astimezone(cal.tz)
    return cal.start_of_day(found)


def resolve_shortcut(when: str, cal: Calendar, specific_date: str | None = None) -> datetime | None:
    """Start of the day a shortcut names, or None if it names nothing."""
    key = when.strip().lower()
    if key == "today":
        return cal.today()
    if key == "tomorrow":
        return cal.tomorrow()
    if key == "next_week":
        return cal.add_days(cal.today(), 7)
    if key == "next_month":
        return cal.add_months(cal.today(), 1)
    if key == "specific_date":
        if not specific_date:
            return None
        return _specific(specific_date, cal)
    if key in WEEKDAY_NUMBERS:
        # Rescheduling to "friday" on a Friday means next Friday
        day = cal.next_weekday(key)
        return cal.add_days(day, 7) if day == cal.today() else day
    return None
