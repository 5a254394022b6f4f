from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime

from .dates import Calendar, add_seconds
from .types import ParsedTask

logger = logging.getLogger(__name__)


def _anchor(parsed: ParsedTask, day: datetime, cal: Calendar) -> ParsedTask:
    """Move the start onto `day` keeping its clock time; the end keeps its offset."""
    start = parsed.scheduled_time
    moved = cal.combine(day, start.time())
    end = parsed.scheduled_end_time
    if end is not None:
        end = add_seconds(moved, (end - start).total_seconds())
    return replace(parsed, scheduled_time=moved, scheduled_end_time=end)


def apply_smart_defaults(parsed: ParsedTask, cal: Calendar) -> ParsedTask:
    """Give a bare time a date, and put a dated time on that date."""
    if parsed.scheduled_time is not None and parsed.due_date is None:
        today_at = cal.combine(cal.today(), parsed.scheduled_time.time())
        day = cal.tomorrow() if today_at < cal.now else cal.today()
        logger.debug("no date given for %s, using %s", today_at.time(), day.date())
        parsed = replace(parsed, due_date=day)

    if parsed.scheduled_time is not None and parsed.due_date is not None:
        parsed = _anchor(parsed, parsed.due_date, cal)

    deadline_only = (
        parsed.scheduled_time is not None
        and parsed.scheduled_end_time is None
        and parsed.duration_seconds is None
    )
    return replace(parsed, is_deadline_only=deadline_only)
