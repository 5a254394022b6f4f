from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace
from datetime import datetime, tzinfo

from ..utils.text import collapse_whitespace, excise
from .dates import Calendar
from .defaults import apply_smart_defaults
from .duration import extract_duration
from .lists import extract_list_hint
from .priority import extract_priority
from .recurrence import extract_recurrence
from .suggestions import build_suggestions
from .timerange import extract_time_range
from .types import ParsedTask
from .when import extract_datetime

logger = logging.getLogger(__name__)

Stage = Callable[[ParsedTask, Calendar], ParsedTask]

# Recurrence goes first: its phrases hold weekday names and numbers the
# later stages would misread. After that, most specific first.
STAGES: list[Stage] = [
    extract_recurrence,
    extract_time_range,
    extract_duration,
    extract_datetime,
    extract_priority,
    extract_list_hint,
    apply_smart_defaults,
]


def sanitize_title(parsed: ParsedTask) -> ParsedTask:
    """Cut every consumed span out of the source and tidy the whitespace."""
    return replace(parsed, clean_title=collapse_whitespace(excise(parsed.source, parsed.consumed)))


def parse(text: str, now: datetime | None = None, tz: tzinfo | str | None = None) -> ParsedTask:
    """
    Pull task attributes out of a line of free text.

    - recurrence ("every monday", "every 2 weeks", "daily")
    - time range ("2-3pm", "from 9 to 11am") or duration ("for 30 min")
    - time of day ("3pm", "at 14:30", "noon") and date ("tomorrow", "Dec 15",
      "next friday", "in 3 days")
    - priority ("urgent", "!!!", "!low") and list hint ("#work")

    `now` and `tz` pin the clock; by default the current time in the
    configured timezone is used. Never raises: anything not understood stays
    in the title.
    """
    cal = Calendar.at(now, tz)
    parsed = ParsedTask.start(text or "")
    for stage in STAGES:
        parsed = stage(parsed, cal)

    parsed = sanitize_title(parsed)
    parsed = replace(parsed, suggestions=build_suggestions(parsed))
    logger.debug("parsed %r -> title=%r, %d suggestions", text, parsed.clean_title, len(parsed.suggestions))
    return parsed
