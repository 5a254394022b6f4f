from __future__ import annotations

from datetime import datetime

from ..utils.ids import chip_id
from .types import ParsedTask, Suggestion, SuggestionType

ICONS: dict[SuggestionType, str] = {
    SuggestionType.date: "calendar",
    SuggestionType.time: "clock",
    SuggestionType.duration: "timer",
    SuggestionType.priority: "flag.fill",
    SuggestionType.list: "list.bullet",
    SuggestionType.recurrence: "repeat",
}


_MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def format_date(dt: datetime) -> str:
    """Medium style, e.g. 'Oct 18, 2026'."""
    return f"{_MONTH_ABBR[dt.month - 1]} {dt.day}, {dt.year}"


def format_time(dt: datetime) -> str:
    """Short style, e.g. '3:00 PM'."""
    hour = dt.hour % 12 or 12
    return f"{hour}:{dt.minute:02d} {'AM' if dt.hour < 12 else 'PM'}"


def format_duration(seconds: int) -> str:
    hours, minutes = seconds // 3600, (seconds % 3600) // 60
    if hours > 0 and minutes > 0:
        return f"{hours}h {minutes}m"
    if hours > 0:
        return f"{hours} hour{'s' if hours > 1 else ''}"
    return f"{minutes} min"


def _chip(kind: SuggestionType, text: str) -> Suggestion:
    return Suggestion(type=kind, text=text, icon=ICONS[kind], id=chip_id(kind.value, text))


def build_suggestions(parsed: ParsedTask) -> tuple[Suggestion, ...]:
    """One chip per extracted attribute, always in field order."""
    chips: list[Suggestion] = []

    if parsed.due_date is not None:
        chips.append(_chip(SuggestionType.date, format_date(parsed.due_date)))

    if parsed.scheduled_time is not None:
        text = format_time(parsed.scheduled_time)
        if parsed.scheduled_end_time is not None:
            text += " - " + format_time(parsed.scheduled_end_time)
        chips.append(_chip(SuggestionType.time, text))

    # A range already shows the duration
    shown_as_range = parsed.scheduled_time is not None and parsed.scheduled_end_time is not None
    if parsed.duration_seconds is not None and not shown_as_range:
        chips.append(_chip(SuggestionType.duration, format_duration(parsed.duration_seconds)))

    if parsed.priority > 0:
        chips.append(_chip(SuggestionType.priority, parsed.priority_name))

    if parsed.list_hint is not None:
        chips.append(_chip(SuggestionType.list, parsed.list_hint.capitalize()))

    if parsed.recurrence is not None:
        chips.append(_chip(SuggestionType.recurrence, parsed.recurrence.label))

    return tuple(chips)
