from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from datetime import datetime

from ..utils.text import Span, mask


class Frequency(str, enum.Enum):
    daily = "daily"
    weekly = "weekly"
    monthly = "monthly"
    yearly = "yearly"
    weekdays = "weekdays"  # Mon-Fri
    weekends = "weekends"  # Sat-Sun


class SuggestionType(str, enum.Enum):
    date = "date"
    time = "time"
    duration = "duration"
    priority = "priority"
    list = "list"
    recurrence = "recurrence"


PRIORITY_NAMES: dict[int, str] = {0: "None", 1: "Low", 2: "Medium", 3: "High"}

_SHORT_DAY_NAMES = ["", "Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


def ordinal(n: int) -> str:
    if (n // 10) % 10 == 1:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


@dataclass(frozen=True, slots=True)
class RecurrenceRule:
    frequency: Frequency
    interval: int = 1
    weekdays: tuple[int, ...] | None = None  # weekly only, Sunday=1 ... Saturday=7
    day_of_month: int | None = None  # monthly only

    @property
    def label(self) -> str:
        n = self.interval
        if self.frequency == Frequency.daily:
            return "Daily" if n == 1 else f"Every {n} days"
        if self.frequency == Frequency.weekly:
            if self.weekdays:
                names = [_SHORT_DAY_NAMES[d] for d in self.weekdays if 1 <= d <= 7]
                return f"Weekly on {', '.join(names)}"
            return "Weekly" if n == 1 else f"Every {n} weeks"
        if self.frequency == Frequency.monthly:
            if self.day_of_month is not None:
                return f"Monthly on the {ordinal(self.day_of_month)}"
            return "Monthly" if n == 1 else f"Every {n} months"
        if self.frequency == Frequency.yearly:
            return "Yearly" if n == 1 else f"Every {n} years"
        if self.frequency == Frequency.weekdays:
            return "Every weekday"
        return "Every weekend"


@dataclass(frozen=True, slots=True)
class Suggestion:
    type: SuggestionType
    text: str
    icon: str
    id: str = ""


@dataclass(frozen=True, slots=True)
class ParsedTask:
    """Result of parsing one line of task input.

    Stages never edit `source`; they record the spans they used in `consumed`
    and read `remaining`, which has those spans blanked out. The title is cut
    out of `source` once, at the end.
    """

    source: str
    consumed: tuple[Span, ...] = ()
    clean_title: str = ""
    due_date: datetime | None = None
    scheduled_time: datetime | None = None
    scheduled_end_time: datetime | None = None
    duration_seconds: int | None = None
    priority: int = 0
    list_hint: str | None = None
    is_deadline_only: bool = False
    recurrence: RecurrenceRule | None = None
    suggestions: tuple[Suggestion, ...] = field(default=())

    @classmethod
    def start(cls, text: str) -> ParsedTask:
        return cls(source=text, clean_title=text)

    @property
    def remaining(self) -> str:
        return mask(self.source, self.consumed)

    @property
    def priority_name(self) -> str:
        return PRIORITY_NAMES.get(self.priority, "Priority")

    def consume(self, span: Span, **changes) -> ParsedTask:
        """Return a copy with `span` claimed and `changes` applied."""
        return replace(self, consumed=(*self.consumed, span), **changes)
