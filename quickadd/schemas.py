from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from .nlp.recurrence import MAX_INTERVAL
from .nlp.types import Frequency, SuggestionType


class TaskBase(BaseModel):
    title: str = Field(..., max_length=280)
    notes: str | None = None
    channel: str | None = None
    completed: bool = False
    due_date: date | None = None
    scheduled_start: datetime | None = None
    scheduled_end: datetime | None = None
    duration_seconds: int | None = Field(None, ge=0)
    is_deadline_only: bool = False
    priority: int = Field(0, ge=0, le=3)  # 0 none .. 3 high
    list_id: int | None = None
    list_hint: str | None = None
    recurrence_frequency: Frequency | None = None
    recurrence_interval: int | None = Field(None, ge=1, le=MAX_INTERVAL)
    recurrence_weekdays: list[int] | None = None  # Sunday=1 .. Saturday=7
    recurrence_day_of_month: int | None = Field(None, ge=1, le=31)

    # Serialize enums as their values (e.g., "weekly")
    model_config = ConfigDict(use_enum_values=True)


class TaskCreate(TaskBase):
    pass


class TaskUpdate(BaseModel):
    title: str | None = Field(None, max_length=280)
    notes: str | None = None
    completed: bool | None = None
    due_date: date | None = None
    scheduled_start: datetime | None = None
    scheduled_end: datetime | None = None
    duration_seconds: int | None = Field(None, ge=0)
    priority: int | None = Field(None, ge=0, le=3)
    list_id: int | None = None


class TaskOut(TaskBase):
    model_config = ConfigDict(from_attributes=True, use_enum_values=True)
    id: int
    created_at: datetime
    updated_at: datetime


class TaskListCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)


class TaskListOut(TaskListCreate):
    model_config = ConfigDict(from_attributes=True)
    id: int
    created_at: datetime


class RecurrenceRuleOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, use_enum_values=True)

    frequency: Frequency
    interval: int
    weekdays: list[int] | None = None
    day_of_month: int | None = None
    label: str


class SuggestionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, use_enum_values=True)

    id: str
    type: SuggestionType
    text: str
    icon: str


class ParsedTaskOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    source: str
    clean_title: str
    due_date: datetime | None = None
    scheduled_time: datetime | None = None
    scheduled_end_time: datetime | None = None
    duration_seconds: int | None = None
    priority: int
    priority_name: str
    list_hint: str | None = None
    is_deadline_only: bool
    recurrence: RecurrenceRuleOut | None = None
    suggestions: list[SuggestionOut]


class ParseIn(BaseModel):
    text: str
    # Pin the clock (and its timezone); the server's clock is used when absent
    now: datetime | None = None
    timezone: str | None = None
