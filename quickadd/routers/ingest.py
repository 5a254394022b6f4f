import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession

from .. import crud
from ..db import get_session
from ..models import TaskList
from ..nlp.lists import resolve_list
from ..nlp.parser import parse
from ..nlp.types import ParsedTask
from ..schemas import TaskCreate, TaskOut
from .parse import check_timezone

logger = logging.getLogger(__name__)

router = APIRouter()


class IngestIn(BaseModel):
    text: str = Field(..., min_length=1)
    channel: str | None = None
    timezone: str | None = None


def task_from_parsed(parsed: ParsedTask, task_list: TaskList | None, channel: str | None) -> TaskCreate:
    rule = parsed.recurrence
    return TaskCreate(
        # Fall back to the raw text when every word was an attribute
        title=(parsed.clean_title or " ".join(parsed.source.split()))[:280],
        channel=channel,
        due_date=parsed.due_date.date() if parsed.due_date else None,
        scheduled_start=parsed.scheduled_time,
        scheduled_end=parsed.scheduled_end_time,
        duration_seconds=parsed.duration_seconds,
        is_deadline_only=parsed.is_deadline_only,
        priority=parsed.priority,
        list_id=task_list.id if task_list else None,
        list_hint=parsed.list_hint if task_list is None else None,
        recurrence_frequency=rule.frequency if rule else None,
        recurrence_interval=rule.interval if rule else None,
        recurrence_weekdays=list(rule.weekdays) if rule and rule.weekdays else None,
        recurrence_day_of_month=rule.day_of_month if rule else None,
    )


@router.post("", response_model=TaskOut)
async def ingest(payload: IngestIn, db: AsyncSession = Depends(get_session)):
    parsed = parse(payload.text, tz=check_timezone(payload.timezone))

    task_list = None
    if parsed.list_hint:
        task_list = resolve_list(parsed.list_hint, await crud.list_lists(db))
        if task_list is None:
            logger.info("no list matches #%s, keeping it as a hint", parsed.list_hint)

    task = task_from_parsed(parsed, task_list, payload.channel or "api")
    return await crud.create_task(db, task)
