from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from .. import crud
from ..db import get_session
from ..nlp.dates import Calendar
from ..nlp.shortcuts import resolve_shortcut
from ..schemas import TaskCreate, TaskOut, TaskUpdate
from .parse import check_timezone

router = APIRouter()


class RescheduleIn(BaseModel):
    when: str  # today | tomorrow | next_week | next_month | <weekday> | specific_date
    specific_date: str | None = None
    timezone: str | None = None


@router.post("", response_model=TaskOut)
async def create_task(payload: TaskCreate, db: AsyncSession = Depends(get_session)):
    if payload.list_id is not None and not await crud.get_list(db, payload.list_id):
        raise HTTPException(404, "List not found")
    return await crud.create_task(db, payload)


@router.get("", response_model=list[TaskOut])
async def list_tasks(
    completed: bool | None = Query(None, description="Filter by completion"),
    list_id: int | None = Query(None, description="Filter by list"),
    limit: int = 100,
    offset: int = 0,
    db: AsyncSession = Depends(get_session),
):
    return await crud.list_tasks(db, completed=completed, list_id=list_id, limit=limit, offset=offset)


@router.get("/{task_id}", response_model=TaskOut)
async def get_task(task_id: int, db: AsyncSession = Depends(get_session)):
    task = await crud.get_task(db, task_id)
    if not task:
        raise HTTPException(404, "Task not found")
    return task


@router.patch("/{task_id}", response_model=TaskOut)
async def update_task(task_id: int, payload: TaskUpdate, db: AsyncSession = Depends(get_session)):
    task = await crud.update_task(db, task_id, payload)
    if not task:
        raise HTTPException(404, "Task not found")
    return task


@router.post("/{task_id}/reschedule", response_model=TaskOut)
async def reschedule_task(task_id: int, payload: RescheduleIn, db: AsyncSession = Depends(get_session)):
    task = await crud.get_task(db, task_id)
    if not task:
        raise HTTPException(404, "Task not found")
    cal = Calendar.at(tz=check_timezone(payload.timezone))
    day = resolve_shortcut(payload.when, cal, payload.specific_date)
    if day is None:
        raise HTTPException(400, f"Can't work out a date from {payload.when!r}")
    return await crud.reschedule_task(db, task, day.date())


@router.delete("/{task_id}")
async def delete_task(task_id: int, db: AsyncSession = Depends(get_session)):
    ok = await crud.delete_task(db, task_id)
    if not ok:
        raise HTTPException(404, "Task not found")
    return {"deleted": True}
