from datetime import UTC, date, timedelta

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import Task, TaskList
from .schemas import TaskCreate, TaskListCreate, TaskUpdate

_DATETIME_FIELDS = ("scheduled_start", "scheduled_end")


def _normalize_dt(dt):
    if dt is None:
        return None
    # If tz-aware, convert to UTC and drop tzinfo (store naive UTC)
    if getattr(dt, "tzinfo", None) is not None:
        return dt.astimezone(UTC).replace(tzinfo=None)
    return dt


def _normalize(data: dict) -> dict:
    for key in _DATETIME_FIELDS:
        if key in data:
            data[key] = _normalize_dt(data[key])
    return data


async def create_task(db: AsyncSession, payload: TaskCreate) -> Task:
    task = Task(**_normalize(payload.model_dump()))
    db.add(task)
    await db.commit()
    await db.refresh(task)
    return task


async def get_task(db: AsyncSession, task_id: int) -> Task | None:
    res = await db.execute(select(Task).where(Task.id == task_id))
    return res.scalar_one_or_none()


async def list_tasks(
    db: AsyncSession,
    completed: bool | None = None,
    list_id: int | None = None,
    limit: int = 100,
    offset: int = 0,
) -> list[Task]:
    stmt = select(Task).order_by(Task.created_at.desc(), Task.id.desc())
    if completed is not None:
        stmt = stmt.where(Task.completed == completed)
    if list_id is not None:
        stmt = stmt.where(Task.list_id == list_id)
    stmt = stmt.limit(limit).offset(offset)
    res = await db.execute(stmt)
    return list(res.scalars().all())


async def update_task(db: AsyncSession, task_id: int, payload: TaskUpdate) -> Task | None:
    task = await get_task(db, task_id)
    if not task:
        return None
    for k, v in _normalize(payload.model_dump(exclude_unset=True)).items():
        setattr(task, k, v)
    await db.commit()
    await db.refresh(task)
    return task


async def delete_task(db: AsyncSession, task_id: int) -> bool:
    task = await get_task(db, task_id)
    if not task:
        return False
    await db.delete(task)
    await db.commit()
    return True


async def create_list(db: AsyncSession, payload: TaskListCreate) -> TaskList:
    task_list = TaskList(name=payload.name.strip())
    db.add(task_list)
    await db.commit()
    await db.refresh(task_list)
    return task_list


async def get_list(db: AsyncSession, list_id: int) -> TaskList | None:
    res = await db.execute(select(TaskList).where(TaskList.id == list_id))
    return res.scalar_one_or_none()


async def get_list_by_name(db: AsyncSession, name: str) -> TaskList | None:
    res = await db.execute(select(TaskList).where(func.lower(TaskList.name) == name.strip().lower()))
    return res.scalars().first()


async def list_lists(db: AsyncSession) -> list[TaskList]:
    res = await db.execute(select(TaskList).order_by(TaskList.id))
    return list(res.scalars().all())


async def reschedule_task(db: AsyncSession, task: Task, day: date) -> Task:
    """Move a task to another day; a scheduled block moves with it."""
    if task.due_date is not None:
        shift = timedelta(days=(day - task.due_date).days)
        if task.scheduled_start is not None:
            task.scheduled_start += shift
        if task.scheduled_end is not None:
            task.scheduled_end += shift
    task.due_date = day
    await db.commit()
    await db.refresh(task)
    return task
