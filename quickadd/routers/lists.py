from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from .. import crud
from ..db import get_session
from ..schemas import TaskListCreate, TaskListOut

router = APIRouter()


@router.post("", response_model=TaskListOut)
async def create_list(payload: TaskListCreate, db: AsyncSession = Depends(get_session)):
    if await crud.get_list_by_name(db, payload.name):
        raise HTTPException(409, "A list with that name already exists")
    return await crud.create_list(db, payload)


@router.get("", response_model=list[TaskListOut])
async def list_lists(db: AsyncSession = Depends(get_session)):
    return await crud.list_lists(db)


@router.get("/{list_id}", response_model=TaskListOut)
async def get_list(list_id: int, db: AsyncSession = Depends(get_session)):
    task_list = await crud.get_list(db, list_id)
    if not task_list:
        raise HTTPException(404, "List not found")
    return task_list
