# backend/app/tasks/router.py

from typing import List

from fastapi import APIRouter, Depends

from app.db.deps import get_store
from app.db.store import Store
from app.schemas import MessageResponse

from .schemas import Task, TaskIn
from .service import TaskService

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


def get_task_service(store: Store = Depends(get_store)) -> TaskService:
    return TaskService(store)


@router.get("", response_model=List[Task], summary="タスク一覧")
async def list_tasks(service: TaskService = Depends(get_task_service)) -> List[Task]:
    """comments / files / history はデコード済みの配列として返す。"""
    return await service.list_tasks()


@router.post("", response_model=Task, summary="タスク作成")
async def create_task(
    body: TaskIn,
    service: TaskService = Depends(get_task_service),
) -> Task:
    return await service.create_task(body)


@router.put("/{task_id}", response_model=Task, summary="タスク更新（全項目置き換え）")
async def update_task(
    task_id: int,
    body: TaskIn,
    service: TaskService = Depends(get_task_service),
) -> Task:
    return await service.update_task(task_id, body)


@router.delete("/{task_id}", response_model=MessageResponse, summary="タスク削除")
async def delete_task(
    task_id: int,
    service: TaskService = Depends(get_task_service),
) -> MessageResponse:
    await service.delete_task(task_id)
    return MessageResponse(message="Task deleted")
