# backend/app/tasks/service.py

from __future__ import annotations

import logging
from typing import Any, Dict, List, Tuple

from app.db.codec import decode_records, encode_records
from app.db.store import Executor, Row, Store
from app.errors import DatabaseError, NotFoundError

from .schemas import Comment, FileReference, HistoryEntry, Task, TaskIn

logger = logging.getLogger(__name__)


def task_from_row(row: Row) -> Task:
    """DB の行を Task に変換する（JSON カラムはデコードする）。"""
    data: Dict[str, Any] = dict(row)
    data["comments"] = decode_records(row.get("comments"), Comment, field="comments")
    data["files"] = decode_records(row.get("files"), FileReference, field="files")
    data["history"] = decode_records(row.get("history"), HistoryEntry, field="history")
    return Task.model_validate(data)


def _task_params(data: TaskIn) -> Tuple[Any, ...]:
    return (
        data.title,
        data.project_id,
        data.status,
        data.due_date,
        data.area,
        data.responsible,
        encode_records(data.comments),
        encode_records(data.files),
        encode_records(data.history),
    )


class TaskService:
    """tasks テーブルの CRUD。"""

    def __init__(self, store: Store) -> None:
        self._store = store

    async def _get(self, executor: Executor, task_id: int) -> Task:
        row = await executor.fetch_one("SELECT * FROM tasks WHERE id = ?", (task_id,))
        if row is None:
            raise NotFoundError("Task", task_id)
        return task_from_row(row)

    async def list_tasks(self) -> List[Task]:
        rows = await self._store.fetch_all("SELECT * FROM tasks ORDER BY id")
        return [task_from_row(row) for row in rows]

    async def create_task(self, data: TaskIn) -> Task:
        async with self._store.transaction() as tx:
            result = await tx.execute(
                "INSERT INTO tasks (title, projectId, status, dueDate, area, responsible, comments, files, history) "
                "VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)",
                _task_params(data),
            )
            if result.last_id is None:
                raise DatabaseError("Insert into tasks did not return an id.")
            task = await self._get(tx, result.last_id)

        logger.info("Created task %s (project=%s).", task.id, task.project_id)
        return task

    async def update_task(self, task_id: int, data: TaskIn) -> Task:
        async with self._store.transaction() as tx:
            result = await tx.execute(
                "UPDATE tasks SET title = ?, projectId = ?, status = ?, dueDate = ?, area = ?, "
                "responsible = ?, comments = ?, files = ?, history = ? WHERE id = ?",
                _task_params(data) + (task_id,),
            )
            if result.rowcount == 0:
                logger.warning("Update of missing task %s.", task_id)
                raise NotFoundError("Task", task_id)
            return await self._get(tx, task_id)

    async def delete_task(self, task_id: int) -> None:
        async with self._store.transaction() as tx:
            result = await tx.execute("DELETE FROM tasks WHERE id = ?", (task_id,))
            if result.rowcount == 0:
                logger.warning("Delete of missing task %s.", task_id)
                raise NotFoundError("Task", task_id)
        logger.info("Deleted task %s.", task_id)
