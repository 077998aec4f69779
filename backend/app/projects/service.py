# backend/app/projects/service.py

from __future__ import annotations

import logging
from typing import List

from app.db.store import Executor, Store
from app.errors import DatabaseError, NotFoundError

from .schemas import Project, ProjectIn

logger = logging.getLogger(__name__)


class ProjectService:
    """
    projects テーブルの CRUD。

    削除時は同じトランザクション内で projectId が一致する tasks も削除する。
    clientId の存在チェックはしない（外部キーは強制されていない）。
    """

    def __init__(self, store: Store) -> None:
        self._store = store

    async def _get(self, executor: Executor, project_id: int) -> Project:
        row = await executor.fetch_one("SELECT * FROM projects WHERE id = ?", (project_id,))
        if row is None:
            raise NotFoundError("Project", project_id)
        return Project.model_validate(row)

    async def list_projects(self) -> List[Project]:
        rows = await self._store.fetch_all("SELECT * FROM projects ORDER BY id")
        return [Project.model_validate(row) for row in rows]

    async def create_project(self, data: ProjectIn) -> Project:
        async with self._store.transaction() as tx:
            result = await tx.execute(
                "INSERT INTO projects (title, clientId, status, deadline) VALUES (?, ?, ?, ?)",
                (data.title, data.client_id, data.status, data.deadline),
            )
            if result.last_id is None:
                raise DatabaseError("Insert into projects did not return an id.")
            project = await self._get(tx, result.last_id)

        logger.info("Created project %s (client=%s).", project.id, project.client_id)
        return project

    async def update_project(self, project_id: int, data: ProjectIn) -> Project:
        async with self._store.transaction() as tx:
            result = await tx.execute(
                "UPDATE projects SET title = ?, clientId = ?, status = ?, deadline = ? WHERE id = ?",
                (data.title, data.client_id, data.status, data.deadline, project_id),
            )
            if result.rowcount == 0:
                logger.warning("Update of missing project %s.", project_id)
                raise NotFoundError("Project", project_id)
            return await self._get(tx, project_id)

    async def delete_project(self, project_id: int) -> int:
        """
        プロジェクトと、その projectId を持つタスクを削除する。

        :return: 一緒に削除されたタスク数
        """
        async with self._store.transaction() as tx:
            result = await tx.execute("DELETE FROM projects WHERE id = ?", (project_id,))
            if result.rowcount == 0:
                logger.warning("Delete of missing project %s.", project_id)
                raise NotFoundError("Project", project_id)
            cascade = await tx.execute("DELETE FROM tasks WHERE projectId = ?", (project_id,))

        logger.info("Deleted project %s and %d task(s).", project_id, cascade.rowcount)
        return cascade.rowcount
