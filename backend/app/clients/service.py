# backend/app/clients/service.py

from __future__ import annotations

import logging
from typing import List

from app.db.store import Executor, Store
from app.errors import DatabaseError, NotFoundError

from .schemas import Client, ClientIn

logger = logging.getLogger(__name__)


class ClientService:
    """
    clients テーブルの CRUD。

    削除時は同じトランザクション内で clientId が一致する projects も削除する。
    """

    def __init__(self, store: Store) -> None:
        self._store = store

    async def _get(self, executor: Executor, client_id: int) -> Client:
        row = await executor.fetch_one("SELECT * FROM clients WHERE id = ?", (client_id,))
        if row is None:
            raise NotFoundError("Client", client_id)
        return Client.model_validate(row)

    async def list_clients(self) -> List[Client]:
        rows = await self._store.fetch_all("SELECT * FROM clients ORDER BY id")
        return [Client.model_validate(row) for row in rows]

    async def create_client(self, data: ClientIn) -> Client:
        async with self._store.transaction() as tx:
            result = await tx.execute(
                "INSERT INTO clients (name, email, phone) VALUES (?, ?, ?)",
                (data.name, data.email, data.phone),
            )
            if result.last_id is None:
                raise DatabaseError("Insert into clients did not return an id.")
            client = await self._get(tx, result.last_id)

        logger.info("Created client %s.", client.id)
        return client

    async def update_client(self, client_id: int, data: ClientIn) -> Client:
        async with self._store.transaction() as tx:
            result = await tx.execute(
                "UPDATE clients SET name = ?, email = ?, phone = ? WHERE id = ?",
                (data.name, data.email, data.phone, client_id),
            )
            if result.rowcount == 0:
                logger.warning("Update of missing client %s.", client_id)
                raise NotFoundError("Client", client_id)
            return await self._get(tx, client_id)

    async def delete_client(self, client_id: int) -> int:
        """
        クライアントと、その clientId を持つプロジェクトを削除する。

        :return: 一緒に削除されたプロジェクト数
        """
        async with self._store.transaction() as tx:
            result = await tx.execute("DELETE FROM clients WHERE id = ?", (client_id,))
            if result.rowcount == 0:
                logger.warning("Delete of missing client %s.", client_id)
                raise NotFoundError("Client", client_id)
            cascade = await tx.execute("DELETE FROM projects WHERE clientId = ?", (client_id,))

        logger.info("Deleted client %s and %d project(s).", client_id, cascade.rowcount)
        return cascade.rowcount
