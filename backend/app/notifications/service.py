# backend/app/notifications/service.py

"""
通知の保存・一覧・既読化を行うサービス。
"""

from __future__ import annotations

import logging
from typing import List

from app.db.store import Executor, Store
from app.errors import DatabaseError, NotFoundError
from app.utils.clock import utc_now_iso

from .schemas import Notification, NotificationIn

logger = logging.getLogger(__name__)


class NotificationService:
    """
    notifications テーブルへのアクセス。

    - list_notifications: 全件
    - create_notification: timestamp を付けて保存（read=false）
    - mark_read: read=true にする。何度呼んでも結果は同じ
    """

    def __init__(self, store: Store) -> None:
        self._store = store

    async def _get(self, executor: Executor, notification_id: int) -> Notification:
        row = await executor.fetch_one("SELECT * FROM notifications WHERE id = ?", (notification_id,))
        if row is None:
            raise NotFoundError("Notification", notification_id)
        return Notification.model_validate(row)

    async def list_notifications(self) -> List[Notification]:
        rows = await self._store.fetch_all("SELECT * FROM notifications ORDER BY id")
        return [Notification.model_validate(row) for row in rows]

    async def create_notification(self, data: NotificationIn) -> Notification:
        async with self._store.transaction() as tx:
            result = await tx.execute(
                "INSERT INTO notifications (message, userId, read, timestamp) VALUES (?, ?, 0, ?)",
                (data.message, data.user_id, utc_now_iso()),
            )
            if result.last_id is None:
                raise DatabaseError("Insert into notifications did not return an id.")
            notification = await self._get(tx, result.last_id)

        logger.info("Created notification %s for user %s.", notification.id, notification.user_id)
        return notification

    async def mark_read(self, notification_id: int) -> Notification:
        async with self._store.transaction() as tx:
            result = await tx.execute(
                "UPDATE notifications SET read = 1 WHERE id = ?",
                (notification_id,),
            )
            if result.rowcount == 0:
                logger.warning("Mark-read of missing notification %s.", notification_id)
                raise NotFoundError("Notification", notification_id)
            return await self._get(tx, notification_id)
