# backend/app/users/service.py

from __future__ import annotations

import logging
from typing import List

from app.db.store import Store
from app.errors import ConflictError
from app.utils.clock import new_id

from .schemas import User, UserRegisterRequest, UserRegisterResponse

logger = logging.getLogger(__name__)


class UserService:
    """
    users テーブルの一覧と新規登録。

    username の一意性は DB 制約ではなく、登録時のチェックで担保する。
    チェックと INSERT は同じトランザクションで行う。
    """

    def __init__(self, store: Store) -> None:
        self._store = store

    async def list_users(self) -> List[User]:
        rows = await self._store.fetch_all("SELECT * FROM users")
        return [User.model_validate(row) for row in rows]

    async def register_user(self, data: UserRegisterRequest) -> UserRegisterResponse:
        user_id = new_id()

        async with self._store.transaction() as tx:
            existing = await tx.fetch_one("SELECT id FROM users WHERE username = ?", (data.username,))
            if existing is not None:
                logger.warning("Registration rejected: username %r already exists.", data.username)
                raise ConflictError(f"User '{data.username}' already exists.")

            # TODO: パスワードのハッシュ化（現状は平文保存）
            await tx.execute(
                "INSERT INTO users (id, username, password, name) VALUES (?, ?, ?, ?)",
                (user_id, data.username, data.password, data.name),
            )

        logger.info("Registered user %s (%s).", user_id, data.username)
        return UserRegisterResponse(id=user_id, username=data.username, name=data.name)
