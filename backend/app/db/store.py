# backend/app/db/store.py

"""
SQLite（aiosqlite）への薄い非同期ラッパー。

- execute / fetch_one / fetch_all の 3 つのプリミティブだけを提供する
- パラメータは必ず位置パラメータ（?）でバインドする。文字列埋め込みは禁止
- 複数ステートメントの処理（カスケード削除・read-modify-write）は
  transaction() の中で実行し、失敗時はまとめてロールバックする

接続は 1 本を共有する。ステートメント単位・トランザクション単位で
asyncio.Lock を取るため、別リクエストのステートメントが
トランザクションの途中に割り込むことはない。

タイムアウトは待機を打ち切るだけで、aiosqlite のワーカースレッドに渡した
ステートメントは止まらない。transaction() の中なら続けて ROLLBACK が実行されるが、
Store.execute() で単発実行した書き込みはタイムアウト後に反映されうる。
そのためサービス層の書き込みはすべて transaction() の中で行う。
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any, AsyncIterator, Awaitable, Dict, List, Optional, Protocol, Sequence, TypeVar

import aiosqlite

from app.errors import DatabaseError

from .config import DatabaseSettings

logger = logging.getLogger(__name__)

Row = Dict[str, Any]
Params = Sequence[Any]

T = TypeVar("T")


@dataclass(frozen=True)
class ExecuteResult:
    """INSERT / UPDATE / DELETE の結果。"""

    rowcount: int
    last_id: Optional[int] = None


class Executor(Protocol):
    """
    Store とトランザクションセッションが共通に持つインターフェース。

    サービス層のテストではこの Protocol を満たすダミーを差し込める。
    """

    async def execute(self, sql: str, params: Params = ()) -> ExecuteResult:  # pragma: no cover - Protocol
        ...

    async def fetch_one(self, sql: str, params: Params = ()) -> Optional[Row]:  # pragma: no cover - Protocol
        ...

    async def fetch_all(self, sql: str, params: Params = ()) -> List[Row]:  # pragma: no cover - Protocol
        ...


class StoreSession:
    """
    接続 1 本に対してステートメントを直接発行するセッション。

    ロックは取らない。Store 経由か、transaction() の中でのみ使うこと。
    """

    def __init__(self, conn: aiosqlite.Connection, timeout_seconds: float) -> None:
        self._conn = conn
        self._timeout = timeout_seconds

    async def _run(self, sql: str, awaitable: Awaitable[T]) -> T:
        try:
            return await asyncio.wait_for(awaitable, timeout=self._timeout)
        except asyncio.TimeoutError as exc:
            logger.error("Statement timed out after %.1fs: %s", self._timeout, sql)
            raise DatabaseError(f"Database operation timed out after {self._timeout}s.") from exc
        except aiosqlite.Error as exc:
            logger.error("Statement failed: %s (%s)", sql, exc)
            raise DatabaseError(str(exc)) from exc

    async def execute(self, sql: str, params: Params = ()) -> ExecuteResult:
        async def _execute() -> ExecuteResult:
            cursor = await self._conn.execute(sql, tuple(params))
            try:
                return ExecuteResult(rowcount=cursor.rowcount, last_id=cursor.lastrowid)
            finally:
                await cursor.close()

        return await self._run(sql, _execute())

    async def fetch_one(self, sql: str, params: Params = ()) -> Optional[Row]:
        async def _fetch_one() -> Optional[Row]:
            async with self._conn.execute(sql, tuple(params)) as cursor:
                row = await cursor.fetchone()
            return dict(row) if row is not None else None

        return await self._run(sql, _fetch_one())

    async def fetch_all(self, sql: str, params: Params = ()) -> List[Row]:
        async def _fetch_all() -> List[Row]:
            async with self._conn.execute(sql, tuple(params)) as cursor:
                rows = await cursor.fetchall()
            return [dict(row) for row in rows]

        return await self._run(sql, _fetch_all())


class Store:
    """
    アプリ全体で共有する DB ハンドル。

    FastAPI の lifespan で connect() / close() され、app.state.store に置かれる。
    """

    def __init__(self, settings: DatabaseSettings) -> None:
        self._settings = settings
        self._conn: Optional[aiosqlite.Connection] = None
        self._session: Optional[StoreSession] = None
        self._lock = asyncio.Lock()

    @property
    def settings(self) -> DatabaseSettings:
        return self._settings

    @property
    def is_connected(self) -> bool:
        return self._conn is not None

    async def connect(self) -> None:
        if self._conn is not None:
            return
        try:
            # isolation_level=None: autocommit。トランザクションは BEGIN で明示的に張る
            conn = await aiosqlite.connect(self._settings.path, isolation_level=None)
        except aiosqlite.Error as exc:
            raise DatabaseError(f"Failed to open database {self._settings.path}: {exc}") from exc
        conn.row_factory = aiosqlite.Row
        self._conn = conn
        self._session = StoreSession(conn, self._settings.timeout_seconds)
        logger.info("Connected to database %s", self._settings.path)

    async def close(self) -> None:
        if self._conn is None:
            return
        await self._conn.close()
        self._conn = None
        self._session = None
        logger.info("Closed database %s", self._settings.path)

    def _require_session(self) -> StoreSession:
        if self._session is None:
            raise DatabaseError("Database is not connected.")
        return self._session

    async def execute(self, sql: str, params: Params = ()) -> ExecuteResult:
        session = self._require_session()
        async with self._lock:
            return await session.execute(sql, params)

    async def fetch_one(self, sql: str, params: Params = ()) -> Optional[Row]:
        session = self._require_session()
        async with self._lock:
            return await session.fetch_one(sql, params)

    async def fetch_all(self, sql: str, params: Params = ()) -> List[Row]:
        session = self._require_session()
        async with self._lock:
            return await session.fetch_all(sql, params)

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[StoreSession]:
        """
        BEGIN 〜 COMMIT を張り、ブロック内で例外が出たら ROLLBACK する。

        ブロック内では yield されたセッションを使うこと
        （Store 自身のメソッドを呼ぶとロック待ちで止まる）。
        """
        session = self._require_session()
        async with self._lock:
            await session.execute("BEGIN")
            try:
                yield session
                await session.execute("COMMIT")
            except BaseException:
                try:
                    await session.execute("ROLLBACK")
                except DatabaseError:
                    logger.exception("Rollback failed.")
                raise
