# backend/app/db/schema.py

"""
起動時のスキーマ作成と初期データ投入。

- 6 テーブルを CREATE TABLE IF NOT EXISTS で作成する（マイグレーションはしない）
- id "1" の admin ユーザーを INSERT OR IGNORE で 1 件だけ投入する

毎回の起動で実行しても、データは重複しない。
"""

from __future__ import annotations

import logging
from typing import List

from .store import Store

logger = logging.getLogger(__name__)

TABLES: List[str] = [
    """
    CREATE TABLE IF NOT EXISTS users (
        id TEXT PRIMARY KEY,
        username TEXT,
        password TEXT,
        name TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS clients (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT,
        email TEXT,
        phone TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS projects (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        title TEXT,
        clientId INTEGER,
        status TEXT,
        deadline TEXT,
        FOREIGN KEY (clientId) REFERENCES clients(id)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS tasks (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        title TEXT,
        projectId INTEGER,
        status TEXT,
        dueDate TEXT,
        area TEXT,
        responsible TEXT,
        comments TEXT,
        files TEXT,
        history TEXT,
        FOREIGN KEY (projectId) REFERENCES projects(id)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS leads (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT,
        email TEXT,
        phone TEXT,
        classification TEXT,
        status TEXT,
        responsible TEXT,
        source TEXT,
        estimatedValue REAL,
        reminder TEXT,
        interactions TEXT,
        createdAt TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS notifications (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        message TEXT,
        userId TEXT,
        read INTEGER DEFAULT 0,
        timestamp TEXT
    )
    """,
]

DEFAULT_ADMIN = ("1", "admin", "admin123", "Admin User")


async def bootstrap(store: Store) -> None:
    """テーブル作成と admin ユーザーの投入をまとめて行う。"""
    async with store.transaction() as tx:
        for ddl in TABLES:
            await tx.execute(ddl)
        # NOTE: パスワードは平文のまま保存している（既知の弱点。ハッシュ化は未対応）
        result = await tx.execute(
            "INSERT OR IGNORE INTO users (id, username, password, name) VALUES (?, ?, ?, ?)",
            DEFAULT_ADMIN,
        )

    if result.rowcount:
        logger.info("Seeded default admin user.")
    logger.info("Database schema is ready (%d tables).", len(TABLES))
