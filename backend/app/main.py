# backend/app/main.py

"""
バックエンドアプリケーションのエントリーポイント。

- /api/users, /api/clients, /api/projects, /api/tasks, /api/leads, /api/notifications
- /health
- FRONTEND_DIR が設定されていれば / でフロントエンドの静的ファイルも配信する

起動時（lifespan）に DB へ接続し、テーブル作成と admin ユーザー投入を行う。
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.clients.router import router as clients_router
from app.config import AppSettings, get_app_settings
from app.db.config import DatabaseSettings, get_database_settings
from app.db.schema import bootstrap
from app.db.store import Store
from app.errors import register_exception_handlers
from app.leads.router import router as leads_router
from app.notifications.router import router as notifications_router
from app.projects.router import router as projects_router
from app.tasks.router import router as tasks_router
from app.users.router import router as users_router
from app.utils.log_config import setup_logging

logger = logging.getLogger(__name__)


def create_app(
    database_settings: Optional[DatabaseSettings] = None,
    app_settings: Optional[AppSettings] = None,
) -> FastAPI:
    """
    FastAPI アプリケーションファクトリ。

    :param database_settings: 省略時は環境変数から読み込む（テストでは一時ファイルを渡す）
    :param app_settings: 省略時は環境変数から読み込む
    """
    setup_logging()
    db_settings = database_settings or get_database_settings()
    settings = app_settings or get_app_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        store = Store(db_settings)
        await store.connect()
        try:
            await bootstrap(store)
            app.state.store = store
            yield
        finally:
            app.state.store = None
            await store.close()

    app = FastAPI(title="CRM Workspace Backend", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    # ルーター登録
    app.include_router(users_router)
    app.include_router(clients_router)
    app.include_router(projects_router)
    app.include_router(tasks_router)
    app.include_router(leads_router)
    app.include_router(notifications_router)

    @app.get("/health", tags=["health"])
    def health_check() -> dict:
        """
        簡易ヘルスチェックエンドポイント。
        モニタリングや動作確認用。
        """
        return {"status": "ok"}

    # API ルートより後にマウントする（/ がすべてを拾ってしまうため）
    if settings.frontend_dir:
        frontend = Path(settings.frontend_dir)
        if frontend.is_dir():
            app.mount("/", StaticFiles(directory=str(frontend), html=True), name="frontend")
            logger.info("Serving frontend from %s", frontend)
        else:
            logger.warning("FRONTEND_DIR %s does not exist; static files are not served.", frontend)

    return app


# uvicorn 実行時のエントリーポイント
app = create_app()
