# backend/app/errors.py

"""
アプリケーション共通の例外と、FastAPI への例外ハンドラ登録。

サービス層はこのモジュールの例外だけを投げ、ルーター層は HTTP への変換を
ここで登録したハンドラに任せる。レスポンスは常に
`{"error": <kind>, "message": <text>}` の形になる。
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class AppError(Exception):
    """API 利用者に返すべきエラーの基底クラス。"""

    kind = "internal_error"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """リクエストボディ・パスパラメータの不足や形式不正。"""

    kind = "validation_error"
    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(AppError):
    """一意であるべき値（username など）の重複。"""

    kind = "conflict"
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(AppError):
    """存在しない ID に対する操作。"""

    kind = "not_found"
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, entity: str, entity_id: object) -> None:
        super().__init__(f"{entity} {entity_id} not found.")
        self.entity = entity
        self.entity_id = entity_id


class DatabaseError(AppError):
    """制約違反・接続失敗・タイムアウト・保存済み JSON の破損など。"""

    kind = "database_error"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def _error_response(status_code: int, kind: str, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": kind, "message": message})


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        # loc の先頭は "body" / "path" などなので落とす
        loc = ".".join(str(p) for p in err.get("loc", ())[1:]) or "body"
        parts.append(f"{loc}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts) or "Invalid request."


def register_exception_handlers(app: FastAPI) -> None:
    """
    AppError 系・リクエストバリデーション・想定外例外のハンドラを登録する。

    - ValidationError / ConflictError → 400
    - NotFoundError → 404
    - DatabaseError / その他 → 500
    """

    @app.exception_handler(AppError)
    async def _handle_app_error(request: Request, exc: AppError) -> JSONResponse:
        if isinstance(exc, DatabaseError):
            logger.error("Database error on %s %s: %s", request.method, request.url.path, exc.message)
        return _error_response(exc.status_code, exc.kind, exc.message)

    @app.exception_handler(RequestValidationError)
    async def _handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
        return _error_response(
            status.HTTP_400_BAD_REQUEST,
            ValidationError.kind,
            _format_validation_errors(exc),
        )

    @app.exception_handler(Exception)
    async def _handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unexpected error on %s %s", request.method, request.url.path)
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            AppError.kind,
            "Internal server error.",
        )
