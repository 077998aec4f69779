# backend/app/db/config.py

"""
データベース接続に必要な設定値をまとめるモジュール。
"""

from dataclasses import dataclass

from app.utils.config import get_env, get_env_float

DEFAULT_DATABASE_PATH = "crm.db"
DEFAULT_TIMEOUT_SECONDS = 5.0


@dataclass(frozen=True)
class DatabaseSettings:
    """SQLite ストア用の設定値コンテナ。"""

    path: str
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS


def get_database_settings() -> DatabaseSettings:
    """
    環境変数から DB 設定を読み込む。

    任意:
      - DATABASE_PATH            (デフォルト: crm.db)
      - DATABASE_TIMEOUT_SECONDS (デフォルト: 5 秒、1 ステートメントあたり)
    """
    path = get_env("DATABASE_PATH", default=DEFAULT_DATABASE_PATH, required=False)
    timeout_seconds = get_env_float("DATABASE_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS)

    return DatabaseSettings(path=path, timeout_seconds=timeout_seconds)
