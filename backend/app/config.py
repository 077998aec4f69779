# backend/app/config.py

"""
Web 層（CORS・静的ファイル配信）の設定値。
"""

from dataclasses import dataclass
from typing import List, Optional

from app.utils.config import get_env, get_env_list


@dataclass(frozen=True)
class AppSettings:
    """アプリケーション全体の設定値コンテナ。"""

    cors_allow_origins: List[str]
    frontend_dir: Optional[str] = None


def get_app_settings() -> AppSettings:
    """
    環境変数から Web 層の設定を読み込む。

    任意:
      - CORS_ALLOW_ORIGINS (デフォルト: *。カンマ区切り)
      - FRONTEND_DIR       (設定時のみ / に静的ファイルをマウント)
    """
    return AppSettings(
        cors_allow_origins=get_env_list("CORS_ALLOW_ORIGINS", default="*"),
        frontend_dir=get_env("FRONTEND_DIR", required=False),
    )
