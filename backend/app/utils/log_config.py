# backend/app/utils/log_config.py

"""
アプリケーション全体のログ設定。
"""

import logging

from .config import get_env

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_HANDLER_NAME = "app-stream"


def setup_logging(level: str | None = None) -> logging.Logger:
    """
    `app` ロガーに StreamHandler を 1 つだけ取り付ける。

    create_app() が複数回呼ばれても（テストなど）ハンドラは重複しない。
    """
    level_name = (level or get_env("LOG_LEVEL", default="INFO", required=False) or "INFO").upper()

    app_logger = logging.getLogger("app")
    app_logger.setLevel(getattr(logging, level_name, logging.INFO))

    if not any(h.get_name() == _HANDLER_NAME for h in app_logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        app_logger.addHandler(handler)

    return app_logger
