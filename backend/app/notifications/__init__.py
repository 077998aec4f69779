"""
通知モジュール。

構成:
- schemas: 通知 1 件のスキーマ（message / userId / read / timestamp）
- service: notifications テーブルの一覧・作成・既読化
- router: /api/notifications エンドポイント
"""

from .schemas import Notification, NotificationIn  # noqa: F401
from .service import NotificationService  # noqa: F401
