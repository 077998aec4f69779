# backend/app/notifications/schemas.py

"""
/api/notifications 用のスキーマ定義。

- timestamp は作成時に UTC で設定される
- read は作成時 false。既読化は false → true の一方向のみ（トグルしない）
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from app.schemas import ApiModel


class NotificationIn(ApiModel):
    """通知作成のリクエストボディ。"""

    message: str = Field(..., min_length=1, description="通知本文。プレーンテキスト想定。")
    user_id: Optional[str] = Field(None, description="通知先ユーザー ID")


class Notification(ApiModel):
    """保存済みの通知 1 件。"""

    id: int
    message: Optional[str] = None
    user_id: Optional[str] = None
    read: bool = Field(False, description="既読フラグ（DB 上は 0 / 1）")
    timestamp: Optional[str] = Field(None, description="作成時刻（ISO8601, UTC）")
