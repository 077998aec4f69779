# backend/app/leads/schemas.py

"""
/api/leads 用のスキーマ定義。

- interactions は API 上は JSON 配列、DB 上は JSON テキスト
- createdAt は作成時に 1 度だけ設定され、更新では変わらない
"""

from decimal import Decimal
from typing import List, Optional, Union

from pydantic import Field, field_serializer

from app.schemas import ApiModel, EmbeddedRecord

INTERACTION_USER = "admin"
"""インタラクション追加時に記録する固定ユーザー名（認証は未実装）。"""


class Interaction(EmbeddedRecord):
    """
    リードとのやり取り 1 件。

    id は旧サーバーが書いた数値（ミリ秒タイムスタンプ）と、新しい文字列 ID の両方を受け付ける。
    """

    id: Union[int, str]
    text: str
    user: str
    timestamp: str


class InteractionIn(ApiModel):
    """POST /api/leads/{id}/interactions のリクエストボディ。"""

    text: str = Field(..., min_length=1, description="やり取りの内容")


class LeadIn(ApiModel):
    """リード作成・更新（全項目置き換え）のリクエストボディ。"""

    name: str = Field(..., min_length=1, description="リード名（会社名 or 担当者名）")
    email: Optional[str] = None
    phone: Optional[str] = None
    classification: Optional[str] = Field(None, description="温度感などの分類（hot / warm / cold 等）")
    status: Optional[str] = None
    responsible: Optional[str] = Field(None, description="担当者")
    source: Optional[str] = Field(None, description="流入元")
    estimated_value: Optional[Decimal] = Field(None, description="見込み金額")
    reminder: Optional[str] = Field(None, description="リマインダー日時（ISO8601 文字列）")
    interactions: Optional[List[Interaction]] = None


class Lead(ApiModel):
    """保存済みのリード。"""

    id: int
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    classification: Optional[str] = None
    status: Optional[str] = None
    responsible: Optional[str] = None
    source: Optional[str] = None
    estimated_value: Optional[Decimal] = None
    reminder: Optional[str] = None
    interactions: List[Interaction] = Field(default_factory=list)
    created_at: Optional[str] = None

    @field_serializer("estimated_value", when_used="json")
    def _serialize_estimated_value(self, value: Optional[Decimal]) -> Optional[float]:
        # フロントエンドは数値として扱うため文字列にしない
        return float(value) if value is not None else None
