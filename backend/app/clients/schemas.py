# backend/app/clients/schemas.py

"""
/api/clients 用のスキーマ定義。
"""

from typing import Optional

from pydantic import Field

from app.schemas import ApiModel


class ClientIn(ApiModel):
    """クライアント作成・更新（全項目置き換え）のリクエストボディ。"""

    name: str = Field(..., min_length=1, description="クライアント名")
    email: Optional[str] = Field(None, description="連絡先メールアドレス")
    phone: Optional[str] = Field(None, description="電話番号")


class Client(ClientIn):
    """保存済みのクライアント。"""

    id: int = Field(..., description="ストアが採番した ID")
    name: Optional[str] = None
