# backend/app/users/schemas.py

"""
/api/users 用のスキーマ定義。

※ パスワードは平文で保存・返却している（既知の弱点）。
  ハッシュ化や認証は現時点のスコープ外。
"""

from typing import Optional

from pydantic import Field

from app.schemas import ApiModel


class User(ApiModel):
    """users テーブルの 1 行。GET /api/users はこのまま返す。"""

    id: str
    username: Optional[str] = None
    password: Optional[str] = None
    name: Optional[str] = None


class UserRegisterRequest(ApiModel):
    """POST /api/users/register のリクエストボディ。"""

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)


class UserRegisterResponse(ApiModel):
    """登録結果。パスワードは含めない。"""

    id: str
    username: str
    name: str
