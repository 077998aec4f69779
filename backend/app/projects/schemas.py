# backend/app/projects/schemas.py

"""
/api/projects 用のスキーマ定義。
"""

from typing import Optional

from pydantic import Field

from app.schemas import ApiModel


class ProjectIn(ApiModel):
    """プロジェクト作成・更新（全項目置き換え）のリクエストボディ。"""

    title: str = Field(..., min_length=1, description="プロジェクト名")
    client_id: Optional[int] = Field(
        None,
        description="紐づくクライアント ID。クライアント削除時にこのプロジェクトも削除される。",
    )
    status: Optional[str] = Field(None, description="進捗ステータス（自由テキスト）")
    deadline: Optional[str] = Field(None, description="締め切り日（ISO8601 文字列）")


class Project(ProjectIn):
    """保存済みのプロジェクト。"""

    id: int = Field(..., description="ストアが採番した ID")
    title: Optional[str] = None
