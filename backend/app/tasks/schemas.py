# backend/app/tasks/schemas.py

"""
/api/tasks 用のスキーマ定義。

comments / files / history は API 上は JSON 配列、DB 上は JSON テキスト。
要素の型はここで定義し、app.db.codec で検証しながら読み書きする。
必須キー以外（id / user / timestamp / url / size など）は宣言せず、受け取った値をそのまま保持する。
"""

from typing import List, Optional

from pydantic import Field

from app.schemas import ApiModel, EmbeddedRecord


class Comment(EmbeddedRecord):
    """タスクへのコメント 1 件。"""

    text: str = Field(..., description="コメント本文")


class FileReference(EmbeddedRecord):
    """タスクに添付されたファイルへの参照。"""

    name: str = Field(..., description="ファイル名")


class HistoryEntry(EmbeddedRecord):
    """ステータス変更履歴 1 件。"""

    status: str = Field(..., description="変更後のステータス")


class TaskIn(ApiModel):
    """タスク作成・更新（全項目置き換え）のリクエストボディ。"""

    title: str = Field(..., min_length=1, description="タスク名")
    project_id: Optional[int] = Field(
        None,
        description="紐づくプロジェクト ID。プロジェクト削除時にこのタスクも削除される。",
    )
    status: Optional[str] = None
    due_date: Optional[str] = Field(None, description="期限（ISO8601 文字列）")
    area: Optional[str] = None
    responsible: Optional[str] = Field(None, description="担当者")
    comments: Optional[List[Comment]] = None
    files: Optional[List[FileReference]] = None
    history: Optional[List[HistoryEntry]] = None


class Task(ApiModel):
    """保存済みのタスク。埋め込み配列は常にリスト（未設定なら空）。"""

    id: int
    title: Optional[str] = None
    project_id: Optional[int] = None
    status: Optional[str] = None
    due_date: Optional[str] = None
    area: Optional[str] = None
    responsible: Optional[str] = None
    comments: List[Comment] = Field(default_factory=list)
    files: List[FileReference] = Field(default_factory=list)
    history: List[HistoryEntry] = Field(default_factory=list)
