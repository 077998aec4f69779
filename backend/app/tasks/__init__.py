"""
タスク管理モジュール。

- schemas: Task と埋め込みレコード（Comment / FileReference / HistoryEntry）
- service: tasks テーブルの CRUD（JSON カラムのエンコード・デコードを含む）
- router: /api/tasks エンドポイント
"""

from .schemas import Comment, FileReference, HistoryEntry, Task, TaskIn  # noqa: F401
from .service import TaskService  # noqa: F401
