"""
プロジェクト管理モジュール。

- schemas: /api/projects 用の Pydantic モデル
- service: projects テーブルの CRUD とタスクへのカスケード削除
- router: /api/projects エンドポイント
"""

from .schemas import Project, ProjectIn  # noqa: F401
from .service import ProjectService  # noqa: F401
