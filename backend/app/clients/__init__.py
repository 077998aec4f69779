"""
クライアント（顧客）管理モジュール。

- schemas: /api/clients 用の Pydantic モデル
- service: clients テーブルの CRUD とプロジェクトへのカスケード削除
- router: /api/clients エンドポイント
"""

from .schemas import Client, ClientIn  # noqa: F401
from .service import ClientService  # noqa: F401
