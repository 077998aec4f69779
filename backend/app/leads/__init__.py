"""
リード（見込み客）管理モジュール。

- schemas: Lead と埋め込みレコード Interaction
- service: leads テーブルの CRUD とインタラクション追加
- router: /api/leads エンドポイント
"""

from .schemas import Interaction, InteractionIn, Lead, LeadIn  # noqa: F401
from .service import LeadService  # noqa: F401
