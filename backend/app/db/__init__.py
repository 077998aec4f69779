"""
データアクセス層。

- config: DB ファイルパス・タイムアウトの設定値
- store: aiosqlite の薄いラッパー（execute / fetch_one / fetch_all / transaction）
- codec: 埋め込み JSON フィールドのエンコード・デコード
- schema: 起動時のテーブル作成と admin ユーザー投入
- deps: FastAPI の Depends 用プロバイダ
"""

from .config import DatabaseSettings, get_database_settings  # noqa: F401
from .store import ExecuteResult, Executor, Store  # noqa: F401
