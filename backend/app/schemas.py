# backend/app/schemas.py

"""
各エンティティのスキーマで共通に使う基底モデル。

- Python 側の属性は snake_case、JSON（リクエスト/レスポンス）と DB カラムは camelCase
- 埋め込み JSON レコード（コメント・ファイル・履歴・インタラクション）は
  受け取ったキーをそのまま保存して返す
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """camelCase エイリアスで入出力するモデルの基底クラス。"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EmbeddedRecord(BaseModel):
    """
    TEXT カラムに JSON 配列として保存されるレコードの基底クラス。

    必須キーだけを宣言し、それ以外のキーは extra としてそのまま保持する。
    キー名の変換や null の補完はしないので、保存・返却される JSON は受け取ったものと同じになる。
    """

    model_config = ConfigDict(extra="allow")


class MessageResponse(BaseModel):
    """削除系エンドポイントの共通レスポンス。"""

    message: str = Field(..., description="人間向けの結果メッセージ")
