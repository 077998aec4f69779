# backend/app/db/codec.py

"""
埋め込み JSON フィールドのエンコード / デコード。

タスクの comments / files / history、リードの interactions は
TEXT カラムに JSON 配列として保存される。

- 書き込み: レコードの列（None 可）→ JSON テキスト。None は "[]" になる
- 読み込み: JSON テキスト → レコードの列。NULL・空文字・"null" は [] になる
- 壊れた JSON や必須キー欠落は DatabaseError として扱う

decode(encode(x)) == x が常に成り立つこと。
"""

from __future__ import annotations

import json
from functools import lru_cache
from typing import List, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from app.errors import DatabaseError

M = TypeVar("M", bound=BaseModel)


@lru_cache(maxsize=None)
def _list_adapter(model: Type[BaseModel]) -> TypeAdapter:
    return TypeAdapter(List[model])  # type: ignore[valid-type]


def encode_records(records: Optional[Sequence[BaseModel]]) -> str:
    """レコード列を JSON テキストにする。"""
    if not records:
        return "[]"
    return json.dumps(
        [record.model_dump(mode="json") for record in records],
        ensure_ascii=False,
    )


def decode_records(raw: Optional[str], model: Type[M], *, field: str = "value") -> List[M]:
    """
    JSON テキストを model のリストに戻す。

    :param raw: DB から読んだ TEXT 値
    :param model: 配列要素のモデル
    :param field: エラーメッセージ用のカラム名
    """
    if raw is None:
        return []
    if not isinstance(raw, str):
        raise DatabaseError(f"Stored field '{field}' is not text.")
    if raw.strip() == "":
        return []

    try:
        data = json.loads(raw)
    except ValueError as exc:
        raise DatabaseError(f"Stored field '{field}' is not valid JSON.") from exc

    if data is None:
        return []
    if not isinstance(data, list):
        raise DatabaseError(f"Stored field '{field}' is not a JSON array.")

    try:
        return _list_adapter(model).validate_python(data)
    except PydanticValidationError as exc:
        raise DatabaseError(
            f"Stored field '{field}' contains malformed records: {exc.error_count()} error(s)."
        ) from exc
