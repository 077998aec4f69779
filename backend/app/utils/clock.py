# backend/app/utils/clock.py

"""
タイムスタンプと ID 生成のヘルパー。
"""

import uuid
from datetime import datetime, timezone


def utc_now_iso() -> str:
    """現在時刻を `2024-01-01T00:00:00.000Z` 形式（UTC, ミリ秒）で返す。"""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def new_id() -> str:
    """衝突しない文字列 ID（UUID4 の hex）。"""
    return uuid.uuid4().hex
